import threading
from types import SimpleNamespace

import pytest


class MockResponse:
	def __init__(self, body=b"", status_code=200, headers=None, json_data=None):
		if isinstance(body, str):
			body = body.encode("utf-8")
		self.content = body
		self.status_code = status_code
		self.headers = headers or {}
		self._json = json_data

	@property
	def text(self):
		return self.content.decode("utf-8", errors="replace")

	def json(self):
		if self._json is None:
			raise ValueError("no JSON body")
		return self._json

	def close(self):
		pass


class MockSession:
	"""Maps URL -> body (str/bytes), status code (int), MockResponse or exception.

	Unknown URLs answer 404. Every call is recorded.
	"""

	def __init__(self, mapping=None, heads=None, posts=None):
		self.mapping = mapping or {}
		self.heads = heads or {}
		self.posts = posts or {}
		self.headers = {"User-Agent": "test-agent"}
		self.calls = []
		self.head_calls = []
		self.post_calls = []
		self._lock = threading.Lock()

	def _answer(self, value):
		if value is None:
			return MockResponse(b"", status_code=404)
		if isinstance(value, BaseException):
			raise value
		if isinstance(value, MockResponse):
			return value
		if isinstance(value, int):
			return MockResponse(b"", status_code=value)
		return MockResponse(value)

	def get(self, url, **kwargs):
		with self._lock:
			self.calls.append(url)
		return self._answer(self.mapping.get(url))

	def head(self, url, **kwargs):
		with self._lock:
			self.head_calls.append(url)
		if url in self.heads:
			return self._answer(self.heads[url])
		value = self.mapping.get(url)
		if isinstance(value, BaseException):
			raise value
		if isinstance(value, MockResponse):
			return MockResponse(b"", status_code=value.status_code)
		if isinstance(value, int):
			return MockResponse(b"", status_code=value)
		return MockResponse(b"", status_code=404 if value is None else 200)

	def post(self, url, json=None, headers=None, **kwargs):
		with self._lock:
			self.post_calls.append((url, json, headers))
		value = self.posts.get(json["url"]) if json else None
		return self._answer(value)


@pytest.fixture
def mock_session():
	return MockSession


@pytest.fixture
def mock_response():
	return MockResponse


def urlset(*entries):
	"""entries: (loc, lastmod-or-None) pairs."""
	parts = ['<?xml version="1.0" encoding="UTF-8"?>', '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">']
	for loc, lastmod in entries:
		parts.append("<url><loc>%s</loc>%s</url>" % (loc, f"<lastmod>{lastmod}</lastmod>" if lastmod else ""))
	parts.append("</urlset>")
	return "\n".join(parts)


def sitemapindex(*entries):
	parts = ['<?xml version="1.0" encoding="UTF-8"?>', '<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">']
	for loc, lastmod in entries:
		parts.append("<sitemap><loc>%s</loc>%s</sitemap>" % (loc, f"<lastmod>{lastmod}</lastmod>" if lastmod else ""))
	parts.append("</sitemapindex>")
	return "\n".join(parts)


@pytest.fixture
def xml():
	return SimpleNamespace(urlset=urlset, sitemapindex=sitemapindex)
