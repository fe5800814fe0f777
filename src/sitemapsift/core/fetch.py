# SitemapSift — Sitemap fetching (redirects, gzip, failure results)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import gzip
import logging
import zlib
from typing import Optional

import requests
from urllib3.exceptions import HTTPError as Urllib3Error


logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"
# urllib3 lets some URL parse errors (e.g. LocationParseError) through requests unwrapped
FETCH_ERRORS = (requests.RequestException, Urllib3Error, ValueError, UnicodeError)


class FetchResult:
	"""Body text of a fetched document, or the reason there is none."""

	def __init__(self, url: str, text: Optional[str] = None, status: int = 0, error: Optional[str] = None) -> None:
		self.url = url
		self.text = text
		self.status = status
		self.error = error

	@property
	def ok(self) -> bool:
		return self.error is None and bool(self.text)

	def __repr__(self) -> str:
		return f"FetchResult(url={self.url!r}, status={self.status}, error={self.error!r})"


def decode_body(content: bytes) -> str:
	"""Gunzip when the payload is still compressed, then decode (UTF-8, else latin-1).

	requests already undoes Content-Encoding: gzip; a .xml.gz file served as
	application/x-gzip arrives with the magic bytes intact.
	"""
	if content[:2] == GZIP_MAGIC:
		content = gzip.decompress(content)
	try:
		return content.decode("utf-8")
	except UnicodeDecodeError:
		return content.decode("latin-1")


class SitemapFetcher:
	"""GETs sitemap and robots.txt documents. Never raises on network trouble or malformed URLs."""

	def __init__(self, session: requests.Session, timeout: float = 20.0) -> None:
		self.session = session
		self.timeout = timeout

	def fetch(self, url: str) -> FetchResult:
		try:
			r = self.session.get(url, timeout=self.timeout, allow_redirects=True)
		except FETCH_ERRORS as e:
			return FetchResult(url, error=f"request failed: {e}")
		if not 200 <= r.status_code < 300:
			return FetchResult(url, status=r.status_code, error=f"HTTP {r.status_code}")
		try:
			text = decode_body(r.content or b"")
		except (OSError, EOFError, zlib.error) as e:
			# gzip.BadGzipFile is an OSError
			return FetchResult(url, status=r.status_code, error=f"bad gzip body: {e}")
		if not text.strip():
			return FetchResult(url, status=r.status_code, error="empty body")
		return FetchResult(url, text=text, status=r.status_code)

	def head_status(self, url: str) -> int:
		"""Final HTTP status of a HEAD request (GET when HEAD is refused); 0 on network error."""
		try:
			r = self.session.head(url, timeout=self.timeout, allow_redirects=True)
			if r.status_code in (405, 501):
				r = self.session.get(url, timeout=self.timeout, allow_redirects=True, stream=True)
				r.close()
			return r.status_code
		except FETCH_ERRORS as e:
			logger.warning("HEAD check failed for %s: %s", url, e)
			return 0
