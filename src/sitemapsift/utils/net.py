# SitemapSift — Networking utilities (requests session with retries)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


def build_session(user_agent: str, retries: int = 3, backoff: float = 0.5) -> requests.Session:
	"""Build a requests Session for sitemap and robots.txt fetches.

	Redirects are followed by requests itself; Retry only covers throttling and
	server errors on idempotent methods.
	"""
	s = requests.Session()
	s.headers.update(
		{
			"User-Agent": user_agent,
			"Accept": "application/xml,text/xml;q=0.9,text/plain;q=0.8,*/*;q=0.5",
			"Accept-Encoding": "gzip, deflate",
		}
	)
	retry = Retry(
		total=retries,
		backoff_factor=backoff,
		status_forcelist=(429, 500, 502, 503, 504),
		allowed_methods=frozenset({"GET", "HEAD"}),
		raise_on_status=False,
	)
	adapter = HTTPAdapter(max_retries=retry)
	s.mount("http://", adapter)
	s.mount("https://", adapter)
	return s
