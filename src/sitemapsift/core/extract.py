# SitemapSift — Extraction: URL list to Markdown via the Firecrawl scrape API
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import Iterable, List

import requests

from ..storage.writers import MarkdownWriter


logger = logging.getLogger(__name__)


class ExtractionError(RuntimeError):
	pass


class FirecrawlClient:
	def __init__(
		self,
		session: requests.Session,
		api_key: str,
		endpoint: str = "https://api.firecrawl.dev/v0/scrape",
		timeout: float = 60.0,
	) -> None:
		if not api_key:
			raise ValueError("Firecrawl API key is not set")
		self.session = session
		self.api_key = api_key
		self.endpoint = endpoint
		self.timeout = timeout

	def scrape_markdown(self, url: str) -> str:
		"""POST one URL to the scrape endpoint and return data.markdown."""
		try:
			r = self.session.post(
				self.endpoint,
				json={"url": url},
				headers={"Authorization": f"Bearer {self.api_key}"},
				timeout=self.timeout,
			)
		except requests.RequestException as e:
			raise ExtractionError(f"request failed: {e}") from e
		try:
			payload = r.json()
		except ValueError as e:
			raise ExtractionError(f"invalid JSON response (HTTP {r.status_code})") from e
		data = payload.get("data") if isinstance(payload, dict) else None
		markdown = data.get("markdown") if isinstance(data, dict) else None
		if not isinstance(markdown, str):
			message = payload.get("error") if isinstance(payload, dict) else None
			raise ExtractionError(message or "Unknown API error")
		return markdown


class ExtractSummary:
	def __init__(self) -> None:
		self.saved: List[str] = []
		self.failed: List[str] = []


def extract_urls(client: FirecrawlClient, urls: Iterable[str], writer: MarkdownWriter) -> ExtractSummary:
	"""Scrape each URL and save its Markdown; failures are logged and counted, not raised."""
	summary = ExtractSummary()
	for url in urls:
		url = url.strip()
		if not url:
			continue
		logger.info("Processing URL: %s", url)
		try:
			markdown = client.scrape_markdown(url)
		except ExtractionError as e:
			logger.warning("Failed to process %s. API Response: %s", url, e)
			summary.failed.append(url)
			continue
		path = writer.write(url, markdown)
		logger.info("Successfully created %s", path)
		summary.saved.append(path)
	logger.info("Extraction complete: %d saved, %d failed", len(summary.saved), len(summary.failed))
	return summary
