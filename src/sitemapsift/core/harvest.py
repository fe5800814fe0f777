# SitemapSift — Harvest pipeline (cutoff, discovery, resolution, output)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from datetime import date
from typing import List, Optional

import requests

from .aggregate import UrlCollector
from .cutoff import compute_cutoff
from .fetch import SitemapFetcher
from .resolve import ResolveStats, SitemapResolver
from .robots import discover_entry_points
from ..storage.writers import UrlListWriter
from ..utils.net import build_session
from ..utils.urls import normalize_target


logger = logging.getLogger(__name__)


class HarvestOptions:
	def __init__(
		self,
		days: int = 1,
		workers: int = 4,
		max_depth: int = 10,
		max_sitemaps: int = 10000,
	):
		if int(days) < 0:
			raise ValueError(f"days must be >= 0, got {days}")
		self.days = int(days)
		self.workers = max(1, int(workers))
		self.max_depth = max(0, int(max_depth))
		self.max_sitemaps = max(0, int(max_sitemaps))


class HarvestResult:
	def __init__(self, target: str, cutoff: str, output_path: str) -> None:
		self.target = target
		self.cutoff = cutoff
		self.output_path = output_path
		self.entry_points: List[str] = []
		self.urls: List[str] = []
		self.stats = ResolveStats()

	@property
	def count(self) -> int:
		return len(self.urls)


class Harvester:
	"""Turns a site or sitemap URL into a fresh, sorted `<host>_urls.txt`."""

	def __init__(
		self,
		user_agent: str,
		output_dir: str = ".",
		timeout: float = 20.0,
		retries: int = 3,
		backoff: float = 0.5,
		output_suffix: str = "_urls.txt",
		session: Optional[requests.Session] = None,
	) -> None:
		self.session = session or build_session(user_agent=user_agent, retries=retries, backoff=backoff)
		self.fetcher = SitemapFetcher(self.session, timeout=timeout)
		self.output_dir = output_dir
		self.output_suffix = output_suffix

	def harvest(self, target: str, options: HarvestOptions, today: Optional[date] = None) -> HarvestResult:
		"""Run one harvest. ValueError for a target without a host, DiscoveryError when no sitemap is found."""
		target = normalize_target(target)
		writer = UrlListWriter(target, output_dir=self.output_dir, suffix=self.output_suffix)
		cutoff = compute_cutoff(options.days, today=today)
		res = HarvestResult(target, cutoff, writer.path)
		logger.info("Filtering for URLs modified on or after %s (%d days).", cutoff, options.days)

		writer.reset()
		logger.info("Starting sitemap processing for: %s", target)
		logger.info("Output will be saved to: %s", writer.path)

		res.entry_points = discover_entry_points(self.fetcher, target)

		collector = UrlCollector()
		resolver = SitemapResolver(
			self.fetcher,
			cutoff,
			collector,
			max_depth=options.max_depth,
			max_sitemaps=options.max_sitemaps,
			workers=options.workers,
		)
		res.stats = resolver.resolve(res.entry_points)
		res.urls = collector.finalize()
		writer.write(res.urls)

		logger.info("Scraping complete! %s", res.stats.as_dict())
		logger.info("Found %d unique URLs matching the date criteria.", res.count)
		logger.info("Results saved in %s", writer.path)
		return res
