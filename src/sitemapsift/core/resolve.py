# SitemapSift — Recursive sitemap resolution with date pruning
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Dict, Iterable, List, Set, Tuple

from .aggregate import UrlCollector
from .cutoff import is_recent
from .fetch import SitemapFetcher
from .sitemap import DocumentKind, classify, parse_references


logger = logging.getLogger(__name__)


class ResolveStats:
	def __init__(self) -> None:
		self.fetched = 0
		self.failed = 0
		self.pruned = 0
		self.skipped = 0
		self.limited = 0
		self.leaves = 0

	def as_dict(self) -> Dict[str, int]:
		return dict(vars(self))


class _Outcome:
	"""What one worker learned about one sitemap URL."""

	def __init__(self, url: str) -> None:
		self.url = url
		self.error = ""
		self.kind = DocumentKind.URL_SET
		self.children: List[str] = []
		self.leaves: List[str] = []
		self.pruned = 0


class SitemapResolver:
	"""Walk sitemap indexes down to url-sets, keeping entries at or after the cutoff.

	Workers only fetch and parse. The coordinating thread owns the visited set,
	the limits and the collector, and schedules children as their parents
	complete. Index children older than the cutoff are never fetched.

	max_depth and max_sitemaps of 0 mean unlimited.
	"""

	def __init__(
		self,
		fetcher: SitemapFetcher,
		cutoff: str,
		collector: UrlCollector,
		max_depth: int = 10,
		max_sitemaps: int = 10000,
		workers: int = 4,
	) -> None:
		self.fetcher = fetcher
		self.cutoff = cutoff
		self.collector = collector
		self.max_depth = max(0, int(max_depth))
		self.max_sitemaps = max(0, int(max_sitemaps))
		self.workers = max(1, int(workers))

	def _process(self, url: str) -> _Outcome:
		out = _Outcome(url)
		logger.info("Processing sitemap: %s", url)
		res = self.fetcher.fetch(url)
		if not res.ok:
			out.error = res.error or "no content"
			return out
		out.kind = classify(res.text)
		refs = parse_references(res.text, out.kind)
		fresh = [ref.location for ref in refs if is_recent(ref.last_modified, self.cutoff)]
		if out.kind is DocumentKind.INDEX:
			out.children = fresh
			out.pruned = len(refs) - len(fresh)
			logger.info("Sitemap index found: %d nested sitemap(s), %d older than %s", len(fresh), out.pruned, self.cutoff)
		else:
			out.leaves = fresh
			logger.info("Extracted %d of %d URLs from %s", len(fresh), len(refs), url)
		return out

	def resolve(self, entry_points: Iterable[str]) -> ResolveStats:
		stats = ResolveStats()
		visited: Set[str] = set()
		pending: Dict[Future, Tuple[str, int]] = {}

		with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="sitemap") as pool:

			def schedule(url: str, depth: int) -> None:
				if url in visited:
					stats.skipped += 1
					logger.debug("Already visited, skipping %s", url)
					return
				if self.max_depth and depth > self.max_depth:
					stats.limited += 1
					logger.warning("Max depth %d reached, not following %s", self.max_depth, url)
					return
				if self.max_sitemaps and len(visited) >= self.max_sitemaps:
					stats.limited += 1
					logger.warning("Sitemap fetch limit %d reached, not following %s", self.max_sitemaps, url)
					return
				visited.add(url)
				pending[pool.submit(self._process, url)] = (url, depth)

			for url in entry_points:
				schedule(url, 0)

			while pending:
				done, _ = wait(list(pending), return_when=FIRST_COMPLETED)
				for fut in done:
					url, depth = pending.pop(fut)
					try:
						out = fut.result()
					except Exception as e:
						# a failed worker only drops its own subtree
						stats.failed += 1
						logger.warning("Error while processing %s: %r. Skipping.", url, e)
						continue
					if out.error:
						stats.failed += 1
						logger.warning("Could not fetch or content is empty for %s (%s). Skipping.", url, out.error)
						continue
					stats.fetched += 1
					stats.pruned += out.pruned
					stats.leaves += len(out.leaves)
					self.collector.extend(out.leaves)
					for child in out.children:
						schedule(child, depth + 1)
		return stats
