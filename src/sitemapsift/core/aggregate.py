# SitemapSift — Leaf URL aggregation
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Iterable, List, Optional, Set


class UrlCollector:
	"""Accumulates leaf URLs; finalize() dedups and sorts once.

	Fed from a single coordinating thread, so it holds no lock.
	"""

	def __init__(self) -> None:
		self._urls: Set[str] = set()
		self._added = 0
		self._final: Optional[List[str]] = None

	def add(self, url: str) -> None:
		if self._final is not None:
			raise RuntimeError("collector already finalized")
		self._urls.add(url)
		self._added += 1

	def extend(self, urls: Iterable[str]) -> None:
		for u in urls:
			self.add(u)

	@property
	def added(self) -> int:
		"""Emitted URLs, duplicates included."""
		return self._added

	def finalize(self) -> List[str]:
		if self._final is None:
			self._final = sorted(self._urls)
		return self._final

	def __len__(self) -> int:
		return len(self._urls)
