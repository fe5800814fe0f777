# SitemapSift — Sitemap classification and record parsing
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

"""Tolerant, non-validating sitemap scanner.

Accepted subset:
  * A document is an index when it contains ``<sitemapindex``; anything else is
    read as a url-set.
  * Records end at ``</sitemap>`` (index) or ``</url>`` (url-set).
  * Per record, the first ``<loc>...</loc>`` is the location and the first
    ``<lastmod>...</lastmod>`` the date (first 10 characters kept).
  * Tags must be literal and unprefixed. No namespace handling and no entity
    decoding; ``<image:loc>`` and similar extension tags never match.

Broken or truncated XML still yields whatever complete records it contains.
"""

import enum
from dataclasses import dataclass
from typing import List, Optional

from .cutoff import normalize_lastmod


class DocumentKind(enum.Enum):
	INDEX = "index"
	URL_SET = "urlset"


@dataclass(frozen=True)
class SitemapReference:
	"""A <loc> with its optional <lastmod>, from either a <sitemap> or a <url> record."""

	location: str
	last_modified: Optional[str] = None


RECORD_END = {
	DocumentKind.INDEX: "</sitemap>",
	DocumentKind.URL_SET: "</url>",
}


def classify(text: str) -> DocumentKind:
	return DocumentKind.INDEX if "<sitemapindex" in text else DocumentKind.URL_SET


def _first_element(record: str, tag: str) -> Optional[str]:
	open_tag = f"<{tag}>"
	start = record.find(open_tag)
	if start < 0:
		return None
	start += len(open_tag)
	end = record.find(f"</{tag}>", start)
	if end < 0:
		return None
	return record[start:end]


def parse_references(text: str, kind: Optional[DocumentKind] = None) -> List[SitemapReference]:
	"""Split text into records and return one SitemapReference per record with a <loc>."""
	if kind is None:
		kind = classify(text)
	refs: List[SitemapReference] = []
	for record in text.split(RECORD_END[kind]):
		loc = _first_element(record, "loc")
		if loc is None:
			continue
		loc = loc.strip()
		if not loc:
			continue
		refs.append(SitemapReference(loc, normalize_lastmod(_first_element(record, "lastmod"))))
	return refs
