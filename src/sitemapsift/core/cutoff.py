# SitemapSift — Date cutoff and lastmod normalization
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import re
from datetime import date, timedelta
from typing import Optional


_ISO_DAY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def compute_cutoff(days_ago: int = 1, today: Optional[date] = None) -> str:
	"""Calendar date `days_ago` days before today, as YYYY-MM-DD.

	Plain date arithmetic: the time of day never shifts the result.
	"""
	if days_ago < 0:
		raise ValueError(f"days_ago must be >= 0, got {days_ago}")
	today = today or date.today()
	return (today - timedelta(days=days_ago)).isoformat()


def normalize_lastmod(raw: Optional[str]) -> Optional[str]:
	"""Keep the date part of a <lastmod> value; None when it is not a real date."""
	if not raw:
		return None
	day = raw.strip()[:10]
	if not _ISO_DAY.match(day):
		return None
	try:
		return date.fromisoformat(day).isoformat()
	except ValueError:
		return None


def is_recent(last_modified: Optional[str], cutoff: str) -> bool:
	"""Undated entries count as recent; dated ones compare lexically with the cutoff."""
	return last_modified is None or last_modified >= cutoff
