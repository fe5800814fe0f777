# SitemapSift — Sitemap entry-point discovery (direct link, robots.txt, default path)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import List

from .fetch import SitemapFetcher
from ..utils.urls import is_sitemap_url, site_url


logger = logging.getLogger(__name__)


class DiscoveryError(RuntimeError):
	"""No sitemap entry point could be found for a target."""


def sitemaps_from_robots(text: str) -> List[str]:
	"""URLs named by `Sitemap:` directives, in file order, without repeats."""
	sitemaps: List[str] = []
	for line in text.splitlines():
		line = line.strip()
		if not line.lower().startswith("sitemap:"):
			continue
		tokens = line.split(":", 1)[1].split()
		if tokens and tokens[0] not in sitemaps:
			sitemaps.append(tokens[0])
	return sitemaps


def discover_entry_points(fetcher: SitemapFetcher, target: str) -> List[str]:
	"""Initial sitemap URLs for a site origin or a direct sitemap link.

	Raises DiscoveryError when robots.txt and /sitemap.xml both come up empty.
	"""
	if is_sitemap_url(target):
		logger.info("Direct sitemap URL provided. Skipping discovery.")
		return [target]

	robots_url = site_url(target, "robots.txt")
	logger.info("Checking for sitemaps in %s", robots_url)
	res = fetcher.fetch(robots_url)
	if res.ok:
		found = sitemaps_from_robots(res.text)
		if found:
			logger.info("robots.txt lists %d sitemap(s)", len(found))
			return found
	else:
		logger.warning("Could not read %s: %s", robots_url, res.error)

	default_url = site_url(target, "sitemap.xml")
	logger.info("No sitemaps found in robots.txt. Trying default %s", default_url)
	status = fetcher.head_status(default_url)
	if status == 200:
		logger.info("Found default sitemap at %s", default_url)
		return [default_url]
	raise DiscoveryError(f"Could not find any sitemaps for {target} (robots.txt empty, {default_url} -> {status or 'no response'})")
