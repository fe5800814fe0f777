# SitemapSift — URL utilities: targets, hosts, sitemap paths and slugs
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import re
from urllib.parse import urlparse


SITEMAP_SUFFIXES = (".xml", ".xml.gz")
_SLUG_UNSAFE = re.compile(r"[^a-zA-Z0-9-]")


def normalize_target(target: str) -> str:
	"""Strip whitespace and default to https:// when no scheme is given."""
	target = (target or "").strip()
	if target and "://" not in target:
		return "https://" + target.lstrip("/")
	return target


def is_sitemap_url(url: str) -> bool:
	"""True when the URL path points at an XML (or gzipped XML) document."""
	path = urlparse(url).path.lower()
	return path.endswith(SITEMAP_SUFFIXES)


def site_url(base: str, name: str) -> str:
	"""Append a file name to a site URL, e.g. site_url("https://x.test/", "robots.txt")."""
	return base.rstrip("/") + "/" + name.lstrip("/")


def host_of(url: str) -> str:
	"""Host component of a URL, lower-cased and without port.

	Raises ValueError when the URL carries no host at all.
	"""
	host = urlparse(url).hostname or ""
	if not host:
		raise ValueError(f"Could not parse a valid host name from {url!r}")
	return host


def url_slug(url: str) -> str:
	"""Filesystem-safe slug from the last path segment of a URL."""
	last = url.strip().rstrip("/").rsplit("/", 1)[-1]
	return _SLUG_UNSAFE.sub("_", last)


__all__ = [
	"normalize_target",
	"is_sitemap_url",
	"site_url",
	"host_of",
	"url_slug",
]
