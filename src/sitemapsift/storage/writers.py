# SitemapSift — Output writers (URL list, Markdown pages)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import os
from typing import Iterable

from ..utils.io import ensure_dirs, write_lines
from ..utils.urls import host_of, url_slug


class UrlListWriter:
	"""The `<host><suffix>` URL list for one harvest target, rewritten on every run."""

	def __init__(self, target: str, output_dir: str = ".", suffix: str = "_urls.txt") -> None:
		self.output_dir = output_dir
		self.path = os.path.join(output_dir, f"{host_of(target)}{suffix}")

	def reset(self) -> None:
		ensure_dirs(self.output_dir)
		write_lines(self.path, [])

	def write(self, urls: Iterable[str]) -> int:
		ensure_dirs(self.output_dir)
		return write_lines(self.path, urls)


class MarkdownWriter:
	"""Saves scraped Markdown as `<slug>.md` under out_dir."""

	def __init__(self, out_dir: str) -> None:
		self.out_dir = out_dir
		ensure_dirs(out_dir)

	def path_for(self, url: str) -> str:
		return os.path.join(self.out_dir, f"{url_slug(url)}.md")

	def write(self, url: str, markdown: str) -> str:
		path = self.path_for(url)
		with open(path, "w", encoding="utf-8") as f:
			f.write(markdown)
			if not markdown.endswith("\n"):
				f.write("\n")
		return path
