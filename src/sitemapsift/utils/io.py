# SitemapSift — IO helpers (directories, line files)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import os
from typing import Iterable, List


def ensure_dirs(*paths: str) -> None:
	for p in paths:
		if p:
			os.makedirs(p, exist_ok=True)


def write_lines(path: str, lines: Iterable[str]) -> int:
	"""Overwrite path with one item per line, each newline-terminated. Returns line count."""
	count = 0
	with open(path, "w", encoding="utf-8", newline="\n") as f:
		for line in lines:
			f.write(line + "\n")
			count += 1
	return count


def read_lines(path: str) -> List[str]:
	"""Non-empty, stripped lines of a text file."""
	with open(path, "r", encoding="utf-8") as f:
		return [line.strip() for line in f if line.strip()]
