# SitemapSift — Logging configuration (rotating file + stdout)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import logging.handlers
import os
from typing import Optional


FORMAT = "%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s"


def configure_logging(level: str = "INFO", log_dir: Optional[str] = "logs") -> None:
	"""Configure root logger with a stream handler and, optionally, a rotating file.

	Lines are single-line and tab separated: time, level, logger, message.
	Pass log_dir=None to log to the stream only.
	"""
	root = logging.getLogger()
	root.setLevel(getattr(logging, level.upper(), logging.INFO))

	# Clear existing handlers in case of re-init
	for h in list(root.handlers):
		root.removeHandler(h)

	stream = logging.StreamHandler()
	stream.setFormatter(logging.Formatter(FORMAT))
	root.addHandler(stream)

	if log_dir:
		os.makedirs(log_dir, exist_ok=True)
		file_handler = logging.handlers.RotatingFileHandler(
			os.path.join(log_dir, "sitemapsift.log"), maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8"
		)
		file_handler.setFormatter(logging.Formatter(FORMAT))
		root.addHandler(file_handler)

	# retry chatter from the connection pool is noise at INFO
	logging.getLogger("urllib3").setLevel(logging.WARNING)
