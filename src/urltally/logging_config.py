# urltally — Logging configuration (rotating file + stdout)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import logging.handlers
import os
from typing import Optional

from .config import Settings


LOG_FORMAT = "%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s"


def configure_logging(level: str = "INFO", log_dir: str = "logs") -> None:
	"""Configure root logger with a rotating file handler and a stream handler.

	Lines are tab-separated: time, level, logger, message.
	"""
	os.makedirs(log_dir, exist_ok=True)
	log_path = os.path.join(log_dir, "urltally.log")

	root = logging.getLogger()
	root.setLevel(getattr(logging, level.upper(), logging.INFO))

	# Clear existing handlers in case of re-init
	for h in list(root.handlers):
		root.removeHandler(h)

	stream = logging.StreamHandler()
	stream.setFormatter(logging.Formatter(LOG_FORMAT))
	root.addHandler(stream)

	file_handler = logging.handlers.RotatingFileHandler(
		log_path, maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8"
	)
	file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
	root.addHandler(file_handler)


def configure_from_settings(cfg: Settings, level: Optional[str] = None) -> str:
	"""Configure logging from `cfg`; an explicit `level` (CLI flag) wins.

	Returns the effective level name.
	"""
	effective = (level or cfg.log_level).upper()
	configure_logging(level=effective, log_dir=cfg.log_dir)
	logging.getLogger(__name__).debug("logging to %s at %s", cfg.log_dir, effective)
	return effective
