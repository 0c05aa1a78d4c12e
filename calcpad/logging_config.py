"""Loguru setup for calcpad.

Call ``setup_logging`` once at startup. Library code only imports
``loguru.logger``; nothing is emitted until a sink is configured here, apart
from loguru's default stderr handler.
"""

from __future__ import annotations

import logging
from pathlib import Path
import sys

from loguru import logger

from calcpad.config import settings


LOG_FORMAT = " | ".join(
	(
		"<g>{time:HH:mm:ss.SSS}</>",
		"<lvl>{level:<8}</>",
		"<c>{name}::{function}:{line}</>",
		"{message}",
	)
)


class InterceptHandler(logging.Handler):
	"""Forward stdlib ``logging`` records (tkinter, pydantic) into loguru."""

	def emit(self, record: logging.LogRecord) -> None:
		try:
			level: str | int = logger.level(record.levelname).name
		except ValueError:
			level = record.levelno

		# Find caller from where originated the logged message
		frame, depth = logging.currentframe(), 2
		while frame and frame.f_code.co_filename == logging.__file__:
			frame = frame.f_back
			depth += 1

		logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str | None = None, log_dir: Path | None = None) -> None:
	if level is None:
		level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
	if log_dir is None:
		log_dir = settings.LOG_DIR

	logger.remove()
	logger.enable("calcpad")
	logger.add(sys.stderr, format=LOG_FORMAT, level=level)

	if log_dir is not None:
		logger.add(
			Path(log_dir) / "calcpad_{time:YYYY-MM-DD}.log",
			format=LOG_FORMAT,
			level=level,
			rotation="1 day",
			retention="7 days",
		)

	logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
	logger.debug("logging configured at {}", level)
