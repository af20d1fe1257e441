"""Logging configuration shared by the CLI, the JSON API and the HTML report."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL_MAP = {
	"DEBUG": logging.DEBUG,
	"INFO": logging.INFO,
	"WARNING": logging.WARNING,
	"ERROR": logging.ERROR,
	"CRITICAL": logging.CRITICAL,
}


class ColoredFormatter(logging.Formatter):
	"""Adds ANSI colour to the level name."""

	COLORS = {
		"DEBUG": "\033[36m",
		"INFO": "\033[32m",
		"WARNING": "\033[33m",
		"ERROR": "\033[31m",
		"CRITICAL": "\033[41m",
	}
	RESET = "\033[0m"

	def __init__(self, fmt: str = DEFAULT_FORMAT, datefmt: str = DEFAULT_DATE_FORMAT):
		super().__init__(fmt, datefmt)

	def format(self, record: logging.LogRecord) -> str:
		original_levelname = record.levelname
		color = self.COLORS.get(record.levelname, "")
		if color:
			record.levelname = f"{color}{record.levelname}{self.RESET}"
		result = super().format(record)
		record.levelname = original_levelname
		return result


def configure_logging(
	log_level: Union[int, str] = logging.INFO,
	enable_color: bool = True,
	stream=None,
) -> None:
	"""
	Configure the root logger once.

	Args:
		log_level: level number or name
		enable_color: colour the level name on the console
		stream: output stream, stderr by default so reports on stdout stay clean
	"""
	root_logger = logging.getLogger()
	if root_logger.handlers:
		return

	if isinstance(log_level, str):
		log_level = LOG_LEVEL_MAP.get(log_level.upper(), logging.INFO)

	root_logger.setLevel(log_level)
	handler = logging.StreamHandler(stream or sys.stderr)
	if enable_color:
		handler.setFormatter(ColoredFormatter())
	else:
		handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT))
	handler.setLevel(log_level)
	root_logger.addHandler(handler)

	logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
	return logging.getLogger(name or "usegraph")


__all__ = [
	"configure_logging",
	"get_logger",
	"ColoredFormatter",
	"DEFAULT_FORMAT",
]
