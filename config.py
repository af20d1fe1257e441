"""Runtime settings, read from the environment (and a local .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import List, Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _as_bool(value: Optional[str], default: bool = False) -> bool:
	if value is None:
		return default
	normalized = value.strip().lower()
	if normalized in _TRUE_VALUES:
		return True
	if normalized in _FALSE_VALUES:
		return False
	return default


def _as_int(value: Optional[str], default: int, min_val: Optional[int] = None, max_val: Optional[int] = None) -> int:
	if value is None:
		return default
	try:
		result = int(value.strip())
	except (ValueError, AttributeError):
		return default
	if min_val is not None and result < min_val:
		return min_val
	if max_val is not None and result > max_val:
		return max_val
	return result


def _as_tuple(value: Optional[str], default: Tuple[str, ...]) -> Tuple[str, ...]:
	if value is None:
		return default
	items = tuple(part.strip() for part in value.split(",") if part.strip())
	return items or default


@dataclass(frozen=True)
class Settings:
	"""
	Analyzer settings.

	Attributes:
		source_extension: file extension of the analyzed language
		root_files: file stems that name their containing directory's module
		ignore_dirs: directory names never descended into
		known_modules_only: drop facts whose module has no file in the tree
		log_level: root logging level name
		host, port: bind address for the JSON API and the HTML report
		root: default tree shown by the HTML report
		wrap_width: width of the wrapped column in terminal tables
	"""

	source_extension: str = ".rs"
	root_files: Tuple[str, ...] = ("mod", "lib")
	ignore_dirs: Tuple[str, ...] = (".git", "target", "node_modules")
	known_modules_only: bool = False
	log_level: str = "INFO"
	host: str = "127.0.0.1"
	port: int = 8000
	root: Optional[str] = None
	wrap_width: int = 60

	def with_overrides(self, **changes) -> "Settings":
		return replace(self, **{k: v for k, v in changes.items() if v is not None})

	def validate(self) -> List[str]:
		errors = []
		if not self.source_extension.startswith("."):
			errors.append("source_extension must start with '.'")
		if self.wrap_width < 10:
			errors.append("wrap_width must be at least 10")
		return errors


@lru_cache(maxsize=1)
def get_settings() -> Settings:
	defaults = Settings()
	return Settings(
		source_extension=os.getenv("USEGRAPH_SOURCE_EXTENSION", defaults.source_extension),
		root_files=_as_tuple(os.getenv("USEGRAPH_ROOT_FILES"), defaults.root_files),
		ignore_dirs=_as_tuple(os.getenv("USEGRAPH_IGNORE_DIRS"), defaults.ignore_dirs),
		known_modules_only=_as_bool(os.getenv("USEGRAPH_KNOWN_MODULES_ONLY"), defaults.known_modules_only),
		log_level=os.getenv("USEGRAPH_LOG_LEVEL", defaults.log_level).upper(),
		host=os.getenv("USEGRAPH_HOST", defaults.host),
		port=_as_int(os.getenv("USEGRAPH_PORT"), default=defaults.port, min_val=1, max_val=65535),
		root=os.getenv("USEGRAPH_ROOT") or None,
		wrap_width=_as_int(os.getenv("USEGRAPH_WRAP_WIDTH"), default=defaults.wrap_width, min_val=10),
	)
