from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, List, Tuple

from .errors import RootNotFoundError, SourceReadError
from .model import SourceFile

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".rs"
DEFAULT_ROOT_FILES: Tuple[str, ...] = ("mod", "lib")
DEFAULT_IGNORE_DIRS: Tuple[str, ...] = (".git", "target", "node_modules")


def to_module_name(file_path: str, root_files: Iterable[str] = DEFAULT_ROOT_FILES) -> str:
	"""Base name without extension; root files take their directory's name."""
	stem = os.path.splitext(os.path.basename(file_path))[0]
	if stem in set(root_files):
		return parent_dir_name(file_path)
	return stem


def parent_dir_name(file_path: str) -> str:
	return os.path.basename(os.path.dirname(os.path.abspath(file_path)))


def scan_repository(
	root: str,
	extension: str = DEFAULT_EXTENSION,
	root_files: Iterable[str] = DEFAULT_ROOT_FILES,
	ignore_dirs: Iterable[str] = DEFAULT_IGNORE_DIRS,
) -> List[SourceFile]:
	if not os.path.isdir(root):
		raise RootNotFoundError(f"Not a directory: {root}", path=root)

	def _raise(err: OSError) -> None:
		raise SourceReadError(f"Cannot walk {err.filename}: {err.strerror}", path=err.filename or root) from err

	ignored = set(ignore_dirs)
	root_files = tuple(root_files)
	files: List[SourceFile] = []
	for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
		dirnames[:] = sorted(d for d in dirnames if d not in ignored)
		for filename in sorted(filenames):
			if not filename.endswith(extension):
				continue
			path = os.path.join(dirpath, filename)
			files.append(
				SourceFile(
					path=path,
					rel_path=os.path.relpath(path, root),
					module=to_module_name(path, root_files),
					parent=parent_dir_name(path),
				)
			)
	logger.debug("Found %d %s files under %s", len(files), extension, root)
	return files


def read_source(f: SourceFile) -> str:
	try:
		with open(f.path, "r", encoding="utf-8") as fh:
			return fh.read()
	except (OSError, UnicodeDecodeError) as e:
		raise SourceReadError(f"Cannot read {f.path}: {e}", path=f.path) from e


def iter_sources(files: Iterable[SourceFile]) -> Iterator[Tuple[SourceFile, str]]:
	for f in files:
		yield f, read_source(f)
