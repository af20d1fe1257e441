"""Expansion of ``use crate::...`` / ``use super::...`` paths into dependency facts.

Paths follow a small grammar::

	Path  := Segment "::" Path | Group | Leaf
	Group := "{" Path ("," Path)* ","? "}"
	Leaf  := Identifier ["as" Identifier] | "self" | "*"

Resolution is at module granularity: the first segment after the anchor names
the target module, deeper segments are not modelled. ``super`` paths are
anchored at the importing file's directory name.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, List, Mapping, Optional, Sequence, Set, Tuple

from .fs_scan import parent_dir_name
from .model import DependencyFact
from .source_text import is_identifier, mentions_word, strip_line_comments

logger = logging.getLogger(__name__)

USE_STATEMENT = re.compile(r"\buse\s+(crate|super)\s*::\s*([^;]*);")
LEAF = re.compile(r"^(\*|[A-Za-z_]\w*)(?:\s+as\s+(?:[A-Za-z_]\w*))?$")
_AROUND_PUNCTUATION = re.compile(r"\s*(::|[{},])\s*")
_WHITESPACE = re.compile(r"\s+")


def normalize_path(path: str) -> str:
	path = _WHITESPACE.sub(" ", path).strip()
	return _AROUND_PUNCTUATION.sub(r"\1", path)


def braces_balanced(path: str) -> bool:
	depth = 0
	for ch in path:
		if ch == "{":
			depth += 1
		elif ch == "}":
			depth -= 1
			if depth < 0:
				return False
	return depth == 0


def split_group(group: str) -> List[str]:
	"""Split ``{a, b::{c, d}, e}`` into ``["a", "b::{c, d}", "e"]``.

	Only commas at brace depth zero separate siblings. Empty entries (a
	trailing comma) are dropped.
	"""
	group = group.strip()
	if group.startswith("{") and group.endswith("}"):
		group = group[1:-1]
	parts: List[str] = []
	depth = 0
	start = 0
	for i, ch in enumerate(group):
		if ch == "{":
			depth += 1
		elif ch == "}":
			depth -= 1
		elif ch == "," and depth == 0:
			parts.append(group[start:i])
			start = i + 1
	parts.append(group[start:])
	return [p.strip() for p in parts if p.strip()]


def split_segment(path: str) -> Optional[Tuple[str, str]]:
	"""Split at the first ``::`` outside any group, or None if there is none."""
	depth = 0
	for i, ch in enumerate(path):
		if ch == "{":
			depth += 1
		elif ch == "}":
			depth -= 1
		elif depth == 0 and path.startswith("::", i):
			return path[:i], path[i + 2 :]
	return None


def _module_fact(file_path: str, module: str) -> DependencyFact:
	return DependencyFact(file=file_path, module=module)


def resolve_glob(
	module: str,
	file_path: str,
	file_text: str,
	symbols: Mapping[str, Set[str]],
) -> Iterator[DependencyFact]:
	"""Item facts for the exported names of ``module`` that the file mentions."""
	for name in sorted(symbols.get(module, ())):
		if mentions_word(file_text, name):
			yield DependencyFact(file=file_path, module=module, item=name)


def expand(
	path: str,
	prefix: Sequence[str],
	file_path: str,
	file_text: str,
	symbols: Mapping[str, Set[str]],
) -> Iterator[DependencyFact]:
	path = path.strip()

	if path.startswith("{") and path.endswith("}"):
		for sub in split_group(path):
			yield from expand(sub, prefix, file_path, file_text, symbols)
		return

	parts = split_segment(path)
	if parts is not None:
		head, tail = parts
		if not is_identifier(head):
			logger.debug("%s: skipping segment %r", file_path, head)
			return
		yield from expand(tail, [*prefix, head], file_path, file_text, symbols)
		return

	if not path:
		if prefix:
			yield _module_fact(file_path, prefix[0])
		return

	match = LEAF.match(path)
	if match is None:
		logger.debug("%s: skipping leaf %r", file_path, path)
		return
	name = match.group(1)

	if name == "self":
		# self and "self as x" name the module itself
		if prefix:
			yield _module_fact(file_path, prefix[0])
		return

	if not prefix:
		# use crate::net; names the module itself
		if name != "*":
			yield _module_fact(file_path, name)
		return

	module = prefix[0]
	yield _module_fact(file_path, module)
	if name == "*":
		yield from resolve_glob(module, file_path, file_text, symbols)
	else:
		yield DependencyFact(file=file_path, module=module, item=name)


def find_use_paths(text: str) -> List[Tuple[str, str]]:
	"""``(anchor, path)`` for every crate/super rooted use statement."""
	return [
		(m.group(1), normalize_path(m.group(2)))
		for m in USE_STATEMENT.finditer(strip_line_comments(text))
	]


def resolve(
	file_text: str,
	file_path: str,
	symbols: Mapping[str, Set[str]],
) -> Set[DependencyFact]:
	"""All dependency facts contributed by one file.

	``symbols`` must be the complete symbol table; it is consulted only for
	glob imports. Malformed statements contribute nothing.
	"""
	facts: Set[DependencyFact] = set()
	# glob names only count when mentioned outside the import statements
	usage_text = USE_STATEMENT.sub(" ", file_text)
	for anchor, path in find_use_paths(file_text):
		if not path or not braces_balanced(path):
			logger.debug("%s: skipping malformed use path %r", file_path, path)
			continue
		prefix = [parent_dir_name(file_path)] if anchor == "super" else []
		facts.update(expand(path, prefix, file_path, usage_text, symbols))
	return facts
