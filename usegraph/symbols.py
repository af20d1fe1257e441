from __future__ import annotations

import re
from typing import Dict, Iterable, List, Set, Tuple

from .model import SourceFile
from .source_text import strip_line_comments

SymbolTable = Dict[str, Set[str]]

# Column 0 only: indented definitions belong to impl blocks or inner modules.
PUBLIC_DEFINITION = re.compile(
	r"^pub(?:\([^)]*\))?[ \t]+"
	r"(?:(?:async|const|unsafe|extern(?:[ \t]+\"[^\"]*\")?)[ \t]+)*"
	r"(?:struct|enum|fn|trait|type|const|static|union|mod)[ \t]+"
	r"(?:mut[ \t]+)?"
	r"([A-Za-z_]\w*)",
	re.M,
)

MOD_DECLARATION = re.compile(r"^[ \t]*(?:pub(?:\([^)]*\))?[ \t]+)?mod[ \t]+([A-Za-z_]\w*)[ \t]*;", re.M)


def extract_public_symbols(text: str) -> Set[str]:
	return set(PUBLIC_DEFINITION.findall(strip_line_comments(text)))


def add_module_symbols(table: SymbolTable, module: str, text: str) -> None:
	table.setdefault(module, set()).update(extract_public_symbols(text))


def build_symbol_table(sources: Iterable[Tuple[SourceFile, str]]) -> SymbolTable:
	"""Map every module to the names it publicly defines at top level.

	Modules sharing an identifier (e.g. two ``utils.rs`` in different
	subtrees) are merged into one entry.
	"""
	table: SymbolTable = {}
	for f, text in sources:
		add_module_symbols(table, f.module, text)
	return table


def extract_child_modules(text: str) -> List[str]:
	"""Names declared with ``mod x;`` / ``pub mod x;``, in order of appearance."""
	return MOD_DECLARATION.findall(strip_line_comments(text))


def build_hierarchy(sources: Iterable[Tuple[SourceFile, str]]) -> Dict[str, List[str]]:
	children: Dict[str, Set[str]] = {}
	for f, text in sources:
		declared = extract_child_modules(text)
		if declared:
			children.setdefault(f.module, set()).update(declared)
	return {parent: sorted(names) for parent, names in sorted(children.items())}
