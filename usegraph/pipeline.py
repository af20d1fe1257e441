from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional, Set, Tuple

from .aggregate import build_inbound_index, build_item_index, build_outbound_index
from .fs_scan import DEFAULT_EXTENSION, DEFAULT_IGNORE_DIRS, DEFAULT_ROOT_FILES, iter_sources, scan_repository
from .model import DependencyFact, DependencyReport, ModuleChildren, SourceFile
from .symbols import SymbolTable, build_hierarchy, build_symbol_table
from .use_paths import resolve

logger = logging.getLogger(__name__)


def resolve_all(sources: Iterable[Tuple[SourceFile, str]], symbols: SymbolTable) -> Set[DependencyFact]:
	facts: Set[DependencyFact] = set()
	for f, text in sources:
		facts.update(resolve(text, f.path, symbols))
	return facts


def restrict_to_known_modules(facts: Iterable[DependencyFact], modules: Iterable[str]) -> Set[DependencyFact]:
	known = set(modules)
	return {fact for fact in facts if fact.module in known}


def analyze_sources(
	root: str,
	sources: List[Tuple[SourceFile, str]],
	known_modules_only: bool = False,
) -> DependencyReport:
	# The symbol table must be complete before any glob is resolved.
	symbols = build_symbol_table(sources)
	facts = resolve_all(sources, symbols)
	if known_modules_only:
		facts = restrict_to_known_modules(facts, (f.module for f, _ in sources))

	hierarchy = build_hierarchy(sources)
	logger.info(
		"Analyzed %d files: %d modules export symbols, %d dependency facts",
		len(sources),
		sum(1 for names in symbols.values() if names),
		len(facts),
	)
	return DependencyReport(
		root=root,
		files=[f for f, _ in sources],
		symbols={module: sorted(names) for module, names in sorted(symbols.items())},
		inbound=build_inbound_index(facts),
		items=build_item_index(facts),
		outbound=build_outbound_index(facts),
		hierarchy=[ModuleChildren(parent=p, children=c) for p, c in hierarchy.items()],
	)


def analyze_repository(root: str, settings: Optional[object] = None) -> DependencyReport:
	"""Run both passes over every source file under ``root``.

	``settings`` is any object with the attributes of ``config.Settings``;
	missing attributes fall back to the defaults. Raises ``RootNotFoundError``
	or ``SourceReadError``; no partial report is produced.
	"""
	root = os.path.abspath(root)
	files = scan_repository(
		root,
		extension=getattr(settings, "source_extension", DEFAULT_EXTENSION),
		root_files=getattr(settings, "root_files", DEFAULT_ROOT_FILES),
		ignore_dirs=getattr(settings, "ignore_dirs", DEFAULT_IGNORE_DIRS),
	)
	sources = list(iter_sources(files))
	return analyze_sources(
		root,
		sources,
		known_modules_only=getattr(settings, "known_modules_only", False),
	)
