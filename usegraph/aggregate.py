from __future__ import annotations

import os
from typing import Dict, Iterable, List, Set, Tuple

from .model import DependencyFact, FileDependencies, ItemImporters, ModuleDependents


def _basename(path: str) -> str:
	return os.path.basename(path)


def build_inbound_index(facts: Iterable[DependencyFact]) -> List[ModuleDependents]:
	"""Modules by number of distinct importing files, most depended-on first.

	Item facts count as module facts too, so every item import shows up as a
	dependency on its module.
	"""
	inbound: Dict[str, Set[str]] = {}
	for fact in facts:
		inbound.setdefault(fact.module, set()).add(_basename(fact.file))
	entries = [
		ModuleDependents(module=module, count=len(files), dependents=sorted(files))
		for module, files in inbound.items()
	]
	entries.sort(key=lambda e: (-e.count, e.module))
	return entries


def build_item_index(facts: Iterable[DependencyFact]) -> List[ItemImporters]:
	items: Dict[Tuple[str, str], Set[str]] = {}
	for fact in facts:
		if fact.item is None:
			continue
		items.setdefault((fact.module, fact.item), set()).add(_basename(fact.file))
	entries = [
		ItemImporters(module=module, item=item, count=len(files), importers=sorted(files))
		for (module, item), files in items.items()
	]
	entries.sort(key=lambda e: (-e.count, e.module, e.item))
	return entries


def build_outbound_index(facts: Iterable[DependencyFact]) -> List[FileDependencies]:
	outbound: Dict[str, Set[str]] = {}
	for fact in facts:
		outbound.setdefault(fact.file, set()).add(fact.module)
	entries = [
		FileDependencies(file=_basename(path), path=path, modules=sorted(modules))
		for path, modules in outbound.items()
	]
	entries.sort(key=lambda e: (e.file, e.path))
	return entries


def items_by_module(items: Iterable[ItemImporters]) -> Dict[str, List[ItemImporters]]:
	"""Group an already sorted item index under its modules, keeping order."""
	grouped: Dict[str, List[ItemImporters]] = {}
	for entry in items:
		grouped.setdefault(entry.module, []).append(entry)
	return grouped
