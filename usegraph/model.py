from __future__ import annotations

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict


class SourceFile(BaseModel):
	path: str
	rel_path: str
	module: str
	parent: str


class DependencyFact(BaseModel):
	"""One file depending on one module, optionally on one item of it."""

	model_config = ConfigDict(frozen=True)

	file: str
	module: str
	item: Optional[str] = None


class ModuleDependents(BaseModel):
	module: str
	count: int
	dependents: List[str] = []


class ItemImporters(BaseModel):
	module: str
	item: str
	count: int
	importers: List[str] = []


class FileDependencies(BaseModel):
	file: str
	path: str
	modules: List[str] = []


class ModuleChildren(BaseModel):
	parent: str
	children: List[str] = []


class DependencyReport(BaseModel):
	root: str
	files: List[SourceFile]
	symbols: Dict[str, List[str]]
	inbound: List[ModuleDependents]
	items: List[ItemImporters]
	outbound: List[FileDependencies]
	hierarchy: List[ModuleChildren]
