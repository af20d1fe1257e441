"""Use-path dependency analysis for Rust-style source trees.

Modules:
- fs_scan.py: Source file discovery and module naming.
- symbols.py: Public top-level definitions per module, and `mod` hierarchy.
- use_paths.py: Recursive expansion of `use crate::...` / `use super::...` paths.
- aggregate.py: Inbound, item and outbound indices with display ordering.
- pipeline.py: The two passes over a tree, producing a DependencyReport.
- render.py: Terminal tables.
- model.py: pydantic data structures.
"""

from .pipeline import analyze_repository

__all__ = [
	"analyze_repository",
	"fs_scan",
	"symbols",
	"use_paths",
	"aggregate",
	"pipeline",
	"render",
	"model",
]
