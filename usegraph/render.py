"""Terminal rendering of a dependency report as box-drawn, optionally coloured tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .model import DependencyReport


@dataclass(frozen=True)
class Palette:
	reset: str = "\033[0m"
	bold: str = "\033[1m"
	green: str = "\033[32m"
	yellow: str = "\033[33m"
	blue: str = "\033[34m"
	magenta: str = "\033[35m"
	gray: str = "\033[90m"


PLAIN = Palette(reset="", bold="", green="", yellow="", blue="", magenta="", gray="")


def wrap_items(items: Sequence[str], max_width: int, separator: str = ", ") -> List[str]:
	"""Join ``items`` into lines no wider than ``max_width``.

	An item longer than ``max_width`` gets a line of its own. Always returns
	at least one (possibly empty) line.
	"""
	if not items:
		return [""]
	lines: List[str] = []
	current = items[0]
	for item in items[1:]:
		if len(current) + len(separator) + len(item) > max_width:
			lines.append(current)
			current = item
		else:
			current += separator + item
	lines.append(current)
	return lines


def render_table(
	title: str,
	headers: Sequence[str],
	rows: Sequence[Sequence[List[str]]],
	colors: Sequence[str],
	palette: Palette = PLAIN,
) -> List[str]:
	"""Each row is a list of cells, each cell a list of lines."""
	p = palette
	widths = [len(h) for h in headers]
	for row in rows:
		for i, cell in enumerate(row):
			for line in cell:
				widths[i] = max(widths[i], len(line))

	def border(left: str, middle: str, right: str) -> str:
		return p.gray + left + middle.join("─" * (w + 2) for w in widths) + right + p.reset

	out = [f"{p.bold}## {title}{p.reset}", border("┌", "┬", "┐")]
	header_cells = [f" {p.bold}{h:<{w}}{p.reset}{p.gray} " for h, w in zip(headers, widths)]
	out.append(p.gray + "│" + "│".join(header_cells) + "│" + p.reset)
	for row in rows:
		out.append(border("├", "┼", "┤"))
		for k in range(max(len(cell) for cell in row)):
			cells = []
			for cell, width, color in zip(row, widths, colors):
				text = cell[k] if k < len(cell) else ""
				cells.append(f" {color}{text:<{width}}{p.reset}{p.gray} ")
			out.append(p.gray + "│" + "│".join(cells) + "│" + p.reset)
	out.append(border("└", "┴", "┘"))
	return out


def render_report(report: DependencyReport, color: bool = True, wrap_width: int = 60) -> str:
	p = Palette() if color else PLAIN
	out: List[str] = [
		"",
		f"{p.bold}Rust Dependency Analysis{p.reset}",
		f"{p.gray}Target Directory: {p.reset}{p.blue}{report.root}{p.reset}",
		"",
	]

	out += render_table(
		"Module Hierarchy (Parent Module -> Contains)",
		["Parent Module", "Contains Modules"],
		[[[h.parent], wrap_items(h.children, wrap_width)] for h in report.hierarchy],
		[p.yellow, ""],
		p,
	)
	out.append("")
	out += render_table(
		"Outbound Dependencies (File -> Uses)",
		["File", "Uses Modules"],
		[[[o.file], wrap_items(o.modules, wrap_width)] for o in report.outbound],
		[p.blue, ""],
		p,
	)
	out.append("")
	out += render_table(
		"Inbound Dependencies (Module <- Used By)",
		["Module", "Dep. Count", "Used By Files"],
		[[[m.module], [str(m.count)], wrap_items(m.dependents, wrap_width)] for m in report.inbound],
		[p.yellow, p.green, ""],
		p,
	)
	out.append("")
	out += render_table(
		"Imported Items (Module::Item <- Imported By)",
		["Module", "Item", "Count", "Imported By Files"],
		[[[i.module], [i.item], [str(i.count)], wrap_items(i.importers, wrap_width)] for i in report.items],
		[p.yellow, p.magenta, p.green, ""],
		p,
	)
	out.append("")
	out.append(f"{p.green}Analysis complete.{p.reset}")
	return "\n".join(out) + "\n"
