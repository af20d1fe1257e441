from usegraph.aggregate import build_inbound_index, build_item_index, build_outbound_index, items_by_module
from usegraph.model import DependencyFact as F


FACTS = [
	F(file="/x/b.rs", module="a", item="Foo"),
	F(file="/x/c.rs", module="a", item="Foo"),
	F(file="/y/b.rs", module="a", item="Foo"),
	F(file="/x/b.rs", module="a"),
	F(file="/x/c.rs", module="z"),
	F(file="/x/d.rs", module="z"),
	F(file="/x/d.rs", module="m"),
]


def test_inbound_index_counts_distinct_basenames():
	index = build_inbound_index(FACTS)
	assert [(e.module, e.count, e.dependents) for e in index] == [
		("a", 2, ["b.rs", "c.rs"]),
		("z", 2, ["c.rs", "d.rs"]),
		("m", 1, ["d.rs"]),
	]


def test_item_fact_implies_module_dependency():
	index = build_inbound_index([F(file="/x/e.rs", module="q", item="X")])
	assert [(e.module, e.count) for e in index] == [("q", 1)]


def test_item_index_order_is_total():
	facts = [
		F(file="/x/1.rs", module="b", item="Alpha"),
		F(file="/x/1.rs", module="a", item="Zed"),
		F(file="/x/2.rs", module="a", item="Alpha"),
		F(file="/x/3.rs", module="c", item="Top"),
		F(file="/x/4.rs", module="c", item="Top"),
	]
	index = build_item_index(facts)
	assert [(e.module, e.item, e.count) for e in index] == [
		("c", "Top", 2),
		("a", "Alpha", 1),
		("a", "Zed", 1),
		("b", "Alpha", 1),
	]
	assert index == build_item_index(reversed(facts))


def test_item_index_ignores_module_facts():
	index = build_item_index(FACTS)
	assert [(e.module, e.item, e.count, e.importers) for e in index] == [("a", "Foo", 2, ["b.rs", "c.rs"])]


def test_outbound_index():
	index = build_outbound_index(FACTS)
	assert [(e.file, e.path, e.modules) for e in index] == [
		("b.rs", "/x/b.rs", ["a"]),
		("b.rs", "/y/b.rs", ["a"]),
		("c.rs", "/x/c.rs", ["a", "z"]),
		("d.rs", "/x/d.rs", ["m", "z"]),
	]


def test_items_by_module_keeps_order():
	index = build_item_index(
		[
			F(file="/x/1.rs", module="b", item="B1"),
			F(file="/x/2.rs", module="b", item="B1"),
			F(file="/x/1.rs", module="a", item="A1"),
			F(file="/x/1.rs", module="b", item="B2"),
		]
	)
	grouped = items_by_module(index)
	assert list(grouped) == ["b", "a"]
	assert [e.item for e in grouped["b"]] == ["B1", "B2"]
