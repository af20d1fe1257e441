from textwrap import dedent

from usegraph.model import SourceFile
from usegraph.symbols import build_hierarchy, build_symbol_table, extract_child_modules, extract_public_symbols


def _file(module, path="/repo/src/x.rs"):
	return SourceFile(path=path, rel_path=path.rsplit("/", 1)[-1], module=module, parent="src")


def test_extract_public_top_level_definitions():
	code = dedent(
		"""
		pub struct Foo;
		pub(crate) enum Color { Red }
		pub fn bar() {}
		pub const fn baz() {}
		pub const LIMIT: u32 = 3;
		pub static mut COUNTER: u32 = 0;
		pub unsafe trait Marker {}
		pub async fn fetch() {}
		pub extern "C" fn ffi() {}
		pub type Alias = u8;
		fn private() {}
		struct Hidden;
		impl Foo {
			pub fn method(&self) {}
		}
		// pub fn commented() {}
		pub mod inner {
			pub struct Nested;
		}
		"""
	)
	assert extract_public_symbols(code) == {
		"Foo",
		"Color",
		"bar",
		"baz",
		"LIMIT",
		"COUNTER",
		"Marker",
		"fetch",
		"ffi",
		"Alias",
		"inner",
	}


def test_malformed_input_is_not_an_error():
	assert extract_public_symbols("pub struct\npub fn (\n}}}{{") == set()


def test_symbol_table_merges_modules_with_same_name():
	table = build_symbol_table(
		[
			(_file("utils", "/repo/src/a/utils.rs"), "pub fn one() {}"),
			(_file("utils", "/repo/src/b/utils.rs"), "pub fn two() {}"),
			(_file("main"), "fn main() {}"),
		]
	)
	assert table == {"utils": {"one", "two"}, "main": set()}


def test_extract_child_modules():
	code = dedent(
		"""
		mod a;
		pub mod b;
		pub(crate) mod c;
		mod inline {
		}
		// mod ghost;
		"""
	)
	assert extract_child_modules(code) == ["a", "b", "c"]


def test_build_hierarchy_sorts_and_deduplicates():
	hierarchy = build_hierarchy(
		[
			(_file("src"), "mod zeta;\nmod alpha;\n"),
			(_file("net"), "pub mod tcp;\n"),
			(_file("src"), "mod alpha;\n"),
			(_file("leaf"), "fn f() {}\n"),
		]
	)
	assert hierarchy == {"net": ["tcp"], "src": ["alpha", "zeta"]}
	assert list(hierarchy) == ["net", "src"]
