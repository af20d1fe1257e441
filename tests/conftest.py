from textwrap import dedent

import pytest


def write(path, text):
	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text(dedent(text).lstrip(), encoding="utf-8")
	return path


@pytest.fixture
def sample_tree(tmp_path):
	src = tmp_path / "src"
	write(
		src / "a.rs",
		"""
		pub fn Foo() {}
		""",
	)
	write(
		src / "b.rs",
		"""
		use crate::a::{Foo, Bar as Baz};

		fn run() {
			Foo();
			Baz();
		}
		""",
	)
	write(
		src / "c.rs",
		"""
		use crate::a::*;

		fn run() {
			Foo();
		}
		""",
	)
	return src
