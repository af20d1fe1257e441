from __future__ import annotations

import re
from functools import lru_cache

LINE_COMMENT = re.compile(r"//.*$", re.M)
IDENTIFIER = re.compile(r"^[A-Za-z_]\w*$")


def strip_line_comments(text: str) -> str:
	# "//" inside a string literal also starts a comment here
	return LINE_COMMENT.sub("", text)


def is_identifier(name: str) -> bool:
	return bool(IDENTIFIER.match(name))


@lru_cache(maxsize=4096)
def _word_pattern(word: str) -> re.Pattern[str]:
	return re.compile(r"\b" + re.escape(word) + r"\b")


def mentions_word(text: str, word: str) -> bool:
	return _word_pattern(word).search(text) is not None
