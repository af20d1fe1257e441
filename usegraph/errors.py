from __future__ import annotations


class UsegraphError(Exception):
	"""Base class for errors that abort an analysis run."""

	def __init__(self, detail: str, path: str = "") -> None:
		super().__init__(detail)
		self.detail = detail
		self.path = path


class RootNotFoundError(UsegraphError):
	pass


class SourceReadError(UsegraphError):
	"""A source file could not be read or decoded."""
