# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source locations.

A `Location` is a 1-indexed line/column pair. `Location()` (zero/zero) is the
sentinel used only by the placeholder empty AST node. Locations are derived
purely from character offsets through a `LineIndex`, so they do not depend on
how far the scanner or parser has looked ahead.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
	"""A point in source text (line and column are 1-indexed)."""

	line: int = 0
	column: int = 0

	def __str__(self) -> str:
		return f"{self.line}:{self.column}"

	@property
	def is_unknown(self) -> bool:
		return self.line == 0


class LineIndex:
	"""
	Maps character offsets of one source string to `Location`s.

	The index records the offset at which every line starts; a lookup is a
	binary search over that table, so offsets may be queried in any order.
	"""

	def __init__(self, text: str) -> None:
		self._length = len(text)
		starts: list[int] = [0]
		pos = text.find("\n")
		while pos != -1:
			starts.append(pos + 1)
			pos = text.find("\n", pos + 1)
		self._line_starts = starts

	@property
	def line_count(self) -> int:
		return len(self._line_starts)

	def location(self, offset: int) -> Location:
		if offset < 0 or offset > self._length:
			raise ValueError(f"offset {offset} outside source of length {self._length}")
		line = bisect_right(self._line_starts, offset)
		return Location(line=line, column=offset - self._line_starts[line - 1] + 1)

	def span(self, start: int, end: int) -> tuple[Location, Location]:
		"""Return the start and end locations of the half-open range [start, end)."""
		return self.location(start), self.location(end)


__all__ = ["LineIndex", "Location"]
