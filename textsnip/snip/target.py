"""
Targets — where in a buffer a boundary sits.

A target is either pattern-like (``Literal``, ``Pattern``), resolving to the
first match and owning the matched span, or point-like (``Line``, ``Char``,
``Position``), resolving to a single index with a zero-width span.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from ..buffer import TextBuffer
from ..errors import InvalidPositionError, NotFoundError, OutOfBoundsError


class Target:
    """Base class of the closed set of target variants."""

    __slots__ = ()

    def resolve(self, buffer: TextBuffer) -> int:
        """Resolve to a single character index."""
        return self.resolve_range(buffer)[0]

    def resolve_range(self, buffer: TextBuffer) -> tuple[int, int]:
        """Resolve to the target's own ``(start, end)`` span."""
        raise NotImplementedError


@dataclass(frozen=True)
class Literal(Target):
    """An exact string; resolves to its first occurrence."""
    text: str

    def resolve_range(self, buffer: TextBuffer) -> tuple[int, int]:
        if not self.text:
            return 0, 0
        index = buffer.find(self.text)
        if index < 0:
            raise NotFoundError(self.text)
        return index, index + len(self.text)


@dataclass(frozen=True, eq=False)
class Pattern(Target):
    """A regular expression; resolves to the start of its first match.

    Accepts a compiled pattern or a pattern string. Two patterns are equal
    when their source string and flags are.
    """
    regex: re.Pattern

    def __post_init__(self) -> None:
        if isinstance(self.regex, str):
            object.__setattr__(self, "regex", re.compile(self.regex))

    def resolve_range(self, buffer: TextBuffer) -> tuple[int, int]:
        match = buffer.search(self.regex)
        if match is None:
            raise NotFoundError(self.regex.pattern)
        return match.start(), match.end()

    def _key(self) -> tuple[Union[str, bytes], int]:
        return self.regex.pattern, self.regex.flags

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Pattern):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Pattern, self._key()))


@dataclass(frozen=True)
class Line(Target):
    """Start of a line (0-indexed)."""
    number: int

    def resolve_range(self, buffer: TextBuffer) -> tuple[int, int]:
        if self.number < 0 or self.number >= buffer.len_lines():
            raise InvalidPositionError(self.number)
        index = buffer.line_to_char(self.number)
        return index, index


@dataclass(frozen=True)
class Char(Target):
    """An absolute character index (0-indexed)."""
    index: int

    def resolve_range(self, buffer: TextBuffer) -> tuple[int, int]:
        if self.index < 0 or self.index >= buffer.len_chars():
            raise OutOfBoundsError(self.index, buffer.len_chars())
        return self.index, self.index


@dataclass(frozen=True)
class Position(Target):
    """A line/column coordinate, both 1-indexed.

    Columns count characters on the line, not bytes; the line break is not
    addressable.
    """
    line: int
    col: int

    def resolve_range(self, buffer: TextBuffer) -> tuple[int, int]:
        line_idx = self.line - 1
        if line_idx < 0 or line_idx >= buffer.len_lines():
            raise InvalidPositionError(self.line, self.col)
        if self.col < 1 or self.col > buffer.line_len(line_idx):
            raise InvalidPositionError(self.line, self.col)
        index = buffer.line_to_char(line_idx) + self.col - 1
        return index, index
