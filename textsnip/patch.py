"""
Patch — a single atomic edit: remove a character range, then optionally
insert replacement text at its start.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from .buffer import TextBuffer
from .errors import InvalidPositionError, RangeOutOfBoundsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Patch:
    """One edit against one file.

    ``range`` holds 0-indexed character positions (Unicode code points, not
    bytes). ``start == end`` is a pure insertion; ``replacement=None`` is a
    pure deletion.

    ``symbol_path`` and ``max_line_drift`` are carried along for relocating
    a patch by syntax or by nearby lines; nothing reads them yet.
    """
    file: str
    range: tuple[int, int]
    replacement: Optional[str] = None
    symbol_path: Optional[tuple[str, ...]] = None
    max_line_drift: Optional[int] = None

    def __post_init__(self) -> None:
        start, end = self.range
        object.__setattr__(self, "range", (int(start), int(end)))
        if self.symbol_path is not None:
            object.__setattr__(self, "symbol_path", tuple(self.symbol_path))

    @property
    def start(self) -> int:
        return self.range[0]

    @property
    def end(self) -> int:
        return self.range[1]

    @property
    def is_insertion(self) -> bool:
        return self.start == self.end

    @property
    def is_deletion(self) -> bool:
        return self.replacement is None

    def apply(self, buffer: TextBuffer) -> None:
        """Apply this patch to *buffer* in place.

        Bounds are checked before anything is touched, so a rejected patch
        leaves the buffer unchanged.

        Raises
        ------
        RangeOutOfBoundsError
            The range ends past the buffer, starts before 0, or is inverted.
        """
        start, end = self.range
        length = buffer.len_chars()
        if start < 0 or start > end or end > length:
            raise RangeOutOfBoundsError(start, end, length)

        if start < end:
            buffer.remove(start, end)
        if self.replacement is not None:
            buffer.insert(start, self.replacement)
        logger.debug(
            "[Patch] Applied (%d, %d) to %s, %d char(s) inserted",
            start, end, self.file, len(self.replacement or ""),
        )

    @classmethod
    def from_line_positions(
        cls,
        file: str,
        line_start: int,
        col_start: int,
        line_end: int,
        col_end: int,
        buffer: TextBuffer,
        replacement: Optional[str] = None,
        symbol_path: Optional[Sequence[str]] = None,
        max_line_drift: Optional[int] = None,
    ) -> "Patch":
        """Build a patch from 0-indexed line/column coordinates.

        Each coordinate maps to the first character of its line plus the
        column. The column may equal the line's length (end of line) but
        not exceed it; the line must exist.

        Raises
        ------
        InvalidPositionError
            A line or column does not exist in *buffer*.
        """
        start = line_col_to_char(buffer, line_start, col_start)
        end = line_col_to_char(buffer, line_end, col_end)
        return cls(
            file=file,
            range=(start, end),
            replacement=replacement,
            symbol_path=tuple(symbol_path) if symbol_path is not None else None,
            max_line_drift=max_line_drift,
        )


@dataclass(frozen=True)
class LinePatch:
    """A patch addressed by 0-indexed ``(line, col)`` pairs.

    Stays unresolved until the target file's content is at hand; the
    composer turns it into a :class:`Patch` against the same buffer the
    group is applied to.
    """
    file: str
    start: tuple[int, int]
    end: tuple[int, int]
    replacement: Optional[str] = None
    symbol_path: Optional[tuple[str, ...]] = None
    max_line_drift: Optional[int] = None

    def resolve(self, buffer: TextBuffer) -> Patch:
        """Return the character-range patch for *buffer*.

        Raises
        ------
        InvalidPositionError
            A line or column does not exist in *buffer*.
        """
        return Patch.from_line_positions(
            self.file,
            self.start[0], self.start[1],
            self.end[0], self.end[1],
            buffer,
            replacement=self.replacement,
            symbol_path=self.symbol_path,
            max_line_drift=self.max_line_drift,
        )


PatchEntry = Union[Patch, LinePatch]


def line_col_to_char(buffer: TextBuffer, line: int, col: int) -> int:
    """Convert a 0-indexed ``(line, col)`` into a character index."""
    if line < 0 or line >= buffer.len_lines():
        raise InvalidPositionError(line, col)
    if col < 0 or col > buffer.line_len(line):
        raise InvalidPositionError(line, col)
    return buffer.line_to_char(line) + col
