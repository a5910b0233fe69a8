"""
Text buffer — mutable text addressed by character index, with line and
UTF-8 byte lookups.

The text is kept as a single Python ``str`` (so ``re`` can match it
in place) and two indexes are built lazily on first use and dropped on
every mutation:

* line starts: character index of the first character of every line,
* byte marks: UTF-8 byte offset of every ``_BYTE_MARK_STRIDE``-th character.

Both are searched with ``bisect``, which keeps line/char/byte conversions
at O(log n) plus at most one stride of character scanning.
"""

from __future__ import annotations

import re
from array import array
from bisect import bisect_right
from typing import Optional

# "\r\n" is a single line break. So is each of LF, VT, FF, CR, NEL, LS and PS.
_LINE_BREAK = re.compile("\r\n|[\n\x0b\x0c\r\x85\u2028\u2029]")

_BYTE_MARK_STRIDE = 1024


def utf8_width(char: str) -> int:
    """Return the number of bytes *char* occupies in UTF-8."""
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def _encoded_len(text: str) -> int:
    # surrogatepass keeps lone surrogates countable (3 bytes each)
    return len(text.encode("utf-8", "surrogatepass"))


class TextBuffer:
    """Mutable text with character, line and byte addressing."""

    __slots__ = ("_text", "_line_starts", "_byte_marks")

    def __init__(self, text: str = "") -> None:
        if not isinstance(text, str):
            raise TypeError(f"TextBuffer expects str, got {type(text).__name__}")
        self._text = text
        self._line_starts: Optional[array] = None
        self._byte_marks: Optional[array] = None

    @classmethod
    def from_str(cls, text: str) -> "TextBuffer":
        return cls(text)

    # ------------------------------------------------------------------
    # Lazily built indexes
    # ------------------------------------------------------------------

    def _invalidate(self) -> None:
        self._line_starts = None
        self._byte_marks = None

    def _lines(self) -> array:
        if self._line_starts is None:
            starts = array("Q", [0])
            for match in _LINE_BREAK.finditer(self._text):
                starts.append(match.end())
            self._line_starts = starts
        return self._line_starts

    def _marks(self) -> array:
        """Byte offset before char ``k * stride`` for each k, then the total."""
        if self._byte_marks is None:
            marks = array("Q", [0])
            text = self._text
            total = 0
            for offset in range(0, len(text), _BYTE_MARK_STRIDE):
                total += _encoded_len(text[offset:offset + _BYTE_MARK_STRIDE])
                marks.append(total)
            self._byte_marks = marks
        return self._byte_marks

    # ------------------------------------------------------------------
    # Sizes
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    def len_chars(self) -> int:
        return len(self._text)

    def len_bytes(self) -> int:
        return self._marks()[-1]

    def len_lines(self) -> int:
        """Number of lines; a trailing line break starts an extra empty line."""
        return len(self._lines())

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def _check_char(self, index: int) -> None:
        if index < 0 or index > len(self._text):
            raise IndexError(
                f"char index {index} out of range (length {len(self._text)})"
            )

    def line_to_char(self, line: int) -> int:
        """Character index of the first character of *line* (0-indexed)."""
        starts = self._lines()
        if line < 0 or line >= len(starts):
            raise IndexError(f"line {line} out of range ({len(starts)} lines)")
        return starts[line]

    def char_to_line(self, index: int) -> int:
        """Line containing character *index*; the end index maps to the last line."""
        self._check_char(index)
        return bisect_right(self._lines(), index) - 1

    def line_len(self, line: int) -> int:
        """Characters on *line*, excluding its line break."""
        start = self.line_to_char(line)
        starts = self._lines()
        if line + 1 >= len(starts):
            return len(self._text) - start
        end = starts[line + 1]
        if end - 2 >= start and self._text.startswith("\r\n", end - 2):
            return end - 2 - start
        return end - 1 - start

    def line(self, line: int) -> str:
        """Content of *line* without its line break."""
        start = self.line_to_char(line)
        return self._text[start:start + self.line_len(line)]

    def char_to_byte(self, index: int) -> int:
        """UTF-8 byte offset of the first byte of character *index*."""
        self._check_char(index)
        marks = self._marks()
        chunk = index // _BYTE_MARK_STRIDE
        base = chunk * _BYTE_MARK_STRIDE
        return marks[chunk] + _encoded_len(self._text[base:index])

    def byte_to_char(self, offset: int) -> int:
        """Index of the character containing byte *offset* (rounds down)."""
        marks = self._marks()
        total = marks[-1]
        if offset < 0 or offset > total:
            raise IndexError(f"byte offset {offset} out of range (length {total})")
        if offset == total:
            return len(self._text)
        chunk = bisect_right(marks, offset) - 1
        index = chunk * _BYTE_MARK_STRIDE
        position = marks[chunk]
        text = self._text
        while True:
            width = utf8_width(text[index])
            if position + width > offset:
                return index
            position += width
            index += 1

    def is_char_boundary(self, offset: int) -> bool:
        """True if byte *offset* is the first byte of a character or the end."""
        return self.char_to_byte(self.byte_to_char(offset)) == offset

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def slice(self, start: int, end: int) -> str:
        self._check_char(start)
        self._check_char(end)
        return self._text[start:end]

    def find(self, needle: str, start: int = 0) -> int:
        """Index of the first *needle* at or after *start*, or -1."""
        self._check_char(start)
        return self._text.find(needle, start)

    def search(self, pattern: re.Pattern, start: int = 0) -> Optional[re.Match]:
        """First match of *pattern* at or after *start*."""
        self._check_char(start)
        return pattern.search(self._text, start)

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def insert(self, index: int, text: str) -> None:
        self._check_char(index)
        if not text:
            return
        self._text = self._text[:index] + text + self._text[index:]
        self._invalidate()

    def remove(self, start: int, end: int) -> None:
        self._check_char(start)
        self._check_char(end)
        if start > end:
            raise IndexError(f"inverted range ({start}, {end})")
        if start == end:
            return
        self._text = self._text[:start] + self._text[end:]
        self._invalidate()

    def copy(self) -> "TextBuffer":
        return TextBuffer(self._text)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        preview = self._text if len(self._text) <= 40 else self._text[:37] + "..."
        return f"TextBuffer({preview!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextBuffer):
            return self._text == other._text
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]
