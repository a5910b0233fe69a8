"""
Extents — distances used to grow a boundary's span forward.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..buffer import TextBuffer
from ..errors import ExtentOutOfBoundsError, InvalidExtentError
from .target import Literal, Pattern, Target


class Extent:
    """Base class of the closed set of extent variants."""

    __slots__ = ()
    count: int


@dataclass(frozen=True)
class Lines(Extent):
    """Move forward a number of lines, landing on the line's first character."""
    count: int


@dataclass(frozen=True)
class Chars(Extent):
    """Move forward a number of characters."""
    count: int


@dataclass(frozen=True)
class Bytes(Extent):
    """Move forward a number of UTF-8 bytes, never stopping mid-character."""
    count: int


@dataclass(frozen=True)
class Matching(Extent):
    """Move past ``count`` successive matches of a literal or pattern target."""
    count: int
    target: Target


def calculate(buffer: TextBuffer, from_index: int, extent: Extent) -> int:
    """Return the character index reached by moving *extent* from *from_index*.

    Raises
    ------
    InvalidExtentError
        Negative counts, non-literal/pattern matching targets, or targets
        that would match the empty string.
    ExtentOutOfBoundsError
        The distance runs past the end of the buffer.
    """
    if extent.count < 0:
        raise InvalidExtentError(f"Negative extent: {extent!r}")
    if from_index < 0 or from_index > buffer.len_chars():
        raise ExtentOutOfBoundsError(
            f"Extent origin {from_index} outside buffer (length {buffer.len_chars()})"
        )

    if isinstance(extent, Lines):
        return _lines_extent(buffer, from_index, extent.count)
    if isinstance(extent, Chars):
        return _chars_extent(buffer, from_index, extent.count)
    if isinstance(extent, Bytes):
        return _bytes_extent(buffer, from_index, extent.count)
    if isinstance(extent, Matching):
        return _matching_extent(buffer, from_index, extent.count, extent.target)
    raise TypeError(f"Unknown extent variant: {type(extent).__name__}")


def _lines_extent(buffer: TextBuffer, from_index: int, count: int) -> int:
    line = buffer.char_to_line(from_index) + count
    if line >= buffer.len_lines():
        raise ExtentOutOfBoundsError(
            f"Line {line} past last line ({buffer.len_lines()} lines)"
        )
    return buffer.line_to_char(line)


def _chars_extent(buffer: TextBuffer, from_index: int, count: int) -> int:
    end = from_index + count
    if end > buffer.len_chars():
        raise ExtentOutOfBoundsError(
            f"Char {end} past end of buffer (length {buffer.len_chars()})"
        )
    return end


def _bytes_extent(buffer: TextBuffer, from_index: int, count: int) -> int:
    target = buffer.char_to_byte(from_index) + count
    if target > buffer.len_bytes():
        raise ExtentOutOfBoundsError(
            f"Byte {target} past end of buffer (length {buffer.len_bytes()})"
        )
    index = buffer.byte_to_char(target)
    # Inside a multi-byte character: round forward to the next one.
    if buffer.char_to_byte(index) < target:
        index += 1
    return index


def _matching_extent(
    buffer: TextBuffer, from_index: int, count: int, target: Target
) -> int:
    if isinstance(target, Literal):
        if not target.text:
            raise InvalidExtentError("Cannot extend by matches of an empty literal")
    elif not isinstance(target, Pattern):
        raise InvalidExtentError(
            f"Matching extent needs a Literal or Pattern target, got "
            f"{type(target).__name__}"
        )

    position = from_index
    for found in range(count):
        if isinstance(target, Literal):
            index = buffer.find(target.text, position)
            if index < 0:
                raise ExtentOutOfBoundsError(
                    f"Only {found} of {count} matches of {target.text!r}"
                )
            position = index + len(target.text)
        else:
            match = buffer.search(target.regex, position)
            if match is None:
                raise ExtentOutOfBoundsError(
                    f"Only {found} of {count} matches of {target.regex.pattern!r}"
                )
            if match.end() == match.start():
                raise InvalidExtentError(
                    f"Pattern {target.regex.pattern!r} matched the empty string"
                )
            position = match.end()
    return position
