"""
Snippets — range-selection strategies built from boundaries.

A snippet does not hold positions; it resolves to a ``(start, end)`` range
only against a given buffer. Resolution is strict: empty or inverted ranges
are rejected, since snippets select existing content (zero-width inserts
are expressed directly as a ``Patch``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..buffer import TextBuffer
from ..errors import (
    BoundaryError,
    InvalidRangeError,
    InvalidUtf8Error,
    SnippetBoundaryError,
    SnippetOutOfBoundsError,
)
from .boundary import Boundary, BoundaryResolution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnippetResolution:
    start: int
    end: int


class Snippet:
    """Base class of the closed set of snippet variants."""

    __slots__ = ()

    def resolve(self, buffer: TextBuffer) -> SnippetResolution:
        """Resolve to a validated, non-empty ``[start, end)`` range."""
        if isinstance(self, All):
            return SnippetResolution(0, buffer.len_chars())
        if isinstance(self, At):
            span = _boundary(self.boundary, buffer)
            start, end = span.start, span.end
        elif isinstance(self, From):
            start, end = _boundary(self.boundary, buffer).end, buffer.len_chars()
        elif isinstance(self, To):
            start, end = 0, _boundary(self.boundary, buffer).start
        elif isinstance(self, Between):
            start = _boundary(self.start, buffer).end
            end = _boundary(self.end, buffer).start
        else:
            raise TypeError(f"Unknown snippet variant: {type(self).__name__}")

        _validate_range(start, end, buffer.len_chars())
        logger.debug("[Snippet] %r resolved to (%d, %d)", self, start, end)
        return SnippetResolution(start, end)

    def replace(self, buffer: TextBuffer, replacement: str) -> TextBuffer:
        """Return a copy of *buffer* with the resolved range replaced.

        *buffer* itself is never modified.
        """
        _validate_replacement(replacement)
        resolution = self.resolve(buffer)
        updated = buffer.copy()
        updated.remove(resolution.start, resolution.end)
        updated.insert(resolution.start, replacement)
        return updated


@dataclass(frozen=True)
class At(Snippet):
    """The boundary's own resolved span."""
    boundary: Boundary


@dataclass(frozen=True)
class From(Snippet):
    """From the end of the boundary to the end of the buffer."""
    boundary: Boundary


@dataclass(frozen=True)
class To(Snippet):
    """From the start of the buffer to the start of the boundary."""
    boundary: Boundary


@dataclass(frozen=True)
class Between(Snippet):
    """From the end of ``start`` to the start of ``end``."""
    start: Boundary
    end: Boundary


@dataclass(frozen=True)
class All(Snippet):
    """The whole buffer."""


def _boundary(boundary: Boundary, buffer: TextBuffer) -> BoundaryResolution:
    try:
        return boundary.resolve(buffer)
    except BoundaryError as exc:
        raise SnippetBoundaryError(exc) from exc


def _validate_range(start: int, end: int, length: int) -> None:
    if start >= end:
        raise InvalidRangeError(start, end)
    if end > length:
        raise SnippetOutOfBoundsError(end, length)


def _validate_replacement(replacement: str) -> None:
    if "\0" in replacement:
        raise InvalidUtf8Error("null bytes not allowed")
    try:
        replacement.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidUtf8Error(f"replacement is not valid UTF-8: {exc.reason}") from exc
