"""
Error taxonomy — one exception family per layer of the resolution pipeline.

Boundary and snippet errors wrap the lower layer's error instead of
re-raising it, so callers can tell at which layer a resolution failed and
still reach the original failure through ``.cause``.
"""

from __future__ import annotations

from typing import Optional


class TextsnipError(Exception):
    """Base class for every error raised by textsnip."""


# ---------------------------------------------------------------------------
# Target
# ---------------------------------------------------------------------------

class TargetError(TextsnipError):
    """A target could not be resolved to a character index."""


class NotFoundError(TargetError):
    """A literal or pattern target has no match in the buffer."""

    def __init__(self, needle: str) -> None:
        super().__init__(f"Target not found: {needle!r}")
        self.needle = needle


class OutOfBoundsError(TargetError):
    """A character target lies at or past the end of the buffer."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Character index {index} out of bounds (length {length})")
        self.index = index
        self.length = length


class InvalidPositionError(TargetError):
    """A line or line/column target does not exist in the buffer."""

    def __init__(self, line: int, col: Optional[int] = None) -> None:
        where = f"line {line}" if col is None else f"line {line}, column {col}"
        super().__init__(f"Invalid position: {where}")
        self.line = line
        self.col = col


# ---------------------------------------------------------------------------
# Boundary / extent
# ---------------------------------------------------------------------------

class BoundaryError(TextsnipError):
    """A boundary could not be resolved to a span."""


class BoundaryTargetError(BoundaryError):
    """The boundary's target failed to resolve."""

    def __init__(self, cause: TargetError) -> None:
        super().__init__(str(cause))
        self.cause = cause


class ExtentOutOfBoundsError(BoundaryError):
    """An extent reaches past the end of the buffer."""


class InvalidExtentError(BoundaryError):
    """An extent is nonsensical (e.g. matching an empty literal)."""


# ---------------------------------------------------------------------------
# Snippet
# ---------------------------------------------------------------------------

class SnippetError(TextsnipError):
    """A snippet could not be resolved or replaced."""


class SnippetBoundaryError(SnippetError):
    """One of the snippet's boundaries failed to resolve."""

    def __init__(self, cause: BoundaryError) -> None:
        super().__init__(str(cause))
        self.cause = cause


class InvalidRangeError(SnippetError):
    """The resolved range is empty or inverted."""

    def __init__(self, start: int, end: int) -> None:
        super().__init__(f"Invalid range: start {start} >= end {end}")
        self.start = start
        self.end = end


class SnippetOutOfBoundsError(SnippetError):
    """The resolved range ends past the end of the buffer."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index {index} out of bounds (length {length})")
        self.index = index
        self.length = length


class InvalidUtf8Error(SnippetError):
    """Replacement text cannot be written as UTF-8 text."""


# ---------------------------------------------------------------------------
# Patch
# ---------------------------------------------------------------------------

class PatchError(TextsnipError):
    """A patch could not be applied."""


class RangeOutOfBoundsError(PatchError):
    """The patch range exceeds the buffer's character count."""

    def __init__(self, start: int, end: int, length: int) -> None:
        super().__init__(
            f"Patch range ({start}, {end}) exceeds file bounds (length {length})"
        )
        self.start = start
        self.end = end
        self.length = length


class PatchFileNotFoundError(PatchError):
    """The target file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Target file not found: {path}")
        self.path = path


class PatchIoError(PatchError):
    """Reading or writing a target file failed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"I/O error on {path}: {reason}")
        self.path = path
        self.reason = reason


class PatchFormatError(PatchError):
    """A patch description is malformed."""

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        prefix = f"Patch #{index}: " if index is not None else ""
        super().__init__(prefix + message)
        self.index = index
