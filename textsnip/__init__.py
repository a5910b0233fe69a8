"""
textsnip — character-precise, offset-stable text patching.

Public API for library usage::

    from textsnip import Patch, PatchSet, TextBuffer
    from textsnip.snip import Between, Boundary, Include, Literal

    buffer = TextBuffer("hello world")
    snippet = Between(
        Boundary(Literal("hello"), Include()),
        Boundary(Literal("world"), Include()),
    )
    snippet.replace(buffer, "-")          # -> "hello-world"
"""

from .buffer import TextBuffer
from .composer import ApplyResult, PatchSet
from .errors import (
    TextsnipError,
    TargetError, NotFoundError, OutOfBoundsError, InvalidPositionError,
    BoundaryError, BoundaryTargetError, ExtentOutOfBoundsError, InvalidExtentError,
    SnippetError, SnippetBoundaryError, InvalidRangeError, SnippetOutOfBoundsError,
    InvalidUtf8Error,
    PatchError, RangeOutOfBoundsError, PatchFileNotFoundError, PatchIoError,
    PatchFormatError,
)
from .loader import load_patch_file, load_patches
from .patch import LinePatch, Patch

__all__ = [
    "TextBuffer", "Patch", "LinePatch", "PatchSet", "ApplyResult",
    "load_patches", "load_patch_file",
    "TextsnipError",
    "TargetError", "NotFoundError", "OutOfBoundsError", "InvalidPositionError",
    "BoundaryError", "BoundaryTargetError", "ExtentOutOfBoundsError",
    "InvalidExtentError",
    "SnippetError", "SnippetBoundaryError", "InvalidRangeError",
    "SnippetOutOfBoundsError", "InvalidUtf8Error",
    "PatchError", "RangeOutOfBoundsError", "PatchFileNotFoundError",
    "PatchIoError", "PatchFormatError",
]

__version__ = "0.1.0"
