"""Positional resolution: targets, extents, boundaries and snippets."""

from .target import Target, Literal, Pattern, Line, Char, Position
from .extent import Extent, Lines, Chars, Bytes, Matching, calculate
from .boundary import (
    Boundary, BoundaryMode, BoundaryResolution, Exclude, Include, Extend,
)
from .snippet import Snippet, SnippetResolution, At, From, To, Between, All

__all__ = [
    "Target", "Literal", "Pattern", "Line", "Char", "Position",
    "Extent", "Lines", "Chars", "Bytes", "Matching", "calculate",
    "Boundary", "BoundaryMode", "BoundaryResolution",
    "Exclude", "Include", "Extend",
    "Snippet", "SnippetResolution", "At", "From", "To", "Between", "All",
]
