"""Tests for boundary resolution."""

import pytest

from textsnip.buffer import TextBuffer
from textsnip.errors import (
    BoundaryTargetError, ExtentOutOfBoundsError, InvalidExtentError, NotFoundError,
)
from textsnip.snip import (
    Boundary, BoundaryResolution, Char, Chars, Exclude, Extend, Include, Line,
    Lines, Literal, Matching,
)


class TestPatternLikeTargets:
    def test_include_keeps_own_span(self):
        buf = TextBuffer("hello world")
        resolved = Boundary(Literal("world"), Include()).resolve(buf)
        assert resolved == BoundaryResolution(6, 11)

    def test_exclude_collapses_to_end(self):
        buf = TextBuffer("hello world")
        resolved = Boundary(Literal("world"), Exclude()).resolve(buf)
        assert resolved == BoundaryResolution(11, 11)

    def test_extend_starts_after_match(self):
        buf = TextBuffer("hello world")
        resolved = Boundary(Literal("hello"), Extend(Chars(1))).resolve(buf)
        assert resolved == BoundaryResolution(5, 6)


class TestPointLikeTargets:
    def test_include_is_zero_width(self):
        buf = TextBuffer("alpha\nbeta\ngamma\n")
        resolved = Boundary(Line(1), Include()).resolve(buf)
        assert (resolved.start, resolved.end) == (6, 6)

    def test_exclude_is_zero_width(self):
        buf = TextBuffer("alpha\nbeta\ngamma\n")
        resolved = Boundary(Line(1), Exclude()).resolve(buf)
        assert (resolved.start, resolved.end) == (6, 6)

    def test_extend_lines(self):
        buf = TextBuffer("one\ntwo\nthree\nfour\n")
        resolved = Boundary(Line(1), Extend(Lines(2))).resolve(buf)
        assert resolved.start == buf.line_to_char(1)
        assert resolved.end == buf.line_to_char(3)

    def test_extend_chars(self):
        buf = TextBuffer("abcdefg")
        resolved = Boundary(Char(2), Extend(Chars(3))).resolve(buf)
        assert (resolved.start, resolved.end) == (2, 5)

    def test_extend_matching(self):
        buf = TextBuffer("a\nb\nc\nd\n")
        mode = Extend(Matching(2, Literal("\n")))
        resolved = Boundary(Line(0), mode).resolve(buf)
        assert (resolved.start, resolved.end) == (0, buf.line_to_char(2))


class TestErrors:
    def test_target_error_is_wrapped(self):
        with pytest.raises(BoundaryTargetError) as exc_info:
            Boundary(Literal("missing"), Include()).resolve(TextBuffer("abc"))
        assert isinstance(exc_info.value.cause, NotFoundError)

    def test_invalid_extent(self):
        mode = Extend(Matching(1, Literal("")))
        with pytest.raises(InvalidExtentError):
            Boundary(Line(0), mode).resolve(TextBuffer("abc"))

    def test_extent_out_of_bounds(self):
        with pytest.raises(ExtentOutOfBoundsError):
            Boundary(Char(1), Extend(Chars(10))).resolve(TextBuffer("abc"))


def test_boundaries_are_values():
    a = Boundary(Literal("x"), Extend(Lines(1)))
    b = Boundary(Literal("x"), Extend(Lines(1)))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Boundary(Literal("x"), Include())
