"""Tests for TextBuffer line/char/byte addressing."""

import pytest

from textsnip.buffer import TextBuffer, utf8_width


class TestLines:
    def test_trailing_newline_starts_an_empty_line(self):
        buf = TextBuffer("hello\nworld\n")
        assert buf.len_lines() == 3
        assert buf.line_to_char(0) == 0
        assert buf.line_to_char(1) == 6
        assert buf.line_to_char(2) == 12
        assert buf.line_len(2) == 0

    def test_line_break_belongs_to_its_line(self):
        buf = TextBuffer("hello\nworld\n")
        assert buf.char_to_line(5) == 0
        assert buf.char_to_line(6) == 1
        assert buf.char_to_line(12) == 2

    def test_line_content_excludes_break(self):
        buf = TextBuffer("hello\nworld\n")
        assert buf.line(0) == "hello"
        assert buf.line(1) == "world"
        assert buf.line_len(0) == 5

    def test_crlf_and_lone_cr(self):
        buf = TextBuffer("a\r\nb\rc")
        assert buf.len_lines() == 3
        assert buf.line_to_char(1) == 3
        assert buf.line_to_char(2) == 5
        assert buf.line(0) == "a"
        assert buf.line(1) == "b"
        assert buf.line(2) == "c"

    @pytest.mark.parametrize("brk", ["\x0b", "\x0c", "\x85", "\u2028", "\u2029"])
    def test_unicode_line_breaks(self, brk):
        buf = TextBuffer(f"ab{brk}cd")
        assert buf.len_lines() == 2
        assert buf.line_to_char(1) == 3
        assert buf.line(0) == "ab"
        assert buf.char_to_line(3) == 1

    def test_empty_buffer_has_one_line(self):
        buf = TextBuffer("")
        assert buf.len_lines() == 1
        assert buf.line_len(0) == 0
        assert buf.char_to_line(0) == 0

    def test_line_out_of_range(self):
        buf = TextBuffer("one line")
        with pytest.raises(IndexError):
            buf.line_to_char(1)
        with pytest.raises(IndexError):
            buf.line_to_char(-1)


class TestBytes:
    def test_utf8_width(self):
        assert utf8_width("a") == 1
        assert utf8_width("é") == 2
        assert utf8_width("☕") == 3
        assert utf8_width("😊") == 4

    def test_multibyte_offsets(self):
        buf = TextBuffer("aé😊")
        assert buf.len_chars() == 3
        assert buf.len_bytes() == 7
        assert buf.char_to_byte(1) == 1
        assert buf.char_to_byte(2) == 3
        assert buf.char_to_byte(3) == 7

    def test_byte_to_char_rounds_down(self):
        buf = TextBuffer("aé😊")
        assert buf.byte_to_char(2) == 1
        assert buf.byte_to_char(3) == 2
        assert buf.byte_to_char(5) == 2
        assert buf.byte_to_char(7) == 3

    def test_char_boundaries(self):
        buf = TextBuffer("aé😊")
        assert buf.is_char_boundary(3) is True
        assert buf.is_char_boundary(4) is False
        assert buf.is_char_boundary(7) is True

    def test_offsets_past_the_first_stride(self):
        buf = TextBuffer("é" * 3000)
        assert buf.len_bytes() == 6000
        assert buf.char_to_byte(2500) == 5000
        assert buf.byte_to_char(5000) == 2500
        assert buf.byte_to_char(5001) == 2500
        assert buf.byte_to_char(6000) == 3000

    def test_byte_offset_out_of_range(self):
        buf = TextBuffer("abc")
        with pytest.raises(IndexError):
            buf.byte_to_char(4)


class TestEditing:
    def test_insert_rebuilds_indexes(self):
        buf = TextBuffer("ab")
        assert buf.len_lines() == 1
        buf.insert(1, "\né")
        assert str(buf) == "a\néb"
        assert buf.len_lines() == 2
        assert buf.len_bytes() == 5

    def test_remove(self):
        buf = TextBuffer("a\nb")
        buf.remove(1, 2)
        assert str(buf) == "ab"
        assert buf.len_lines() == 1

    def test_remove_rejects_inverted_range(self):
        buf = TextBuffer("abc")
        with pytest.raises(IndexError):
            buf.remove(2, 1)

    def test_copy_is_independent(self):
        buf = TextBuffer("abc")
        other = buf.copy()
        other.insert(3, "d")
        assert str(buf) == "abc"
        assert other == TextBuffer("abcd")

    def test_rejects_non_text(self):
        with pytest.raises(TypeError):
            TextBuffer(b"bytes")


class TestSearching:
    def test_find_from_offset(self):
        buf = TextBuffer("abcabc")
        assert buf.find("abc") == 0
        assert buf.find("abc", 1) == 3
        assert buf.find("zzz") == -1

    def test_slice(self):
        buf = TextBuffer("hello world")
        assert buf.slice(6, 11) == "world"
        with pytest.raises(IndexError):
            buf.slice(0, 12)
