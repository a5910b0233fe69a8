"""Tests for the patch loader."""

import json
import os
import tempfile

import pytest

from textsnip.errors import PatchFormatError
from textsnip.loader import load_patch_file, load_patches
from textsnip.patch import LinePatch, Patch


class TestRangeEntries:
    def test_json_list(self):
        text = json.dumps([
            {"file": "a.txt", "range": [6, 11], "replacement": "World"},
            {"file": "b.txt", "range": [5, 5], "replacement": " "},
        ])
        patches = load_patches(text)
        assert patches == [
            Patch(file="a.txt", range=(6, 11), replacement="World"),
            Patch(file="b.txt", range=(5, 5), replacement=" "),
        ]

    def test_yaml_list(self):
        text = (
            "- file: a.txt\n"
            "  range: [0, 4]\n"
            "  replacement: best\n"
            "  symbol_path: [class App, def run]\n"
            "  max_line_drift: 3\n"
        )
        (patch,) = load_patches(text)
        assert patch.range == (0, 4)
        assert patch.symbol_path == ("class App", "def run")
        assert patch.max_line_drift == 3

    def test_single_mapping(self):
        patches = load_patches('{"file": "a", "range": [0, 1]}')
        assert patches == [Patch(file="a", range=(0, 1))]

    def test_null_replacement_is_deletion(self):
        (patch,) = load_patches('[{"file": "a", "range": [0, 1], "replacement": null}]')
        assert patch.is_deletion

    def test_empty_document(self):
        assert load_patches("") == []


class TestLineColumnEntries:
    def test_left_unresolved(self):
        text = json.dumps([
            {"file": "f", "start": [1, 0], "end": [1, 6], "replacement": "EDITED"},
        ])
        assert load_patches(text) == [
            LinePatch(file="f", start=(1, 0), end=(1, 6), replacement="EDITED"),
        ]

    def test_target_file_is_not_read(self):
        text = json.dumps([{"file": "/nonexistent/textsnip.txt", "start": [9, 0], "end": [9, 1]}])
        (patch,) = load_patches(text)
        assert patch.start == (9, 0)

    def test_negative_position(self):
        text = json.dumps([{"file": "f", "start": [0, -1], "end": [0, 1]}])
        with pytest.raises(PatchFormatError) as exc_info:
            load_patches(text)
        assert exc_info.value.index == 0

    def test_mixed_with_ranges(self):
        text = (
            "- {file: a, range: [0, 1]}\n"
            "- {file: a, start: [0, 0], end: [0, 1], replacement: x}\n"
        )
        first, second = load_patches(text)
        assert isinstance(first, Patch)
        assert isinstance(second, LinePatch)


class TestMalformed:
    def test_not_a_list(self):
        with pytest.raises(PatchFormatError):
            load_patches("not valid json")

    def test_broken_json(self):
        with pytest.raises(PatchFormatError, match="Invalid JSON"):
            load_patches('[{"file": "a", "range": [0, 1]')

    def test_broken_yaml(self):
        with pytest.raises(PatchFormatError, match="Invalid YAML"):
            load_patches("- file: a\n  range: [0, 1\n")

    def test_missing_file(self):
        with pytest.raises(PatchFormatError) as exc_info:
            load_patches('[{"file": "a", "range": [0, 1]}, {"range": [0, 1]}]')
        assert exc_info.value.index == 1

    def test_bad_range(self):
        with pytest.raises(PatchFormatError):
            load_patches('[{"file": "a", "range": [0]}]')
        with pytest.raises(PatchFormatError):
            load_patches('[{"file": "a", "range": [0, "1"]}]')

    def test_no_location(self):
        with pytest.raises(PatchFormatError):
            load_patches('[{"file": "a", "replacement": "x"}]')

    def test_bad_replacement(self):
        with pytest.raises(PatchFormatError):
            load_patches('[{"file": "a", "range": [0, 1], "replacement": 5}]')


def test_load_patch_file():
    fd, path = tempfile.mkstemp(suffix=".json")
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write('[{"file": "x.txt", "range": [0, 2], "replacement": "ab"}]')
    try:
        assert load_patch_file(path) == [
            Patch(file="x.txt", range=(0, 2), replacement="ab")
        ]
    finally:
        os.unlink(path)
