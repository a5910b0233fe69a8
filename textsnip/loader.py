"""
Patch loader — parses patch descriptions from JSON or YAML documents.

Accepted shape (one mapping, or a list of them)::

    - file: src/app.py
      range: [120, 131]          # character range
      replacement: "new_name"
    - file: src/app.py
      start: [4, 0]              # 0-indexed (line, col)
      end: [4, 12]
      replacement: null          # deletion
      symbol_path: ["class App", "def run"]
      max_line_drift: 3
"""

from __future__ import annotations

import json
import logging
from typing import Any

import yaml

from .errors import PatchFormatError
from .patch import LinePatch, Patch, PatchEntry
from .sources import read_source

logger = logging.getLogger(__name__)


def load_patch_file(path: str, encoding: str = "utf-8") -> list[PatchEntry]:
    """Load patches from *path* (``"-"`` reads standard input)."""
    return load_patches(read_source(path, encoding=encoding))


def load_patches(text: str) -> list[PatchEntry]:
    """Parse *text* into patches.

    ``range`` entries become :class:`Patch`; line/column entries become
    :class:`LinePatch` and are resolved later, against the same content
    the patch is applied to. No target file is read here.

    Raises
    ------
    PatchFormatError
        The document is not parseable or an entry is malformed.
    """
    data = _parse_document(text)
    if data is None:
        return []
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise PatchFormatError(
            f"Expected a list of patches, got {type(data).__name__}"
        )

    patches = [_parse_entry(entry, index) for index, entry in enumerate(data)]
    logger.debug("[Loader] Parsed %d patch(es)", len(patches))
    return patches


def _parse_document(text: str) -> Any:
    stripped = text.lstrip()
    if stripped.startswith(("[", "{")):
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise PatchFormatError(f"Invalid JSON: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise PatchFormatError(f"Invalid YAML: {exc}") from exc


def _parse_entry(entry: Any, index: int) -> PatchEntry:
    if not isinstance(entry, dict):
        raise PatchFormatError("entry must be a mapping", index)

    file_path = entry.get("file")
    if not isinstance(file_path, str) or not file_path:
        raise PatchFormatError("'file' must be a non-empty string", index)

    replacement = entry.get("replacement")
    if replacement is not None and not isinstance(replacement, str):
        raise PatchFormatError("'replacement' must be a string or null", index)

    symbol_path = entry.get("symbol_path")
    if symbol_path is not None:
        if not isinstance(symbol_path, list) or not all(
            isinstance(part, str) for part in symbol_path
        ):
            raise PatchFormatError("'symbol_path' must be a list of strings", index)
        symbol_path = tuple(symbol_path)

    max_line_drift = entry.get("max_line_drift")
    if max_line_drift is not None and (
        not _is_int(max_line_drift) or max_line_drift < 0
    ):
        raise PatchFormatError("'max_line_drift' must be a non-negative integer", index)

    if "range" in entry:
        start, end = _int_pair(entry["range"], "range", index)
        return Patch(
            file=file_path,
            range=(start, end),
            replacement=replacement,
            symbol_path=symbol_path,
            max_line_drift=max_line_drift,
        )

    if "start" in entry and "end" in entry:
        line_start, col_start = _int_pair(entry["start"], "start", index)
        line_end, col_end = _int_pair(entry["end"], "end", index)
        if min(line_start, col_start, line_end, col_end) < 0:
            raise PatchFormatError("line and column must not be negative", index)
        return LinePatch(
            file=file_path,
            start=(line_start, col_start),
            end=(line_end, col_end),
            replacement=replacement,
            symbol_path=symbol_path,
            max_line_drift=max_line_drift,
        )

    raise PatchFormatError("needs either 'range' or both 'start' and 'end'", index)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _int_pair(value: Any, name: str, index: int) -> tuple[int, int]:
    if (
        not isinstance(value, (list, tuple))
        or len(value) != 2
        or not all(_is_int(v) for v in value)
    ):
        raise PatchFormatError(f"'{name}' must be a pair of integers", index)
    return value[0], value[1]
