"""
Sources — read patch targets from disk or stdin, write results back
atomically.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys

from .errors import PatchFileNotFoundError, PatchIoError

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def read_source(path: str, encoding: str = "utf-8") -> str:
    """Return the text of *path*; ``"-"`` reads standard input.

    Line endings are kept as stored so character positions match the file.
    """
    if path == STDIN_MARKER:
        return sys.stdin.read()
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except FileNotFoundError as exc:
        raise PatchFileNotFoundError(path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise PatchIoError(path, str(exc)) from exc


def write_source(path: str, content: str, encoding: str = "utf-8") -> None:
    """Write *content* to *path* via temp file + rename; ``"-"`` is stdout."""
    if path == STDIN_MARKER:
        sys.stdout.write(content)
        return

    abs_path = os.path.abspath(path)
    tmp_path = abs_path + ".textsnip_tmp"
    try:
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            f.write(content)

        # On Windows, os.rename fails if destination exists
        if os.path.exists(abs_path):
            shutil.move(tmp_path, abs_path)
        else:
            os.rename(tmp_path, abs_path)
    except OSError as exc:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        logger.error("[Sources] Write failed for %s: %s", path, exc)
        raise PatchIoError(path, str(exc)) from exc
