"""
CLI display — logger setup and user-facing reporting for the textsnip command.

User-facing lines go to stderr so that stdout only ever carries file
content (dry-run previews, or a patched stdin).
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from typing import TextIO

from .composer import ApplyResult

_LOGGER_NAME = "textsnip"
_HANDLER_TAG = "_textsnip_handler"


def setup_logger(verbose: bool = False, log_dir: str = "") -> logging.Logger:
    """Configure the package logger.

    Console output goes to stderr (DEBUG when *verbose*, WARNING otherwise).
    When *log_dir* is set, a timestamped file log captures everything.
    Handlers from a previous call are replaced.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    setattr(console, _HANDLER_TAG, True)
    logger.addHandler(console)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"textsnip_{timestamp}.log")

        # File handler — captures everything
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S"
        ))
        setattr(fh, _HANDLER_TAG, True)
        logger.addHandler(fh)

    return logger


def report_loaded(count: int, err: TextIO | None = None) -> None:
    print(f"Loaded {count} patch(es)", file=err or sys.stderr)


def report_error(message: str, err: TextIO | None = None) -> None:
    print(f"Error: {message}", file=err or sys.stderr)


def report_result(
    result: ApplyResult,
    *,
    dry_run: bool,
    verbose: bool,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Print one line per file, and the new content for verbose dry runs."""
    out = out or sys.stdout
    err = err or sys.stderr

    for file_path, content in result.contents.items():
        if dry_run:
            print(f"Would patch: {file_path}", file=err)
            if verbose:
                out.write(content)
                if not content.endswith("\n"):
                    out.write("\n")
        else:
            print(f"Patched: {file_path}", file=err)

    for file_path, exc in result.errors.items():
        print(f"Error: {file_path}: {exc}", file=err)
