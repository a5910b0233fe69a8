"""
CLI entry point — argument parsing and main execution flow.

    textsnip patches.json            # apply and write back
    textsnip --dry-run -v < p.yaml   # preview new contents on stdout
"""

from __future__ import annotations

import argparse
import logging
import sys

from .cli_display import report_error, report_loaded, report_result, setup_logger
from .composer import PatchSet
from .config import Config
from .errors import PatchIoError, TextsnipError
from .loader import load_patch_file
from .sources import STDIN_MARKER, read_source, write_source

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textsnip",
        description="Apply character-range patches to text files",
    )
    parser.add_argument("patches", nargs="?", default=STDIN_MARKER,
                        help="JSON or YAML patch list (default: stdin)")
    parser.add_argument("--dry-run", action="store_true",
                        help="Compute results without writing any file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Report progress; with --dry-run, print new contents")
    parser.add_argument("--encoding", default=None,
                        help="Text encoding of target files (default: from config)")
    parser.add_argument("--config", default=None,
                        help="Path to .textsnip.yaml config file")
    return parser


def _target_reader(patches_path: str, encoding: str):
    """Reader for target files; stdin cannot be both patch list and target."""
    def read(path: str) -> str:
        if path == STDIN_MARKER and patches_path == STDIN_MARKER:
            raise PatchIoError(path, "standard input already holds the patch list")
        return read_source(path, encoding=encoding)
    return read


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # ── 0. Load config ──
    cfg = Config.load(args.config)
    dry_run = args.dry_run or cfg.DRY_RUN
    verbose = args.verbose or cfg.VERBOSE
    encoding = args.encoding or cfg.ENCODING
    setup_logger(verbose=verbose, log_dir=cfg.LOG_DIR)

    # ── 1. Load patches ──
    try:
        patches = load_patch_file(args.patches, encoding=encoding)
    except TextsnipError as exc:
        report_error(str(exc))
        return 1
    if verbose:
        report_loaded(len(patches))

    # ── 2. Apply, file by file ──
    result = PatchSet(patches).apply_by_file(
        reader=_target_reader(args.patches, encoding)
    )

    # ── 3. Write back ──
    if not dry_run:
        for file_path, content in list(result.contents.items()):
            try:
                write_source(file_path, content, encoding=encoding)
            except TextsnipError as exc:
                del result.contents[file_path]
                result.errors[file_path] = exc

    report_result(result, dry_run=dry_run, verbose=verbose)
    logger.debug(
        "[CLI] %d file(s) ok, %d failed",
        len(result.contents), len(result.errors),
    )
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
