"""
Patch composer — groups patches by file and applies each group so that no
patch's recorded position is invalidated by another patch in the group.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Iterable, Iterator, Mapping, Optional

from .buffer import TextBuffer
from .errors import PatchFileNotFoundError, TextsnipError
from .patch import LinePatch, PatchEntry
from .sources import read_source

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]


@dataclass
class ApplyResult:
    """Result of applying a patch set file by file."""
    contents: dict[str, str] = field(default_factory=dict)
    errors: dict[str, TextsnipError] = field(default_factory=dict)
    patches_applied: int = 0

    @property
    def success(self) -> bool:
        return not self.errors


class PatchSet:
    """A batch of patches, possibly spanning several files.

    Patches are grouped by file and each group is applied highest start
    position first. A patch only shifts text at or after its own start, so
    every patch still to be applied (all of which start further left) sees
    the positions it was computed against.

    Patches sharing a start position are applied in registration order.
    Overlapping ranges are not detected; keeping them disjoint is up to the
    caller.
    """

    def __init__(self, patches: Optional[Iterable[PatchEntry]] = None) -> None:
        self._patches: list[PatchEntry] = list(patches or [])

    def add(self, patch: PatchEntry) -> None:
        """Register a patch. Nothing is applied until one of the apply calls."""
        self._patches.append(patch)

    def extend(self, patches: Iterable[PatchEntry]) -> None:
        for patch in patches:
            self.add(patch)

    @property
    def patches(self) -> tuple[PatchEntry, ...]:
        return tuple(self._patches)

    def __len__(self) -> int:
        return len(self._patches)

    def __iter__(self) -> Iterator[PatchEntry]:
        return iter(self._patches)

    def group_by_file(self) -> dict[str, list[PatchEntry]]:
        """Patches per file, files in first-registered order."""
        groups: dict[str, list[PatchEntry]] = {}
        for patch in self._patches:
            groups.setdefault(patch.file, []).append(patch)
        return groups

    # ------------------------------------------------------------------
    # Application
    # ------------------------------------------------------------------

    def apply_to_files(
        self,
        reader: Optional[Reader] = None,
        encoding: str = "utf-8",
    ) -> dict[str, str]:
        """Read every target file once, apply its patches, return new contents.

        Nothing is written. The first read error or rejected patch is raised
        and no contents are returned.
        """
        read = reader or partial(read_source, encoding=encoding)
        results: dict[str, str] = {}
        for file_path, patches in self.group_by_file().items():
            results[file_path] = apply_group(file_path, read(file_path), patches)
        return results

    def apply_to_buffers(self, buffers: Mapping[str, str]) -> dict[str, str]:
        """Like ``apply_to_files`` but against in-memory ``{file: text}``."""
        return self.apply_to_files(reader=partial(_read_mapping, buffers))

    def apply_by_file(
        self,
        reader: Optional[Reader] = None,
        encoding: str = "utf-8",
    ) -> ApplyResult:
        """Apply each file's group independently.

        A failing group is recorded in ``errors`` and left out of
        ``contents``; the other groups are unaffected.
        """
        read = reader or partial(read_source, encoding=encoding)
        result = ApplyResult()
        for file_path, patches in self.group_by_file().items():
            try:
                content = apply_group(file_path, read(file_path), patches)
            except TextsnipError as exc:
                logger.warning(
                    "[Patch] Failed to apply %d patch(es) for %s: %s",
                    len(patches), file_path, exc,
                )
                result.errors[file_path] = exc
                continue
            result.contents[file_path] = content
            result.patches_applied += len(patches)
        return result


def apply_group(file_path: str, text: str, patches: Iterable[PatchEntry]) -> str:
    """Apply *patches* (all for *file_path*) to *text*, right to left.

    Line/column patches are resolved against *text* before anything is
    applied, so every position refers to the content as read.
    """
    buffer = TextBuffer(text)
    resolved = [
        patch.resolve(buffer) if isinstance(patch, LinePatch) else patch
        for patch in patches
    ]
    ordered = sorted(resolved, key=lambda p: p.start, reverse=True)
    for patch in ordered:
        patch.apply(buffer)
    logger.debug("[Patch] Applied %d patch(es) to %s", len(ordered), file_path)
    return str(buffer)


def _read_mapping(buffers: Mapping[str, str], file_path: str) -> str:
    try:
        return buffers[file_path]
    except KeyError:
        raise PatchFileNotFoundError(file_path) from None
