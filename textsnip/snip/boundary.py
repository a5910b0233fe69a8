"""
Boundaries — a target plus how its own span is treated.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..buffer import TextBuffer
from ..errors import BoundaryTargetError, TargetError
from .extent import Extent, calculate
from .target import Target


class BoundaryMode:
    """Base class of the closed set of boundary treatment modes."""

    __slots__ = ()


@dataclass(frozen=True)
class Exclude(BoundaryMode):
    """Collapse the boundary to the end edge of its span."""


@dataclass(frozen=True)
class Include(BoundaryMode):
    """Keep the boundary's own span."""


@dataclass(frozen=True)
class Extend(BoundaryMode):
    """Start at the end of the boundary's span and grow by ``extent``."""
    extent: Extent


@dataclass(frozen=True)
class BoundaryResolution:
    start: int
    end: int


@dataclass(frozen=True)
class Boundary:
    """Pairs a target with its treatment mode."""
    target: Target
    mode: BoundaryMode

    def resolve(self, buffer: TextBuffer) -> BoundaryResolution:
        """Resolve to a ``[start, end)`` span in *buffer*.

        Target failures are wrapped in ``BoundaryTargetError``; extent
        failures propagate as raised by ``calculate``.
        """
        try:
            start, end = self.target.resolve_range(buffer)
        except TargetError as exc:
            raise BoundaryTargetError(exc) from exc

        mode = self.mode
        if isinstance(mode, Exclude):
            return BoundaryResolution(end, end)
        if isinstance(mode, Include):
            return BoundaryResolution(start, end)
        if isinstance(mode, Extend):
            return BoundaryResolution(end, calculate(buffer, end, mode.extent))
        raise TypeError(f"Unknown boundary mode: {type(mode).__name__}")
