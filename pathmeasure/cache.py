"""Geometry cache and arc-length queries for a single path.

The cache moves through four states, each built lazily by whichever query
first needs it:

    EMPTY -> SEGMENTS_READY -> RANGES_READY -> LOOKUP_READY

Any mutation of the path resets it to EMPTY. A pure translation instead
shifts every cached point in place and keeps the current state, since
lengths and length ranges do not change under translation.

A cache is not thread-safe. Mutating and querying the same path from
several threads at once is undefined and must be prevented by the caller.
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from pathmeasure.arc_length import build_length_ranges, find_segment, total_length
from pathmeasure.decompose import decompose
from pathmeasure.interpolation import distance
from pathmeasure.lookup_table import build_point_lookup_tables, lookup_points, nearest_point
from pathmeasure.segment import Segment
from pathmeasure.types import ORIGIN, CalculationSettings, DrawCommand, Point

logger = logging.getLogger(__name__)


class CacheState(str, Enum):
    """How much derived geometry a cache currently holds."""

    EMPTY = "empty"
    SEGMENTS_READY = "segments_ready"
    RANGES_READY = "ranges_ready"
    LOOKUP_READY = "lookup_ready"


@dataclass
class PathCache:
    """Derived geometry for one path's command sequence.

    Callers pass the path's current commands to every query and must call
    invalidate() (or translate()) whenever those commands change.

    Attributes:
        settings: Precision used for the next build
        close_subpaths: Whether Close commands draw a closing line
        segments: Decomposed segments, None until built
        total_length: Sum of segment lengths, None until built
        length_ranges_ready: Every segment has a length range
        lookup_table_ready: Every segment has a point lookup table
    """

    settings: CalculationSettings = field(default_factory=CalculationSettings)
    close_subpaths: bool = False
    segments: list[Segment] | None = None
    total_length: float | None = None
    length_ranges_ready: bool = False
    lookup_table_ready: bool = False

    @property
    def state(self) -> CacheState:
        if self.segments is None:
            return CacheState.EMPTY
        if self.lookup_table_ready:
            return CacheState.LOOKUP_READY
        if self.length_ranges_ready:
            return CacheState.RANGES_READY
        return CacheState.SEGMENTS_READY

    # =========================================================================
    # Invalidation
    # =========================================================================

    def invalidate(self) -> None:
        """Drop all derived geometry."""
        if self.segments is not None:
            logger.debug(f"Invalidating cache ({self.state.value})")
        self.segments = None
        self.total_length = None
        self.length_ranges_ready = False
        self.lookup_table_ready = False

    def translate(self, dx: float, dy: float) -> None:
        """Shift cached points by (dx, dy) without rebuilding anything."""
        if self.segments is None:
            return
        for segment in self.segments:
            segment.translate(dx, dy)
        logger.debug(f"Translated {len(self.segments)} cached segments by ({dx}, {dy})")

    # =========================================================================
    # Lazy builds
    # =========================================================================

    def ensure_segments(self, commands: Sequence[DrawCommand]) -> list[Segment]:
        """Decompose commands into segments if not already cached."""
        if self.segments is None:
            self.segments = decompose(
                commands, self.settings, close_subpaths=self.close_subpaths
            )
        return self.segments

    def ensure_total_length(self, commands: Sequence[DrawCommand]) -> float:
        """Total path length, computed once per build."""
        segments = self.ensure_segments(commands)
        if self.total_length is None:
            self.total_length = total_length(segments)
        return self.total_length

    def ensure_length_ranges(self, commands: Sequence[DrawCommand]) -> list[Segment]:
        """Assign length ranges to cached segments if not already done."""
        segments = self.ensure_segments(commands)
        if not self.length_ranges_ready and segments:
            build_length_ranges(segments, self.ensure_total_length(commands))
            self.length_ranges_ready = True
        return segments

    def ensure_lookup_table(self, commands: Sequence[DrawCommand]) -> list[Segment]:
        """Build point lookup tables for cached segments if not already done."""
        segments = self.ensure_length_ranges(commands)
        if not self.lookup_table_ready and segments:
            build_point_lookup_tables(segments, float(self.settings.perpendicular_precision))
            self.lookup_table_ready = True
        return segments

    def lookup_points(self, commands: Sequence[DrawCommand]) -> list[Point]:
        """All lookup table samples in drawing order."""
        return lookup_points(self.ensure_lookup_table(commands))

    # =========================================================================
    # Queries
    # =========================================================================

    def length(self, commands: Sequence[DrawCommand]) -> float:
        """Total length of the path; 0 when it has no segments."""
        if not self.ensure_segments(commands):
            return 0.0
        return self.ensure_total_length(commands)

    def point_at_fraction(self, commands: Sequence[DrawCommand], t: float) -> Point:
        """Point at t * length into the path; the origin for an empty path."""
        segments = self.ensure_length_ranges(commands)
        if not segments:
            return ORIGIN
        segment, local_t = find_segment(segments, t)
        return segment.point(local_t)

    def slope_at_fraction(self, commands: Sequence[DrawCommand], t: float) -> float:
        """Slope at t * length into the path, with upward-positive y.

        Returns 0 for an empty path, and inf or nan for vertical tangents.
        """
        segments = self.ensure_length_ranges(commands)
        if not segments:
            return 0.0
        segment, local_t = find_segment(segments, t)
        # y grows downward, so negate to make rising lines positive
        return -segment.slope(local_t)

    def tangent_angle_at_fraction(self, commands: Sequence[DrawCommand], t: float) -> float:
        """Tangent angle in radians at t * length into the path.

        Measured counter-clockwise from the positive x-axis with upward-positive
        y: a line heading right gives 0, one heading down the screen -pi/2.
        Returns 0 for an empty path.
        """
        segments = self.ensure_length_ranges(commands)
        if not segments:
            return 0.0
        segment, local_t = find_segment(segments, t)
        dx, dy = segment.derivative(local_t)
        # Swapped atan2 rotated by -pi/2 mirrors the angle for a y-down axis
        return math.atan2(dx, dy) - math.pi / 2

    def perpendicular_point(self, commands: Sequence[DrawCommand], target: Point) -> Point:
        """Closest sampled path point to target; the origin for an empty path."""
        return nearest_point(self.ensure_lookup_table(commands), target)

    def perpendicular_distance(self, commands: Sequence[DrawCommand], target: Point) -> float:
        """Distance from target to perpendicular_point(target)."""
        return distance(self.perpendicular_point(commands, target), target)
