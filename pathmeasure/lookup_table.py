"""Point lookup tables for nearest-point queries."""

import logging
import math

from pathmeasure.interpolation import distance
from pathmeasure.segment import Segment
from pathmeasure.types import ORIGIN, Point

logger = logging.getLogger(__name__)


def build_point_lookup_tables(segments: list[Segment], step: float) -> None:
    """Sample every segment at roughly `step` distance, in place.

    Spacing carries over segment boundaries, so samples are evenly spread
    along the whole path rather than restarting at each segment. The path's
    end point is always included, and every segment gets at least one
    sample (its midpoint, if it is shorter than the leftover spacing).
    """
    if step <= 0:
        raise ValueError("step must be positive")

    offset = 0.0
    last = len(segments) - 1

    for idx, segment in enumerate(segments):
        length = segment.length
        points: list[Point] = []

        while offset < length:
            points.append(segment.point(offset / length))
            offset += step

        if idx == last and offset - step < length:
            points.append(segment.point(1))

        offset -= length

        if not points:
            points.append(segment.point(0.5))

        segment.point_lookup_table = points

    sample_count = sum(len(s.point_lookup_table or []) for s in segments)
    logger.debug(f"Built lookup tables with {sample_count} samples (step={step})")


def lookup_points(segments: list[Segment]) -> list[Point]:
    """Flatten all segment tables in drawing order."""
    return [p for segment in segments for p in segment.point_lookup_table or []]


def nearest_point(segments: list[Segment], target: Point) -> Point:
    """Closest lookup table sample to target.

    Ties go to the first sample in drawing order. Returns the origin when
    there are no samples.
    """
    closest = ORIGIN
    closest_distance = math.inf

    for p in lookup_points(segments):
        d = distance(p, target)
        if d < closest_distance:
            closest, closest_distance = p, d

    return closest
