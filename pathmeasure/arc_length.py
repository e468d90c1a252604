"""Arc-length index: map a fraction of total length to a segment.

Each segment is assigned a length range, its share of the whole path's
length, so that the ranges of all segments partition [0, 1] in drawing
order. A global fraction t then resolves to one segment and a local t
within it.
"""

import logging
from bisect import bisect_left

from pathmeasure.errors import SegmentLookupError
from pathmeasure.segment import Segment
from pathmeasure.types import clamp_value

logger = logging.getLogger(__name__)


def total_length(segments: list[Segment]) -> float:
    """Sum of segment lengths (degenerate segments count as 1)."""
    return sum(segment.length for segment in segments)


def build_length_ranges(segments: list[Segment], path_length: float | None = None) -> None:
    """Assign each segment its length range, in place.

    The last range always ends at exactly 1.0 so accumulated float error
    cannot leave a gap at the end of the path. Callers must not pass an
    empty segment list.
    """
    if not segments:
        raise ValueError("cannot index an empty path")

    if path_length is None:
        path_length = total_length(segments)

    range_start = 0.0
    last = len(segments) - 1
    for idx, segment in enumerate(segments):
        range_end = 1.0 if idx == last else range_start + segment.length / path_length
        segment.length_range = (range_start, range_end)
        range_start = range_end

    logger.debug(f"Built length ranges for {len(segments)} segments (length={path_length:.3f})")


def find_segment(segments: list[Segment], t: float) -> tuple[Segment, float]:
    """Find the segment owning fraction t and the local t inside it.

    t is clamped to [0, 1]. On a shared boundary the earlier segment wins.

    Raises:
        SegmentLookupError: If ranges are missing or do not cover t
    """
    t = clamp_value(t, 0.0, 1.0)

    if any(segment.length_range is None for segment in segments):
        raise SegmentLookupError("length ranges have not been built")

    idx = bisect_left(segments, t, key=lambda s: s.length_range[1])  # type: ignore[index]
    if idx == len(segments):
        raise SegmentLookupError(f"no segment contains t={t}")

    segment = segments[idx]
    range_start, range_end = segment.length_range  # type: ignore[misc]
    if not range_start <= t <= range_end:
        raise SegmentLookupError(f"no segment contains t={t}")

    width = range_end - range_start
    local_t = (t - range_start) / width if width > 0 else 0.0
    return segment, local_t
