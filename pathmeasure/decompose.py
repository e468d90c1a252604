"""Decompose a drawing command sequence into measurable segments."""

import logging
from collections.abc import Iterable

from pathmeasure.segment import Segment
from pathmeasure.types import (
    ORIGIN,
    CalculationSettings,
    Close,
    CubicTo,
    DrawCommand,
    LineTo,
    MoveTo,
    Point,
    QuadTo,
    SegmentKind,
)

logger = logging.getLogger(__name__)


def decompose(
    commands: Iterable[DrawCommand],
    settings: CalculationSettings | None = None,
    *,
    close_subpaths: bool = False,
) -> list[Segment]:
    """Convert path commands into an ordered list of segments.

    Move commands only reposition the pen. Close emits nothing and leaves
    the pen where it is, unless close_subpaths is set, in which case it
    draws a line back to the subpath start and moves the pen there.

    Args:
        commands: Commands in drawing order
        settings: Precision used to measure curve lengths
        close_subpaths: Synthesize closing lines for Close commands

    Returns:
        Segments in drawing order
    """
    settings = settings or CalculationSettings()
    precision = int(settings.length_precision)

    segments: list[Segment] = []
    current_point: Point = ORIGIN
    subpath_start: Point = ORIGIN

    for command in commands:
        match command:
            case MoveTo(point=point):
                current_point = point
                subpath_start = point

            case LineTo(point=point):
                segments.append(
                    Segment(SegmentKind.LINE, current_point, point, length_precision=precision)
                )
                current_point = point

            case QuadTo(control=control, point=point):
                segments.append(
                    Segment(
                        SegmentKind.QUADRATIC,
                        current_point,
                        point,
                        [control],
                        length_precision=precision,
                    )
                )
                current_point = point

            case CubicTo(control1=control1, control2=control2, point=point):
                segments.append(
                    Segment(
                        SegmentKind.CUBIC,
                        current_point,
                        point,
                        [control1, control2],
                        length_precision=precision,
                    )
                )
                current_point = point

            case Close():
                if close_subpaths:
                    if current_point != subpath_start:
                        segments.append(
                            Segment(
                                SegmentKind.LINE,
                                current_point,
                                subpath_start,
                                length_precision=precision,
                            )
                        )
                    current_point = subpath_start

    logger.debug(f"Decomposed path into {len(segments)} segments")
    return segments
