"""Arc-length queries for 2D paths.

Length, point, slope and tangent angle at a fraction of a path's length,
and nearest point on the path, backed by a geometry cache that is rebuilt
only when the path changes.
"""

from pathmeasure.arc_length import build_length_ranges, find_segment
from pathmeasure.cache import CacheState, PathCache
from pathmeasure.decompose import decompose
from pathmeasure.errors import PathMeasureError, SegmentLookupError, SVGPathError
from pathmeasure.lookup_table import build_point_lookup_tables, nearest_point
from pathmeasure.path import MeasuredPath
from pathmeasure.segment import Segment
from pathmeasure.svg_parser import commands_from_svg_path
from pathmeasure.transform import AffineTransform
from pathmeasure.types import (
    BALANCED,
    BEST_PERFORMANCE,
    BEST_QUALITY,
    CalculationSettings,
    Close,
    CubicTo,
    DrawCommand,
    LengthPrecision,
    LineTo,
    MoveTo,
    PerpendicularPrecision,
    Point,
    QuadTo,
    SegmentKind,
)

__all__ = [
    "BALANCED",
    "BEST_PERFORMANCE",
    "BEST_QUALITY",
    "AffineTransform",
    "CacheState",
    "CalculationSettings",
    "Close",
    "CubicTo",
    "DrawCommand",
    "LengthPrecision",
    "LineTo",
    "MeasuredPath",
    "MoveTo",
    "PathCache",
    "PathMeasureError",
    "PerpendicularPrecision",
    "Point",
    "QuadTo",
    "SVGPathError",
    "Segment",
    "SegmentKind",
    "SegmentLookupError",
    "build_length_ranges",
    "build_point_lookup_tables",
    "commands_from_svg_path",
    "decompose",
    "find_segment",
    "nearest_point",
]
