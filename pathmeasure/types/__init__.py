"""Type definitions for path measurement.

This package contains all type definitions organized into focused modules:
- geometry: Core geometry types (Point, SegmentKind)
- commands: Drawing commands a path is built from
- settings: Precision settings and presets
"""

from pathmeasure.types.commands import (
    Close,
    CubicTo,
    DrawCommand,
    LineTo,
    MoveTo,
    QuadTo,
)
from pathmeasure.types.geometry import (
    ORIGIN,
    Point,
    SegmentKind,
    clamp_value,
)
from pathmeasure.types.settings import (
    BALANCED,
    BEST_PERFORMANCE,
    BEST_QUALITY,
    PRESETS,
    CalculationSettings,
    LengthPrecision,
    PerpendicularPrecision,
    get_preset,
)

__all__ = [
    "BALANCED",
    "BEST_PERFORMANCE",
    "BEST_QUALITY",
    "ORIGIN",
    "PRESETS",
    "CalculationSettings",
    "Close",
    "CubicTo",
    "DrawCommand",
    "LengthPrecision",
    "LineTo",
    "MoveTo",
    "PerpendicularPrecision",
    "Point",
    "QuadTo",
    "SegmentKind",
    "clamp_value",
    "get_preset",
]
