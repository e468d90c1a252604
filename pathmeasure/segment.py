"""Segment model: one drawn primitive of a path."""

from dataclasses import dataclass, field

from pathmeasure.interpolation import (
    cubic_bezier,
    cubic_derivative,
    cubic_length,
    lerp_point,
    line_derivative,
    line_length,
    quadratic_bezier,
    quadratic_derivative,
    quadratic_length,
    slope_from_derivative,
    tangent_angle_from_derivative,
)
from pathmeasure.types import LengthPrecision, Point, SegmentKind


@dataclass
class Segment:
    """A line, quadratic or cubic primitive between two path points.

    Attributes:
        kind: Which primitive this is
        start: Pen position the primitive starts at
        end: Pen position the primitive ends at
        control_points: 0 (line), 1 (quadratic) or 2 (cubic) control points
        length_precision: Integration steps used to measure curves
        length_range: Share of the whole path's length, set by the arc-length index
        point_lookup_table: Samples along the segment, set by the lookup table builder
        measured_length: Geometric length computed at construction
    """

    kind: SegmentKind
    start: Point
    end: Point
    control_points: list[Point] = field(default_factory=list)
    length_precision: int = LengthPrecision.NORMAL
    length_range: tuple[float, float] | None = None
    point_lookup_table: list[Point] | None = None
    measured_length: float = field(init=False)

    def __post_init__(self) -> None:
        expected = self.kind.control_point_count
        if len(self.control_points) != expected:
            raise ValueError(
                f"{self.kind.value} segment needs {expected} control points, "
                f"got {len(self.control_points)}"
            )
        self.measured_length = self._measure()

    def _measure(self) -> float:
        match self.kind:
            case SegmentKind.LINE:
                return line_length(self.start, self.end)
            case SegmentKind.QUADRATIC:
                return quadratic_length(
                    self.start, self.control_points[0], self.end, int(self.length_precision)
                )
            case SegmentKind.CUBIC:
                c1, c2 = self.control_points
                return cubic_length(self.start, c1, c2, self.end, int(self.length_precision))

    @property
    def length(self) -> float:
        """Length used for ratio math.

        A degenerate segment reports 1 instead of 0 so that ratios and
        sample offsets never divide by zero.
        """
        return 1.0 if self.measured_length == 0 else self.measured_length

    def point(self, t: float) -> Point:
        """Position on the primitive at local t."""
        match self.kind:
            case SegmentKind.LINE:
                return lerp_point(self.start, self.end, t)
            case SegmentKind.QUADRATIC:
                return quadratic_bezier(self.start, self.control_points[0], self.end, t)
            case SegmentKind.CUBIC:
                c1, c2 = self.control_points
                return cubic_bezier(self.start, c1, c2, self.end, t)

    def derivative(self, t: float) -> tuple[float, float]:
        """(dx, dy) of the primitive at local t."""
        match self.kind:
            case SegmentKind.LINE:
                return line_derivative(self.start, self.end, t)
            case SegmentKind.QUADRATIC:
                return quadratic_derivative(self.start, self.control_points[0], self.end, t)
            case SegmentKind.CUBIC:
                c1, c2 = self.control_points
                return cubic_derivative(self.start, c1, c2, self.end, t)

    def slope(self, t: float) -> float:
        """dy/dx at local t; inf or nan for vertical tangents."""
        return slope_from_derivative(self.derivative(t))

    def tangent_angle(self, t: float) -> float:
        """atan2(dy, dx) at local t."""
        return tangent_angle_from_derivative(self.derivative(t))

    def translate(self, dx: float, dy: float) -> None:
        """Shift every point in place. Length and length range are unaffected."""
        self.start = self.start.translated(dx, dy)
        self.end = self.end.translated(dx, dy)
        self.control_points = [p.translated(dx, dy) for p in self.control_points]
        if self.point_lookup_table is not None:
            self.point_lookup_table = [p.translated(dx, dy) for p in self.point_lookup_table]
