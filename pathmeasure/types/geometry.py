"""Core geometry types."""

from enum import Enum

from pydantic import BaseModel


class Point(BaseModel):
    """A 2D point."""

    x: float
    y: float

    def translated(self, dx: float, dy: float) -> "Point":
        """Return a copy shifted by (dx, dy)."""
        return Point(x=self.x + dx, y=self.y + dy)


ORIGIN = Point(x=0.0, y=0.0)


class SegmentKind(str, Enum):
    """Kinds of drawn primitives a path decomposes into."""

    LINE = "line"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"

    @property
    def control_point_count(self) -> int:
        return {SegmentKind.LINE: 0, SegmentKind.QUADRATIC: 1, SegmentKind.CUBIC: 2}[self]


def clamp_value(value: float, low: float, high: float) -> float:
    """Clamp a value to a range [low, high]."""
    return max(low, min(high, value))
