"""Drawing commands that make up a path."""

from typing import Literal

from pydantic import BaseModel

from pathmeasure.types.geometry import Point


class MoveTo(BaseModel):
    """Start a new subpath at a point."""

    op: Literal["move_to"] = "move_to"
    point: Point

    @property
    def points(self) -> list[Point]:
        return [self.point]

    def with_points(self, points: list[Point]) -> "MoveTo":
        (point,) = points
        return MoveTo(point=point)


class LineTo(BaseModel):
    """Straight line from the current point."""

    op: Literal["line_to"] = "line_to"
    point: Point

    @property
    def points(self) -> list[Point]:
        return [self.point]

    def with_points(self, points: list[Point]) -> "LineTo":
        (point,) = points
        return LineTo(point=point)


class QuadTo(BaseModel):
    """Quadratic bezier from the current point."""

    op: Literal["quad_to"] = "quad_to"
    control: Point
    point: Point

    @property
    def points(self) -> list[Point]:
        return [self.control, self.point]

    def with_points(self, points: list[Point]) -> "QuadTo":
        control, point = points
        return QuadTo(control=control, point=point)


class CubicTo(BaseModel):
    """Cubic bezier from the current point."""

    op: Literal["cubic_to"] = "cubic_to"
    control1: Point
    control2: Point
    point: Point

    @property
    def points(self) -> list[Point]:
        return [self.control1, self.control2, self.point]

    def with_points(self, points: list[Point]) -> "CubicTo":
        control1, control2, point = points
        return CubicTo(control1=control1, control2=control2, point=point)


class Close(BaseModel):
    """Close the current subpath."""

    op: Literal["close"] = "close"

    @property
    def points(self) -> list[Point]:
        return []

    def with_points(self, points: list[Point]) -> "Close":
        if points:
            raise ValueError("close takes no points")
        return Close()


# Union type for anything the decomposer accepts
DrawCommand = MoveTo | LineTo | QuadTo | CubicTo | Close
