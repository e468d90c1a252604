"""Pure functions for evaluating path primitives.

This module contains stateless, pure mathematical functions for points,
derivatives, slopes, tangent angles and lengths of line, quadratic and
cubic bezier primitives. No side effects or I/O.
"""

import math
from collections.abc import Callable

from pathmeasure.types import Point


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between two values."""
    return a + (b - a) * t


def lerp_point(p1: Point, p2: Point, t: float) -> Point:
    """Linearly interpolate between two points."""
    return Point(x=lerp(p1.x, p2.x, t), y=lerp(p1.y, p2.y, t))


def distance(p1: Point, p2: Point) -> float:
    """Calculate Euclidean distance between two points."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def quadratic_bezier(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    """Evaluate quadratic bezier at t."""
    one_minus_t = 1 - t
    return Point(
        x=one_minus_t**2 * p0.x + 2 * one_minus_t * t * p1.x + t**2 * p2.x,
        y=one_minus_t**2 * p0.y + 2 * one_minus_t * t * p1.y + t**2 * p2.y,
    )


def cubic_bezier(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Evaluate cubic bezier at t."""
    one_minus_t = 1 - t
    return Point(
        x=(
            one_minus_t**3 * p0.x
            + 3 * one_minus_t**2 * t * p1.x
            + 3 * one_minus_t * t**2 * p2.x
            + t**3 * p3.x
        ),
        y=(
            one_minus_t**3 * p0.y
            + 3 * one_minus_t**2 * t * p1.y
            + 3 * one_minus_t * t**2 * p2.y
            + t**3 * p3.y
        ),
    )


# Derivatives return (dx, dy) with respect to t


def line_derivative(p0: Point, p1: Point, t: float) -> tuple[float, float]:
    """Derivative of a line; constant in t."""
    return (p1.x - p0.x, p1.y - p0.y)


def quadratic_derivative(p0: Point, p1: Point, p2: Point, t: float) -> tuple[float, float]:
    """Derivative of a quadratic bezier at t."""
    one_minus_t = 1 - t
    return (
        2 * one_minus_t * (p1.x - p0.x) + 2 * t * (p2.x - p1.x),
        2 * one_minus_t * (p1.y - p0.y) + 2 * t * (p2.y - p1.y),
    )


def cubic_derivative(
    p0: Point, p1: Point, p2: Point, p3: Point, t: float
) -> tuple[float, float]:
    """Derivative of a cubic bezier at t."""
    one_minus_t = 1 - t
    return (
        3 * one_minus_t**2 * (p1.x - p0.x)
        + 6 * one_minus_t * t * (p2.x - p1.x)
        + 3 * t**2 * (p3.x - p2.x),
        3 * one_minus_t**2 * (p1.y - p0.y)
        + 6 * one_minus_t * t * (p2.y - p1.y)
        + 3 * t**2 * (p3.y - p2.y),
    )


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE 754 semantics: x/0 is +-inf, 0/0 is nan."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def slope_from_derivative(derivative: tuple[float, float]) -> float:
    """dy/dx of a tangent direction. Vertical tangents give inf or nan."""
    dx, dy = derivative
    return ieee_divide(dy, dx)


def tangent_angle_from_derivative(derivative: tuple[float, float]) -> float:
    """Angle of a tangent direction against the positive x-axis, in radians."""
    dx, dy = derivative
    return math.atan2(dy, dx)


def line_length(p0: Point, p1: Point) -> float:
    """Length of a straight line."""
    return distance(p0, p1)


def polyline_length(points: list[Point]) -> float:
    """Sum of distances between consecutive points."""
    return sum(distance(a, b) for a, b in zip(points[:-1], points[1:], strict=True))


def curve_length(evaluate: Callable[[float], Point], steps: int) -> float:
    """Approximate arc length by summing chords over `steps` equal t-steps."""
    if steps < 1:
        raise ValueError("steps must be at least 1")
    return polyline_length([evaluate(i / steps) for i in range(steps + 1)])


def quadratic_length(p0: Point, p1: Point, p2: Point, steps: int) -> float:
    """Approximate length of a quadratic bezier."""
    return curve_length(lambda t: quadratic_bezier(p0, p1, p2, t), steps)


def cubic_length(p0: Point, p1: Point, p2: Point, p3: Point, steps: int) -> float:
    """Approximate length of a cubic bezier."""
    return curve_length(lambda t: cubic_bezier(p0, p1, p2, p3, t), steps)
