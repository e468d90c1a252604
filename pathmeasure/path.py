"""Mutable path that keeps its measurement cache in sync.

MeasuredPath owns both the command list and the PathCache derived from it.
Every method that changes geometry invalidates the cache before returning,
except pure translations, which shift the cached geometry in place.

MeasuredPath is not thread-safe: mutate and query an instance from one
thread at a time.
"""

import logging
import math
from collections.abc import Iterable, Sequence

from pathmeasure.cache import PathCache
from pathmeasure.config import get_default_settings
from pathmeasure.config import settings as app_settings
from pathmeasure.segment import Segment
from pathmeasure.svg_parser import commands_from_svg_path
from pathmeasure.transform import AffineTransform
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
)

logger = logging.getLogger(__name__)

PointLike = Point | tuple[float, float]

# Control point distance for a quarter-circle cubic, as a fraction of radius
KAPPA = 4 * (math.sqrt(2) - 1) / 3


def _as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x=x, y=y)


class MeasuredPath:
    """A 2D path with cached arc-length queries.

    Example:
        path = MeasuredPath()
        path.move_to((0, 0))
        path.line_to((100, 0))
        path.length()                 # 100.0
        path.point_at_fraction(0.5)   # Point(x=50.0, y=0.0)
    """

    def __init__(
        self,
        commands: Iterable[DrawCommand] | None = None,
        settings: CalculationSettings | None = None,
        close_subpaths: bool | None = None,
    ) -> None:
        self._commands: list[DrawCommand] = list(commands or [])
        if close_subpaths is None:
            close_subpaths = app_settings.close_subpaths
        self._cache = PathCache(
            settings=settings or get_default_settings(),
            close_subpaths=close_subpaths,
        )

    @classmethod
    def from_svg(
        cls,
        d: str,
        settings: CalculationSettings | None = None,
        close_subpaths: bool | None = None,
    ) -> "MeasuredPath":
        """Build a path from SVG path data (e.g. "M 0 0 L 100 0")."""
        return cls(commands_from_svg_path(d), settings=settings, close_subpaths=close_subpaths)

    def copy(self) -> "MeasuredPath":
        """Independent path with the same commands and settings (cache not shared)."""
        return MeasuredPath(
            self._commands,
            settings=self.settings,
            close_subpaths=self._cache.close_subpaths,
        )

    def __repr__(self) -> str:
        return f"MeasuredPath({len(self._commands)} commands, {self._cache.state.value})"

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def commands(self) -> tuple[DrawCommand, ...]:
        return tuple(self._commands)

    @property
    def cache(self) -> PathCache:
        return self._cache

    @property
    def settings(self) -> CalculationSettings:
        return self._cache.settings

    @settings.setter
    def settings(self, value: CalculationSettings) -> None:
        """Replace precision settings. Cached geometry is rebuilt with them."""
        self._cache.settings = value
        self._cache.invalidate()

    @property
    def is_empty(self) -> bool:
        return not self._commands

    @property
    def segments(self) -> list[Segment]:
        return self._cache.ensure_segments(self._commands)

    @property
    def current_point(self) -> Point:
        """Pen position after the last command.

        Close returns the pen to the start of its subpath.
        """
        current = ORIGIN
        subpath_start = ORIGIN
        for command in self._commands:
            match command:
                case MoveTo(point=point):
                    current = subpath_start = point
                case Close():
                    current = subpath_start
                case _:
                    current = command.points[-1]
        return current

    def bounds(self) -> tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y) of all command points, control points included."""
        points = [p for command in self._commands for p in command.points]
        if not points:
            return (0.0, 0.0, 0.0, 0.0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return (min(xs), min(ys), max(xs), max(ys))

    # =========================================================================
    # Mutations
    # =========================================================================

    def _append(self, *commands: DrawCommand) -> None:
        self._commands.extend(commands)
        self._cache.invalidate()

    def move_to(self, point: PointLike) -> None:
        self._append(MoveTo(point=_as_point(point)))

    def line_to(self, point: PointLike) -> None:
        self._append(LineTo(point=_as_point(point)))

    def quad_curve_to(self, point: PointLike, control: PointLike) -> None:
        self._append(QuadTo(control=_as_point(control), point=_as_point(point)))

    def curve_to(self, point: PointLike, control1: PointLike, control2: PointLike) -> None:
        self._append(
            CubicTo(
                control1=_as_point(control1),
                control2=_as_point(control2),
                point=_as_point(point),
            )
        )

    def relative_move_to(self, dx: float, dy: float) -> None:
        self.move_to(self.current_point.translated(dx, dy))

    def relative_line_to(self, dx: float, dy: float) -> None:
        self.line_to(self.current_point.translated(dx, dy))

    def relative_curve_to(
        self,
        offset: tuple[float, float],
        control1_offset: tuple[float, float],
        control2_offset: tuple[float, float],
    ) -> None:
        """Cubic curve with end and control points relative to the current point."""
        origin = self.current_point
        self.curve_to(
            origin.translated(*offset),
            origin.translated(*control1_offset),
            origin.translated(*control2_offset),
        )

    def close(self) -> None:
        self._append(Close())

    def append_path(self, other: "MeasuredPath") -> None:
        """Append all of another path's commands."""
        self._append(*other.commands)

    def append_points(self, points: Sequence[PointLike]) -> None:
        """Append a polyline: a move to the first point, then lines through the rest."""
        if not points:
            return
        first, *rest = (_as_point(p) for p in points)
        self._append(MoveTo(point=first), *(LineTo(point=p) for p in rest))

    def append_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Append a closed rectangle drawn from its (x, y) corner."""
        self._append(
            MoveTo(point=Point(x=x, y=y)),
            LineTo(point=Point(x=x + width, y=y)),
            LineTo(point=Point(x=x + width, y=y + height)),
            LineTo(point=Point(x=x, y=y + height)),
            Close(),
        )

    def append_oval(self, x: float, y: float, width: float, height: float) -> None:
        """Append a closed ellipse inscribed in a rectangle, as four cubic curves."""
        rx, ry = width / 2, height / 2
        cx, cy = x + rx, y + ry
        kx, ky = rx * KAPPA, ry * KAPPA
        self._append(
            MoveTo(point=Point(x=cx + rx, y=cy)),
            CubicTo(
                control1=Point(x=cx + rx, y=cy + ky),
                control2=Point(x=cx + kx, y=cy + ry),
                point=Point(x=cx, y=cy + ry),
            ),
            CubicTo(
                control1=Point(x=cx - kx, y=cy + ry),
                control2=Point(x=cx - rx, y=cy + ky),
                point=Point(x=cx - rx, y=cy),
            ),
            CubicTo(
                control1=Point(x=cx - rx, y=cy - ky),
                control2=Point(x=cx - kx, y=cy - ry),
                point=Point(x=cx, y=cy - ry),
            ),
            CubicTo(
                control1=Point(x=cx + kx, y=cy - ry),
                control2=Point(x=cx + rx, y=cy - ky),
                point=Point(x=cx + rx, y=cy),
            ),
            Close(),
        )

    def append_arc(
        self,
        center: PointLike,
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool = True,
    ) -> None:
        """Append a circular arc approximated by cubic curves.

        Angles are in radians. With y growing downward, clockwise sweeps
        toward increasing angles. The arc is connected to the current
        subpath with a line, or starts a new one if the path is empty.
        """
        center = _as_point(center)
        sweep = end_angle - start_angle
        if clockwise and sweep < 0:
            sweep %= 2 * math.pi
        elif not clockwise and sweep > 0:
            sweep = -(-sweep % (2 * math.pi))
        sweep = max(-2 * math.pi, min(2 * math.pi, sweep))
        if sweep == 0 and end_angle != start_angle:
            # Angles a whole number of turns apart draw a full circle
            sweep = 2 * math.pi if clockwise else -2 * math.pi

        def on_circle(angle: float) -> Point:
            return Point(
                x=center.x + radius * math.cos(angle),
                y=center.y + radius * math.sin(angle),
            )

        start = on_circle(start_angle)
        commands: list[DrawCommand] = [
            LineTo(point=start) if self._commands else MoveTo(point=start)
        ]

        pieces = math.ceil(abs(sweep) / (math.pi / 2) - 1e-9) if sweep else 0
        for i in range(pieces):
            a0 = start_angle + sweep * i / pieces
            a1 = start_angle + sweep * (i + 1) / pieces
            k = 4 / 3 * math.tan((a1 - a0) / 4) * radius
            p0, p1 = on_circle(a0), on_circle(a1)
            commands.append(
                CubicTo(
                    control1=Point(x=p0.x - k * math.sin(a0), y=p0.y + k * math.cos(a0)),
                    control2=Point(x=p1.x + k * math.sin(a1), y=p1.y - k * math.cos(a1)),
                    point=p1,
                )
            )

        self._append(*commands)

    def set_associated_points(self, index: int, points: Sequence[PointLike]) -> None:
        """Replace the points of the command at index.

        Raises:
            IndexError: If index is out of range
            ValueError: If the point count does not match the command
        """
        command = self._commands[index]
        new_points = [_as_point(p) for p in points]
        if len(new_points) != len(command.points):
            raise ValueError(
                f"{command.op} takes {len(command.points)} points, got {len(new_points)}"
            )
        self._commands[index] = command.with_points(new_points)
        self._cache.invalidate()

    def remove_all_points(self) -> None:
        self._commands.clear()
        self._cache.invalidate()

    def apply_transform(self, transform: AffineTransform) -> None:
        """Transform every point of the path.

        Pure translations shift the cached geometry; anything else drops it.
        """
        self._commands = [
            command.with_points([transform.apply(p) for p in command.points])
            for command in self._commands
        ]
        if transform.is_translation_only:
            self._cache.translate(transform.tx, transform.ty)
        else:
            self._cache.invalidate()

    def translate(self, dx: float, dy: float) -> None:
        self.apply_transform(AffineTransform.translation(dx, dy))

    # =========================================================================
    # Queries
    # =========================================================================

    def length(self) -> float:
        """Total length of the path; 0 when it has no segments."""
        return self._cache.length(self._commands)

    def point_at_fraction(self, t: float) -> Point:
        """Point at t * length into the path. t is clamped to [0, 1]."""
        return self._cache.point_at_fraction(self._commands, t)

    def slope_at_fraction(self, t: float) -> float:
        """Slope at t * length into the path, upward-positive.

        For a path from (0, 100) to (100, 0) this is 1.0 for any t.
        """
        return self._cache.slope_at_fraction(self._commands, t)

    def tangent_angle_at_fraction(self, t: float) -> float:
        """Tangent angle in radians at t * length into the path."""
        return self._cache.tangent_angle_at_fraction(self._commands, t)

    def perpendicular_point(self, target: PointLike) -> Point:
        """Closest point on the path to target, from the lookup table."""
        return self._cache.perpendicular_point(self._commands, _as_point(target))

    def perpendicular_distance(self, target: PointLike) -> float:
        """Distance from target to the closest point on the path."""
        return self._cache.perpendicular_distance(self._commands, _as_point(target))

    def sample(self, count: int) -> list[Point]:
        """count points evenly spaced by length, both ends included."""
        if count < 1:
            return []
        if count == 1:
            return [self.point_at_fraction(0.0)]
        return [self.point_at_fraction(i / (count - 1)) for i in range(count)]
