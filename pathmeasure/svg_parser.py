"""Parse SVG path data into drawing commands."""

import logging
import math

from svgpathtools import Arc, CubicBezier, Line, QuadraticBezier, parse_path
from svgpathtools import Path as SVGPath

from pathmeasure.errors import SVGPathError
from pathmeasure.types import CubicTo, DrawCommand, LineTo, MoveTo, Point, QuadTo

logger = logging.getLogger(__name__)

# Largest arc sweep (degrees) approximated by a single cubic
MAX_ARC_PIECE_DEGREES = 90.0


def _point(value: complex) -> Point:
    return Point(x=value.real, y=value.imag)


def arc_to_cubics(arc: Arc) -> list[CubicTo]:
    """Approximate an elliptical arc with cubic curves.

    Control points follow the arc's derivative at either end of each piece,
    scaled so a circular piece gets the usual 4/3 * tan(angle / 4) handles.
    """
    pieces = max(1, math.ceil(abs(arc.delta) / MAX_ARC_PIECE_DEGREES))
    piece_angle = math.radians(abs(arc.delta)) / pieces
    handle = 4 / 3 * math.tan(piece_angle / 4) / piece_angle if piece_angle else 1 / 3
    cubics: list[CubicTo] = []
    for i in range(pieces):
        t0, t1 = i / pieces, (i + 1) / pieces
        h = (t1 - t0) * handle
        p0, p1 = arc.point(t0), arc.point(t1)
        c1 = p0 + arc.derivative(t0) * h
        c2 = p1 - arc.derivative(t1) * h
        cubics.append(CubicTo(control1=_point(c1), control2=_point(c2), point=_point(p1)))
    return cubics


def commands_from_svg_path(d: str) -> list[DrawCommand]:
    """Parse an SVG path 'd' attribute string into drawing commands.

    A MoveTo starts every subpath. Closing segments come through as lines
    back to the subpath start, and arcs are converted to cubic curves.

    Args:
        d: SVG path data string (e.g., "M 0 0 L 100 100")

    Returns:
        List of drawing commands (empty for blank input)

    Raises:
        SVGPathError: If the path data cannot be parsed
    """
    if not d or not d.strip():
        return []

    try:
        svg_path: SVGPath = parse_path(d)
    except Exception as e:
        raise SVGPathError(f"Invalid SVG path data: {d!r}") from e

    commands: list[DrawCommand] = []
    current: complex | None = None

    for segment in svg_path:
        if current is None or segment.start != current:
            commands.append(MoveTo(point=_point(segment.start)))

        if isinstance(segment, Line):
            commands.append(LineTo(point=_point(segment.end)))
        elif isinstance(segment, QuadraticBezier):
            commands.append(QuadTo(control=_point(segment.control), point=_point(segment.end)))
        elif isinstance(segment, CubicBezier):
            commands.append(
                CubicTo(
                    control1=_point(segment.control1),
                    control2=_point(segment.control2),
                    point=_point(segment.end),
                )
            )
        elif isinstance(segment, Arc):
            commands.extend(arc_to_cubics(segment))
        else:
            logger.warning(f"Skipping unsupported SVG segment type {type(segment).__name__}")
            continue

        current = segment.end

    logger.debug(f"Parsed {len(commands)} commands from SVG path data")
    return commands
