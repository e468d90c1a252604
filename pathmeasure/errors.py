"""Exceptions raised by path measurement."""


class PathMeasureError(Exception):
    """Base class for path measurement errors."""


class SegmentLookupError(PathMeasureError):
    """No segment owns a fraction of length.

    Only possible when the length ranges do not partition [0, 1], which is
    a programming error rather than a recoverable condition.
    """


class SVGPathError(PathMeasureError):
    """SVG path data could not be parsed."""
