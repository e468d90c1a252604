"""Tests for path decomposition."""

import math

import pytest

from pathmeasure.decompose import decompose
from pathmeasure.types import (
    BEST_QUALITY,
    Close,
    CubicTo,
    LineTo,
    MoveTo,
    Point,
    QuadTo,
    SegmentKind,
)


def _p(x: float, y: float) -> Point:
    return Point(x=x, y=y)


class TestDecompose:
    def test_empty(self) -> None:
        assert decompose([]) == []

    def test_move_only(self) -> None:
        assert decompose([MoveTo(point=_p(10, 10))]) == []

    def test_line_starts_at_origin_without_move(self) -> None:
        segments = decompose([LineTo(point=_p(100, 0))])
        assert len(segments) == 1
        assert segments[0].start == _p(0, 0)
        assert segments[0].end == _p(100, 0)

    def test_all_kinds(self) -> None:
        segments = decompose(
            [
                MoveTo(point=_p(0, 0)),
                LineTo(point=_p(10, 0)),
                QuadTo(control=_p(15, 5), point=_p(20, 0)),
                CubicTo(control1=_p(25, 5), control2=_p(30, -5), point=_p(35, 0)),
            ]
        )
        assert [s.kind for s in segments] == [
            SegmentKind.LINE,
            SegmentKind.QUADRATIC,
            SegmentKind.CUBIC,
        ]
        assert segments[1].start == _p(10, 0)
        assert segments[1].control_points == [_p(15, 5)]
        assert segments[2].start == _p(20, 0)
        assert segments[2].control_points == [_p(25, 5), _p(30, -5)]
        assert segments[2].end == _p(35, 0)

    def test_move_starts_new_subpath(self) -> None:
        segments = decompose(
            [
                MoveTo(point=_p(0, 0)),
                LineTo(point=_p(10, 0)),
                MoveTo(point=_p(50, 50)),
                LineTo(point=_p(60, 50)),
            ]
        )
        assert len(segments) == 2
        assert segments[1].start == _p(50, 50)

    def test_settings_control_curve_precision(self) -> None:
        commands = [CubicTo(control1=_p(0, 100), control2=_p(100, 100), point=_p(100, 0))]
        segments = decompose(commands, BEST_QUALITY)
        assert segments[0].length_precision == 150


class TestDecomposeClose:
    @pytest.fixture
    def triangle(self) -> list:
        return [
            MoveTo(point=_p(0, 0)),
            LineTo(point=_p(10, 0)),
            LineTo(point=_p(10, 10)),
            Close(),
            LineTo(point=_p(5, 5)),
        ]

    def test_close_emits_nothing_by_default(self, triangle: list) -> None:
        segments = decompose(triangle)
        assert len(segments) == 3
        # Pen stays where the subpath ended
        assert segments[2].start == _p(10, 10)

    def test_close_subpaths_draws_closing_line(self, triangle: list) -> None:
        segments = decompose(triangle, close_subpaths=True)
        assert len(segments) == 4
        assert segments[2].start == _p(10, 10)
        assert segments[2].end == _p(0, 0)
        assert segments[2].length == pytest.approx(math.sqrt(200))
        assert segments[3].start == _p(0, 0)

    def test_close_at_start_adds_no_line(self) -> None:
        commands = [
            MoveTo(point=_p(0, 0)),
            LineTo(point=_p(10, 0)),
            LineTo(point=_p(0, 0)),
            Close(),
        ]
        assert len(decompose(commands, close_subpaths=True)) == 2
