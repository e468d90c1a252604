"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pathmeasure import BALANCED, MeasuredPath


@pytest.fixture
def empty_path() -> MeasuredPath:
    return MeasuredPath(settings=BALANCED, close_subpaths=False)


@pytest.fixture
def straight_line() -> MeasuredPath:
    """Line from (0, 0) to (100, 0)."""
    path = MeasuredPath(settings=BALANCED, close_subpaths=False)
    path.move_to((0, 0))
    path.line_to((100, 0))
    return path


@pytest.fixture
def corner_path() -> MeasuredPath:
    """Two 150-long lines meeting at (150, 0)."""
    path = MeasuredPath(settings=BALANCED, close_subpaths=False)
    path.move_to((0, 0))
    path.line_to((150, 0))
    path.relative_line_to(0, 150)
    return path


@pytest.fixture
def mixed_path() -> MeasuredPath:
    """Line, quadratic and cubic segments in one subpath."""
    path = MeasuredPath(settings=BALANCED, close_subpaths=False)
    path.move_to((0, 0))
    path.line_to((50, 0))
    path.quad_curve_to((100, 0), control=(75, 40))
    path.curve_to((200, 0), control1=(130, 80), control2=(170, -80))
    return path
