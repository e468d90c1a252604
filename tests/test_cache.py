"""Tests for the path geometry cache."""

import pytest

import pathmeasure.cache
from pathmeasure.cache import CacheState, PathCache
from pathmeasure.types import BALANCED, LineTo, MoveTo, Point


def _p(x: float, y: float) -> Point:
    return Point(x=x, y=y)


@pytest.fixture
def commands() -> list:
    return [MoveTo(point=_p(0, 0)), LineTo(point=_p(100, 0))]


@pytest.fixture
def cache() -> PathCache:
    return PathCache(settings=BALANCED)


class TestCacheStates:
    def test_starts_empty(self, cache: PathCache) -> None:
        assert cache.state == CacheState.EMPTY

    def test_length_builds_segments_only(self, cache: PathCache, commands: list) -> None:
        assert cache.length(commands) == 100
        assert cache.state == CacheState.SEGMENTS_READY
        assert cache.segments is not None
        assert cache.segments[0].length_range is None

    def test_point_query_builds_ranges(self, cache: PathCache, commands: list) -> None:
        cache.point_at_fraction(commands, 0.5)
        assert cache.state == CacheState.RANGES_READY
        assert cache.segments is not None
        assert cache.segments[0].length_range == (0.0, 1.0)

    def test_nearest_query_builds_everything(self, cache: PathCache, commands: list) -> None:
        cache.perpendicular_point(commands, _p(10, 10))
        assert cache.state == CacheState.LOOKUP_READY
        assert cache.length_ranges_ready

    def test_invalidate_resets(self, cache: PathCache, commands: list) -> None:
        cache.perpendicular_point(commands, _p(10, 10))
        cache.invalidate()
        assert cache.state == CacheState.EMPTY
        assert cache.total_length is None

    def test_invalidate_on_empty_cache_is_harmless(self, cache: PathCache) -> None:
        cache.invalidate()
        assert cache.state == CacheState.EMPTY


class TestCacheReuse:
    def test_repeated_queries_do_not_rebuild(
        self, cache: PathCache, commands: list, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls = []
        original = pathmeasure.cache.decompose

        def counting_decompose(*args, **kwargs):
            calls.append(1)
            return original(*args, **kwargs)

        monkeypatch.setattr(pathmeasure.cache, "decompose", counting_decompose)

        first = cache.point_at_fraction(commands, 0.25)
        second = cache.point_at_fraction(commands, 0.25)
        cache.length(commands)
        cache.perpendicular_point(commands, _p(0, 0))

        assert first == second
        assert len(calls) == 1

    def test_translate_shifts_without_rebuild(
        self, cache: PathCache, commands: list, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        cache.perpendicular_point(commands, _p(0, 0))
        segments = cache.segments

        def fail(*args, **kwargs):
            raise AssertionError("cache was rebuilt")

        monkeypatch.setattr(pathmeasure.cache, "decompose", fail)
        cache.translate(10, 20)

        assert cache.segments is segments
        assert cache.state == CacheState.LOOKUP_READY
        assert cache.length(commands) == 100
        assert cache.point_at_fraction(commands, 0.5) == _p(60, 20)
        assert cache.perpendicular_point(commands, _p(10, 0)) == _p(10, 20)

    def test_translate_empty_cache_is_noop(self, cache: PathCache) -> None:
        cache.translate(5, 5)
        assert cache.state == CacheState.EMPTY


class TestEmptyPathQueries:
    def test_defaults(self, cache: PathCache) -> None:
        assert cache.length([]) == 0.0
        assert cache.point_at_fraction([], 0.5) == _p(0, 0)
        assert cache.slope_at_fraction([], 0.5) == 0.0
        assert cache.tangent_angle_at_fraction([], 0.5) == 0.0
        assert cache.perpendicular_point([], _p(3, 4)) == _p(0, 0)
        assert cache.perpendicular_distance([], _p(3, 4)) == pytest.approx(5.0)

    def test_move_only_path_has_no_segments(self, cache: PathCache) -> None:
        assert cache.length([MoveTo(point=_p(5, 5))]) == 0.0
        assert cache.segments == []
