"""Tests for distance and intersection helpers."""

import math

import pytest

from tracewiz.generator import path_from_points
from tracewiz.geometry import (
    distance,
    nearest_distance,
    point_segment_distance,
    segment_distance,
    segments_intersect,
)
from tracewiz.types import Point


class TestPointSegmentDistance:
    """Projection distance with clamping to the segment ends."""

    def test_perpendicular_projection(self):
        d = point_segment_distance(Point(5, 3), Point(0, 0), Point(10, 0))
        assert d == pytest.approx(3.0)

    def test_before_start_uses_start(self):
        d = point_segment_distance(Point(-3, 4), Point(0, 0), Point(10, 0))
        assert d == pytest.approx(5.0)

    def test_after_end_uses_end(self):
        d = point_segment_distance(Point(13, 4), Point(0, 0), Point(10, 0))
        assert d == pytest.approx(5.0)

    def test_point_on_segment_is_zero(self):
        assert point_segment_distance(Point(2, 2), Point(0, 0), Point(4, 4)) == pytest.approx(0.0)

    def test_degenerate_segment_is_point_distance(self):
        d = point_segment_distance(Point(3, 4), Point(0, 0), Point(0, 0))
        assert d == pytest.approx(5.0)

    def test_diagonal_segment(self):
        d = point_segment_distance(Point(0, 2), Point(0, 0), Point(2, 2))
        assert d == pytest.approx(math.sqrt(2))


class TestSegmentsIntersect:
    """CCW orientation test."""

    def test_proper_crossing(self):
        assert segments_intersect(Point(0, 0), Point(10, 10), Point(0, 10), Point(10, 0))

    def test_disjoint(self):
        assert not segments_intersect(Point(0, 0), Point(1, 1), Point(5, 5), Point(6, 7))

    def test_parallel(self):
        assert not segments_intersect(Point(0, 0), Point(10, 0), Point(0, 5), Point(10, 5))

    def test_lines_cross_outside_segments(self):
        assert not segments_intersect(Point(0, 0), Point(1, 1), Point(3, 0), Point(2, 1))

    def test_collinear_overlap_not_reported(self):
        assert not segments_intersect(Point(0, 0), Point(10, 0), Point(5, 0), Point(15, 0))

    def test_symmetric(self):
        a, b, c, d = Point(0, 0), Point(4, 6), Point(0, 5), Point(5, 0)
        assert segments_intersect(a, b, c, d) == segments_intersect(c, d, a, b)


class TestSegmentDistance:

    def test_intersecting_segments_are_zero(self):
        assert segment_distance(Point(0, 0), Point(10, 10), Point(0, 10), Point(10, 0)) == 0.0

    def test_parallel_segments(self):
        d = segment_distance(Point(0, 0), Point(10, 0), Point(0, 5), Point(10, 5))
        assert d == pytest.approx(5.0)

    def test_endpoint_to_segment(self):
        d = segment_distance(Point(0, 0), Point(0, 10), Point(3, 5), Point(10, 5))
        assert d == pytest.approx(3.0)

    def test_endpoint_to_endpoint(self):
        d = segment_distance(Point(0, 0), Point(1, 0), Point(4, 4), Point(5, 5))
        assert d == pytest.approx(5.0)


# --- distance / nearest_distance ---


def test_distance():
    assert distance(Point(1, 1), Point(4, 5)) == pytest.approx(5.0)


def test_nearest_distance_picks_closest_segment():
    path = path_from_points([Point(0, 0), Point(0, 100), Point(100, 100)])
    assert nearest_distance(Point(50, 90), path.segments) == pytest.approx(10.0)
    assert nearest_distance(Point(-7, 40), path.segments) == pytest.approx(7.0)


def test_nearest_distance_empty_is_inf():
    assert nearest_distance(Point(0, 0), []) == math.inf
