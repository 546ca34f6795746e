"""
Test suite for seeded path generation.

Tests cover:
- Determinism for a fixed (seed, width, height)
- Accumulated length bookkeeping
- Margin containment and minimum course height
- Starting point placement
- Canvas validation
- Hand-built paths
"""

import pytest

from tracewiz.generator import (
    MARGIN,
    generate_path,
    path_from_points,
    path_height,
)
from tracewiz.geometry import distance
from tracewiz.types import (
    CanvasSize,
    GenerationError,
    GenerationResult,
    InvalidCanvas,
    Point,
)

SEEDS = [0, 1, 42, 1234, 99999, 0xFFFFFFFE]
CANVASES = [(400, 800), (320, 568), (1024, 768)]


class TestDeterminism:
    """Same inputs, same path."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_repeated_calls_identical(self, seed):
        a = generate_path(seed, 400, 800)
        b = generate_path(seed, 400, 800)
        assert a.segments == b.segments
        assert a.starting_point == b.starting_point
        assert a.end_line == b.end_line
        assert a.total_length == b.total_length

    def test_different_seeds_differ(self):
        a = generate_path(1, 400, 800)
        b = generate_path(2, 400, 800)
        assert a.points != b.points

    def test_canvas_size_changes_path(self):
        a = generate_path(42, 400, 800)
        b = generate_path(42, 600, 800)
        assert a.points != b.points

    def test_result_records_seed_and_canvas(self):
        result = generate_path(42, 400, 800)
        assert result.seed == 42
        assert result.canvas == CanvasSize(400.0, 800.0)


class TestAccumulation:
    """accumulated_length is a running sum ending at total_length."""

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("width,height", CANVASES)
    def test_monotonic_and_matches_total(self, seed, width, height):
        result = generate_path(seed, width, height)
        segs = result.segments
        for prev, cur in zip(segs, segs[1:]):
            assert prev.accumulated_length <= cur.accumulated_length
        assert segs[-1].accumulated_length == result.total_length

    def test_running_sum_of_lengths(self):
        result = generate_path(7, 400, 800)
        running = 0.0
        for seg in result.segments:
            running += seg.length
            assert seg.accumulated_length == pytest.approx(running)

    def test_segment_length_matches_endpoints(self):
        result = generate_path(7, 400, 800)
        for seg in result.segments:
            assert seg.length == pytest.approx(distance(seg.start, seg.end))

    def test_segments_are_chained(self):
        result = generate_path(99, 400, 800)
        for prev, cur in zip(result.segments, result.segments[1:]):
            assert prev.end == cur.start

    def test_no_zero_length_segments(self):
        result = generate_path(99, 400, 800)
        assert all(seg.length > 0 for seg in result.segments)


class TestBounds:
    """Everything stays inside the margins and reaches the bottom."""

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("width,height", CANVASES)
    def test_x_within_margins(self, seed, width, height):
        result = generate_path(seed, width, height)
        for p in result.points:
            assert MARGIN <= p.x <= width - MARGIN

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("width,height", CANVASES)
    def test_reaches_course_bottom(self, seed, width, height):
        result = generate_path(seed, width, height)
        assert result.end_line.y >= path_height(height) - MARGIN

    def test_path_moves_strictly_downward(self):
        result = generate_path(5, 400, 800)
        for seg in result.segments:
            assert seg.end.y > seg.start.y

    def test_path_height_minimum(self):
        assert path_height(100) == 8000
        assert path_height(800) == 9600

    def test_end_line_is_last_point(self):
        result = generate_path(3, 400, 800)
        assert result.end_line == result.segments[-1].end
        assert result.points[-1] == result.end_line


class TestStartingPoint:

    @pytest.mark.parametrize("seed", SEEDS)
    def test_starting_point_beside_origin(self, seed):
        result = generate_path(seed, 400, 800)
        origin = result.origin
        assert result.starting_point.y == origin.y == MARGIN
        assert abs(result.starting_point.x - origin.x) == pytest.approx(30.0)

    @pytest.mark.parametrize("seed", range(40))
    def test_starting_point_inside_margins(self, seed):
        result = generate_path(seed, 400, 800)
        assert MARGIN <= result.starting_point.x <= 400 - MARGIN


class TestExampleScenario:
    """seed=42 on a 400x800 canvas."""

    def test_example_path(self):
        result = generate_path(42, 400, 800)
        assert len(result.segments) > 0
        first = result.points[0]
        assert first.y == 60
        assert 60 <= first.x <= 340
        assert result.end_line.y >= 9600 - 60
        assert result.total_length >= 9600 - 120

    def test_pinned_layout(self):
        """Published daily courses depend on this exact output."""
        result = generate_path(42, 400, 800)
        assert len(result.segments) == 358
        assert result.total_length == pytest.approx(12233.998674157896, rel=1e-12)
        assert result.origin.x == pytest.approx(228.30905057683333, rel=1e-12)
        assert result.starting_point.x == pytest.approx(198.30905057683333, rel=1e-12)

        expected = [
            (228.30905057683333, 80.0),
            (269.5587100425464, 100.0),
            (340.0, 120.0),
            (340.0, 140.0),
        ]
        for seg, (x, y) in zip(result.segments, expected):
            assert seg.end.x == pytest.approx(x, rel=1e-12)
            assert seg.end.y == y
        assert result.end_line.x == pytest.approx(172.66292370055805, rel=1e-12)
        assert result.end_line.y == 9550.0


# --- Validation ---


@pytest.mark.parametrize("width,height", [(0, 800), (400, 0), (-1, 800), (400, -5)])
def test_invalid_canvas(width, height):
    with pytest.raises(InvalidCanvas):
        generate_path(42, width, height)


def test_invalid_canvas_is_generation_error():
    with pytest.raises(GenerationError):
        generate_path(42, 0, 0)


# --- path_from_points ---


def test_path_from_points():
    result = path_from_points([Point(100, 60), Point(100, 90), Point(130, 130)])
    assert len(result.segments) == 2
    assert result.total_length == pytest.approx(30 + 50)
    assert result.end_line == Point(130, 130)
    assert result.starting_point == Point(130, 60)
    assert result.seed is None


def test_path_from_points_needs_two_points():
    with pytest.raises(GenerationError):
        path_from_points([Point(0, 0)])


def test_narrow_canvas_clamps_to_margin():
    result = generate_path(7, 100, 800)
    assert 40 <= result.origin.x <= MARGIN
    assert all(seg.end.x == MARGIN for seg in result.segments)


# --- GenerationResult properties ---


def test_path_height_is_course_height():
    result = generate_path(42, 400, 800)
    assert result.path_height == path_height(800) == 9600
    assert result.bottom_y == result.end_line.y
    assert result.bottom_y < result.path_height


def test_hand_built_path_height_is_bottom():
    result = path_from_points([Point(100, 60), Point(100, 90), Point(130, 130)])
    assert result.path_height == result.bottom_y == 130


def test_empty_result_properties():
    empty = GenerationResult(
        segments=(), starting_point=Point(0, 0), end_line=Point(0, 0), total_length=0.0,
    )
    assert empty.points == []
    assert empty.origin is None
    assert empty.bottom_y == 0.0
