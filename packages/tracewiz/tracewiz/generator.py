"""Seeded reference path generator.

The path is grown downward from a random start near the top of the canvas,
one section at a time. Every section is approximated by short straight
sub-segments:

- long drop: 30px steps with a sine wobble (twice as likely as the others)
- slope left / slope right: 25px steps drifting sideways in a straight line
- S-curve: 20px steps pushed sideways along half a sine period

Output depends only on ``(seed, width, height)``; the number and order of
random draws must not change or previously published daily paths change
with them.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence

from tracewiz.geometry import distance
from tracewiz.rng import Mulberry32
from tracewiz.types import (
    CanvasSize,
    GenerationError,
    GenerationResult,
    InvalidCanvas,
    PathSegment,
    Point,
)

logger = logging.getLogger(__name__)

MARGIN = 60.0
HEIGHT_FACTOR = 12
MIN_PATH_HEIGHT = 8000.0
START_OFFSET = 30.0

DROP_STEP = 30.0
SLOPE_STEP = 25.0
CURVE_STEP = 20.0


def path_height(height: float) -> float:
    """Effective height of the scrolling course for a canvas ``height``."""
    return max(height * HEIGHT_FACTOR, MIN_PATH_HEIGHT)


class _PathBuilder:
    """Accumulates sub-segments and tracks when the course bottom is reached."""

    def __init__(self, origin: Point, width: float, limit: float) -> None:
        self.current = origin
        self.width = width
        self.limit = limit
        self.segments: list[PathSegment] = []
        self._accumulated = 0.0

    @property
    def done(self) -> bool:
        return self.current.y >= self.limit

    def step(self, x: float, dy: float) -> bool:
        """Append one sub-segment. Returns True once the bottom is reached."""
        nxt = Point(max(MARGIN, min(self.width - MARGIN, x)), self.current.y + dy)
        length = distance(self.current, nxt)
        self._accumulated += length
        self.segments.append(PathSegment(self.current, nxt, length, self._accumulated))
        self.current = nxt
        return self.done


def _long_drop(b: _PathBuilder, rng: Mulberry32) -> None:
    drop = 200 + rng.random() * 200
    wobble_amount = 8 + rng.random() * 12
    for i in range(int(drop / DROP_STEP)):
        wobble = math.sin(i * 0.2) * wobble_amount
        if b.step(b.current.x + wobble, DROP_STEP):
            break


def _slope(b: _PathBuilder, rng: Mulberry32, direction: float) -> None:
    slope_distance = 150 + rng.random() * 100
    horizontal = 80 + rng.random() * 40
    steps = int(slope_distance / SLOPE_STEP)
    for i in range(steps):
        progress = i / steps
        if b.step(b.current.x + horizontal * direction * progress, SLOPE_STEP):
            break


def _s_curve(b: _PathBuilder, rng: Mulberry32) -> None:
    curve_width = 100 + rng.random() * 50
    curve_height = 200 + rng.random() * 100
    direction = 1.0 if rng.random() > 0.5 else -1.0
    steps = int(curve_height / CURVE_STEP)
    for i in range(steps):
        progress = i / steps
        offset = math.sin(progress * math.pi) * curve_width * direction
        if b.step(b.current.x + offset, CURVE_STEP):
            break


def generate_path(seed: int, width: float, height: float) -> GenerationResult:
    """Build the reference path for ``seed`` on a ``width`` x ``height`` canvas.

    Raises InvalidCanvas for a non-positive dimension. A canvas narrower than
    ``2 * MARGIN`` is accepted: the origin then falls between ``width - MARGIN``
    and ``MARGIN``, and every later point is clamped to ``x = MARGIN``.
    """
    if width <= 0 or height <= 0:
        raise InvalidCanvas(width, height)

    rng = Mulberry32(seed)
    w = float(width)
    limit = path_height(height) - MARGIN

    origin = Point(MARGIN + rng.random() * (w - 2 * MARGIN), MARGIN)

    side = START_OFFSET if rng.random() > 0.5 else -START_OFFSET
    starting_point = Point(origin.x + side, origin.y)
    if starting_point.x < MARGIN:
        starting_point = Point(origin.x + START_OFFSET, origin.y)
    elif starting_point.x > w - MARGIN:
        starting_point = Point(origin.x - START_OFFSET, origin.y)

    builder = _PathBuilder(origin, w, limit)
    while not builder.done:
        section = int(rng.random() * 5)
        if section in (0, 1):
            _long_drop(builder, rng)
        elif section == 2:
            _slope(builder, rng, -1.0 if builder.current.x > w / 2 else 1.0)
        elif section == 3:
            _slope(builder, rng, 1.0 if builder.current.x < w / 2 else -1.0)
        else:
            _s_curve(builder, rng)

    if not builder.segments:
        raise GenerationError(f"Seed {seed} produced an empty path")

    segments = tuple(builder.segments)
    result = GenerationResult(
        segments=segments,
        starting_point=starting_point,
        end_line=segments[-1].end,
        total_length=segments[-1].accumulated_length,
        seed=seed,
        canvas=CanvasSize(w, float(height)),
    )
    logger.debug(
        "Generated path seed=%d canvas=%sx%s: %d segments, %.1fpx",
        seed, width, height, len(segments), result.total_length,
    )
    return result


def path_from_points(
    points: Sequence[Point],
    starting_point: Point | None = None,
) -> GenerationResult:
    """Build a result from an explicit polyline (custom courses, tests).

    The result carries no seed, so sessions using it cannot be snapshotted.
    """
    if len(points) < 2:
        raise GenerationError("A path needs at least two points")

    segments: list[PathSegment] = []
    accumulated = 0.0
    for start, end in zip(points, points[1:]):
        length = distance(start, end)
        accumulated += length
        segments.append(PathSegment(start, end, length, accumulated))

    if starting_point is None:
        starting_point = Point(points[0].x + START_OFFSET, points[0].y)

    return GenerationResult(
        segments=tuple(segments),
        starting_point=starting_point,
        end_line=segments[-1].end,
        total_length=accumulated,
    )
