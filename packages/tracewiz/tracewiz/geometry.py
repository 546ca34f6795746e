"""2D distance and intersection helpers operating on Points."""
from __future__ import annotations

import math
from typing import Iterable

from tracewiz.types import PathSegment, Point


def distance(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def point_segment_distance(p: Point, a: Point, b: Point) -> float:
    """Distance from ``p`` to the closest point of segment ``a``-``b``."""
    vx = b.x - a.x
    vy = b.y - a.y
    wx = p.x - a.x
    wy = p.y - a.y

    c1 = vx * wx + vy * wy
    if c1 <= 0:
        return distance(p, a)

    c2 = vx * vx + vy * vy
    if c2 <= c1:
        return distance(p, b)

    t = c1 / c2
    return math.hypot(p.x - (a.x + t * vx), p.y - (a.y + t * vy))


def _ccw(p1: Point, p2: Point, p3: Point) -> bool:
    return (p3.y - p1.y) * (p2.x - p1.x) > (p2.y - p1.y) * (p3.x - p1.x)


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Orientation test for segments ``a``-``b`` and ``c``-``d``.

    Collinear overlaps fall out of the strict comparison and report False.
    """
    return _ccw(a, c, d) != _ccw(b, c, d) and _ccw(a, b, c) != _ccw(a, b, d)


def segment_distance(a1: Point, b1: Point, a2: Point, b2: Point) -> float:
    if segments_intersect(a1, b1, a2, b2):
        return 0.0
    return min(
        point_segment_distance(a1, a2, b2),
        point_segment_distance(b1, a2, b2),
        point_segment_distance(a2, a1, b1),
        point_segment_distance(b2, a1, b1),
    )


def nearest_distance(p: Point, segments: Iterable[PathSegment]) -> float:
    """Smallest distance from ``p`` to any of ``segments``; inf when there are none."""
    best = math.inf
    for seg in segments:
        d = point_segment_distance(p, seg.start, seg.end)
        if d < best:
            best = d
    return best
