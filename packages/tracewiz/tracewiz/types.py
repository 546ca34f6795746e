"""Shared value types and errors for tracewiz."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class CanvasSize:
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One straight piece of the reference path.

    ``accumulated_length`` is the arc length from the path origin up to and
    including this segment.
    """

    start: Point
    end: Point
    length: float
    accumulated_length: float


@dataclass(frozen=True)
class GenerationResult:
    """Complete output of one generation run. Replaced wholesale, never mutated."""

    segments: tuple[PathSegment, ...]
    starting_point: Point
    end_line: Point
    total_length: float
    seed: int | None = None
    canvas: CanvasSize | None = None

    @property
    def points(self) -> list[Point]:
        if not self.segments:
            return []
        return [self.segments[0].start] + [s.end for s in self.segments]

    @property
    def origin(self) -> Point | None:
        if not self.segments:
            return None
        return self.segments[0].start

    @property
    def bottom_y(self) -> float:
        """Lowest point the path actually reaches."""
        if not self.segments:
            return 0.0
        return self.segments[-1].end.y

    @property
    def path_height(self) -> float:
        """Height of the scrolling course the path was generated for.

        Hand-built paths have no canvas, so their course ends at ``bottom_y``.
        """
        if self.canvas is None:
            return self.bottom_y
        from tracewiz.generator import path_height

        return path_height(self.canvas.height)


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


class GenerationError(ValueError):
    """Raised when a path cannot be generated."""


class InvalidCanvas(GenerationError):
    """Raised for a zero or negative canvas dimension."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Canvas must have positive size, got {width}x{height}")


class NoActiveSession(RuntimeError):
    """Raised when the session API is used before a path has been loaded."""


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, unseeded path, unknown names)."""
