"""Course rendering: grid, tolerance field, reference line, trail."""
from __future__ import annotations

import math

import pygame

from tracewiz import Phase, TraceSession, Viewport
from ui.constants import (
    ARROW_SIZE,
    CANVAS_H,
    CANVAS_W,
    FIELD_COLOR,
    FINISH_COLOR,
    GRID_COLOR,
    GRID_STEP,
    LINE_COLOR,
    START_COLOR,
    START_RADIUS,
    TRAIL_COLOR,
)


def _screen(p, viewport: Viewport) -> tuple[int, int]:
    return int(p.x), int(viewport.to_screen(p.y))


def draw_grid(surface: pygame.Surface, viewport: Viewport) -> None:
    """Faint squared paper that scrolls with the course."""
    for x in range(0, CANVAS_W, GRID_STEP):
        pygame.draw.line(surface, GRID_COLOR, (x, 0), (x, CANVAS_H))
    first = -int(viewport.offset) % GRID_STEP
    for y in range(first, CANVAS_H, GRID_STEP):
        pygame.draw.line(surface, GRID_COLOR, (0, y), (CANVAS_W, y))


def draw_tolerance_field(surface: pygame.Surface, session: TraceSession, viewport: Viewport) -> None:
    """Band of ``max_distance_from_line`` around the revealed path."""
    radius = int(session.difficulty.max_distance_from_line)
    for seg in session.revealed_segments:
        start = _screen(seg.start, viewport)
        end = _screen(seg.end, viewport)
        if max(start[1], end[1]) < -radius or min(start[1], end[1]) > CANVAS_H + radius:
            continue
        pygame.draw.line(surface, FIELD_COLOR, start, end, radius * 2)
        pygame.draw.circle(surface, FIELD_COLOR, end, radius)


def draw_reference_line(surface: pygame.Surface, session: TraceSession, viewport: Viewport) -> None:
    segments = session.revealed_segments
    if not segments:
        return
    points = [_screen(segments[0].start, viewport)]
    points.extend(_screen(seg.end, viewport) for seg in segments)
    if len(points) > 1:
        pygame.draw.lines(surface, LINE_COLOR, False, points, 3)

    last = segments[-1]
    if session.revealed_length < session.path.total_length:
        _draw_arrow(surface, last.start, last.end, viewport)


def _draw_arrow(surface: pygame.Surface, a, b, viewport: Viewport) -> None:
    angle = math.atan2(b.y - a.y, b.x - a.x)
    tip = _screen(b, viewport)
    left = (
        tip[0] - ARROW_SIZE * math.cos(angle - 0.5),
        tip[1] - ARROW_SIZE * math.sin(angle - 0.5),
    )
    right = (
        tip[0] - ARROW_SIZE * math.cos(angle + 0.5),
        tip[1] - ARROW_SIZE * math.sin(angle + 0.5),
    )
    pygame.draw.polygon(surface, LINE_COLOR, [tip, left, right])


def draw_finish(surface: pygame.Surface, session: TraceSession, viewport: Viewport) -> None:
    if session.revealed_length < session.path.total_length:
        return
    x, y = _screen(session.path.end_line, viewport)
    pygame.draw.line(surface, FINISH_COLOR, (x - 40, y), (x + 40, y), 4)


def draw_start(surface: pygame.Surface, session: TraceSession, viewport: Viewport) -> None:
    if not session.show_starting_point:
        return
    pygame.draw.circle(
        surface, START_COLOR, _screen(session.path.starting_point, viewport), START_RADIUS,
    )


def draw_trail(surface: pygame.Surface, session: TraceSession, viewport: Viewport) -> None:
    trail = session.trail
    if len(trail) < 2:
        return
    pygame.draw.lines(surface, TRAIL_COLOR, False, [_screen(p, viewport) for p in trail], 3)


def draw_course(surface: pygame.Surface, session: TraceSession, viewport: Viewport) -> None:
    draw_grid(surface, viewport)
    if session.path is None:
        return
    if session.phase is not Phase.IDLE:
        draw_tolerance_field(surface, session, viewport)
    draw_reference_line(surface, session, viewport)
    draw_finish(surface, session, viewport)
    draw_start(surface, session, viewport)
    draw_trail(surface, session, viewport)
