"""Status bar and overlays."""
from __future__ import annotations

import math

import pygame

from tracewiz import GameStatistics, Phase, TraceSession
from ui.constants import (
    CANVAS_H,
    LOSE_COLOR,
    OVERLAY_COLOR,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
    WIN_COLOR,
)


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    session: TraceSession,
    label: str,
    stats: GameStatistics,
) -> None:
    """Bottom bar: puzzle label, difficulty, timer, streak."""
    y = CANVAS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))

    left = f"{label}  {session.difficulty.name}"
    surface.blit(font.render(left, True, TEXT_COLOR), (10, y + 4))

    if session.phase in (Phase.RUNNING, Phase.PAUSED):
        timer = f"{math.ceil(session.time_remaining):>2}s"
    else:
        timer = "--"
    surface.blit(font.render(f"Time {timer}", True, TEXT_COLOR), (SCREEN_W - 90, y + 4))

    streak = f"Streak {stats.current_streak}  Best {stats.longest_streak}"
    surface.blit(font.render(streak, True, TEXT_DIM), (10, y + 21))
    surface.blit(
        font.render("Space R P 1-3 D N", True, TEXT_DIM), (SCREEN_W - 150, y + 21),
    )


def _banner(surface: pygame.Surface, font: pygame.font.Font, text: str, color) -> None:
    overlay = pygame.Surface((SCREEN_W, CANVAS_H), pygame.SRCALPHA)
    overlay.fill(OVERLAY_COLOR)
    surface.blit(overlay, (0, 0))
    rendered = font.render(text, True, color)
    rect = rendered.get_rect(center=(SCREEN_W // 2, CANVAS_H // 2))
    surface.blit(rendered, rect)


def draw_overlay(surface: pygame.Surface, big_font: pygame.font.Font, session: TraceSession) -> None:
    phase = session.phase
    if phase is Phase.COUNTDOWN:
        _banner(surface, big_font, str(math.ceil(session.countdown_remaining)), TEXT_COLOR)
    elif phase is Phase.PAUSED:
        _banner(surface, big_font, "Paused", TEXT_COLOR)
    elif phase is Phase.ENDED and session.verdict is not None:
        verdict = session.verdict
        _banner(surface, big_font, verdict.message, WIN_COLOR if verdict.won else LOSE_COLOR)
