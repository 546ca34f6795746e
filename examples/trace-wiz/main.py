"""Trace Wiz -- Follow the line as it draws itself.

Exercises tracewiz sessions, auto-scroll, daily seeds, and streak stats.

Controls:
  Space   Start the round (countdown, then the line starts growing)
  Drag    Draw your trail alongside the black line
  P       Pause / resume
  R       Reset the round on the same course
  1-3     Pick difficulty (before starting)
  D       Load today's daily puzzle
  N       Load a random practice course
  Esc     Quit
"""
from __future__ import annotations

import random
import sys

import pygame

from tracewiz import (
    DailySeedProvider,
    Engine,
    Phase,
    SignalBus,
    StatisticsTracker,
    TraceSession,
    Viewport,
    get_difficulty,
    make_autoscroll_system,
    make_session_system,
    make_signal_system,
    path_height,
)
from tracewiz.log import configure_logging
from tracewiz.types import Point

from ui.canvas import draw_course
from ui.constants import BG_COLOR, CANVAS_H, CANVAS_W, FPS, SCREEN_H, SCREEN_W, TPS
from ui.hud import draw_overlay, draw_status_bar

DIFFICULTY_KEYS = {pygame.K_1: "easy", pygame.K_2: "medium", pygame.K_3: "hard"}


class GameState:
    """Holds the engine, the session, and puzzle bookkeeping."""

    def __init__(self) -> None:
        self.bus = SignalBus()
        self.tracker = StatisticsTracker()
        self.provider = DailySeedProvider()
        self.viewport = Viewport(height=CANVAS_H, content_height=path_height(CANVAS_H))
        self.engine = Engine(TraceSession(bus=self.bus), tps=TPS)
        self.label = ""
        self.difficulty = get_difficulty("medium")

        self.bus.subscribe("session_ended", self._on_session_ended)

        # Wire systems (order matters)
        self.engine.add_system(make_session_system())
        self.engine.add_system(make_autoscroll_system(self.viewport))
        self.engine.add_system(make_signal_system(self.bus))

        self.load_daily()

    @property
    def session(self) -> TraceSession:
        return self.engine.session

    def _on_session_ended(self, signal: str, data: dict) -> None:
        print(data["message"])

    def _replace_session(self, sink=None) -> None:
        self.session.cancel()
        self.engine.attach(TraceSession(sink=sink, bus=self.bus))
        self.viewport.reset()

    def load_daily(self) -> None:
        puzzle = self.provider.today_puzzle()
        self._replace_session(sink=self.tracker.sink_for(puzzle.day))
        self.session.generate(puzzle.seed, CANVAS_W, CANVAS_H)
        self.difficulty = puzzle.difficulty
        self.label = f"Daily {puzzle.day:%b %d}"

    def load_practice(self) -> None:
        seed = random.randrange(0xFFFFFFFF)
        self._replace_session()
        self.session.generate(seed, CANVAS_W, CANVAS_H)
        self.label = f"Practice #{seed % 10000:04d}"

    def start(self) -> None:
        if self.session.phase is Phase.ENDED:
            self.session.reset()
        self.session.start(self.difficulty)

    def toggle_pause(self) -> None:
        if self.session.phase is Phase.PAUSED:
            self.session.resume()
        else:
            self.session.pause()

    def to_world(self, pos: tuple[int, int]) -> Point:
        x, y = pos
        return Point(float(x), self.viewport.to_world(float(y)))


def main() -> None:
    configure_logging("INFO")
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Trace Wiz — tracewiz demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)
    big_font = pygame.font.SysFont("monospace", 22, bold=True)

    state = GameState()

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.start()
                elif event.key == pygame.K_p:
                    state.toggle_pause()
                elif event.key == pygame.K_r:
                    state.session.reset()
                elif event.key == pygame.K_d:
                    state.load_daily()
                elif event.key == pygame.K_n:
                    state.load_practice()
                elif event.key in DIFFICULTY_KEYS and state.session.phase is Phase.IDLE:
                    state.difficulty = get_difficulty(DIFFICULTY_KEYS[event.key])

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if event.pos[1] < CANVAS_H:
                    state.session.begin_stroke(state.to_world(event.pos))

            elif event.type == pygame.MOUSEMOTION and state.session.is_drawing:
                if event.pos[1] < CANVAS_H:
                    state.session.append_trail_point(state.to_world(event.pos))

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                state.session.end_stroke()

        # --- Tick ---
        while accumulator >= tick_interval:
            state.engine.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_course(screen, state.session, state.viewport)
        draw_overlay(screen, big_font, state.session)
        draw_status_bar(screen, font, state.session, state.label, state.tracker.statistics)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
