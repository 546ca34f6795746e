"""System factories wiring sessions, signals, and scrolling into the engine."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tracewiz.session import Phase

if TYPE_CHECKING:
    from tracewiz.session import TraceSession
    from tracewiz.signals import SignalBus
    from tracewiz.types import TickContext
    from tracewiz.viewport import Viewport


def make_session_system() -> Callable[[TraceSession, TickContext], None]:
    """Return a system that advances the session by one clock step."""

    def session_system(session: TraceSession, ctx: TickContext) -> None:
        if session.path is not None:
            session.tick(ctx.dt)

    return session_system


def make_signal_system(bus: SignalBus) -> Callable[[TraceSession, TickContext], None]:
    def signal_system(session: TraceSession, ctx: TickContext) -> None:
        bus.flush()

    return signal_system


def make_autoscroll_system(
    viewport: Viewport,
    scroll_time: float = 0.5,
    on_scroll: Callable[[float], None] | None = None,
) -> Callable[[TraceSession, TickContext], None]:
    """Return a system that keeps the action inside ``viewport``.

    A jump while the player is drawing pauses the round for ``scroll_time``
    seconds so the stroke is not judged against a moving canvas. A round
    resumed early (e.g. by a new stroke) cancels the pending resume.
    """
    remaining = [0.0]

    def autoscroll_system(session: TraceSession, ctx: TickContext) -> None:
        if remaining[0] > 0 and session.phase is not Phase.PAUSED:
            remaining[0] = 0.0
        if remaining[0] > 0:
            remaining[0] -= ctx.dt
            if remaining[0] <= 0:
                remaining[0] = 0.0
                session.resume()
            return

        if session.phase is Phase.IDLE:
            viewport.reset()
            return
        if session.phase is not Phase.RUNNING:
            return

        target = viewport.follow(session)
        if target is None:
            return
        if on_scroll is not None:
            on_scroll(target)
        if session.is_drawing and scroll_time > 0:
            session.pause()
            remaining[0] = scroll_time

    return autoscroll_system
