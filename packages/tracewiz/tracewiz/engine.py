"""Engine - fixed-step loop, pacing, and lifecycle hooks around a session."""

import logging
import time
from typing import Any, Callable

from tracewiz.clock import Clock
from tracewiz.session import TraceSession
from tracewiz.types import SnapshotError, TickContext

logger = logging.getLogger(__name__)

System = Callable[[TraceSession, TickContext], None]

_SNAPSHOT_VERSION = 1


class Engine:
    def __init__(self, session: TraceSession | None = None, tps: int = 60) -> None:
        self._clock = Clock(tps)
        self._session = session if session is not None else TraceSession()
        self._systems: list[System] = []
        self._start_hooks: list[System] = []
        self._stop_hooks: list[System] = []
        self._stop_requested: bool = False

    @property
    def session(self) -> TraceSession:
        return self._session

    @property
    def clock(self) -> Clock:
        return self._clock

    def attach(self, session: TraceSession) -> None:
        """Swap in a new session and rewind the clock. Systems are kept."""
        self._session = session
        self._clock.reset(0)

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: System) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: System) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._session, ctx)
            if self._stop_requested:
                break

    def _fire(self, hooks: list[System]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(self._session, ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break
        self._fire(self._stop_hooks)

    def run_forever(self) -> None:
        """Tick in real time until a system requests a stop."""
        self._stop_requested = False
        self._fire(self._start_hooks)
        logger.debug("Running at %d tps", self._clock.tps)

        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            sleep_time = self._clock.remaining(start)
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._fire(self._stop_hooks)

    def snapshot(self) -> dict[str, Any]:
        return {
            "version": _SNAPSHOT_VERSION,
            "tick_number": self._clock.tick_number,
            "tps": self._clock.tps,
            "session": self._session.snapshot(),
        }

    def restore(self, data: dict[str, Any]) -> None:
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )

        snap_tps = data.get("tps")
        if snap_tps != self._clock.tps:
            raise SnapshotError(
                f"TPS mismatch: snapshot has {snap_tps}, engine has {self._clock.tps}"
            )

        self._session.restore(data["session"])
        self._clock.reset(data["tick_number"])
