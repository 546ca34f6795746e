"""Fixed-step clock: tick counting, real-time pacing, and second/tick conversion."""

import math
import time
from typing import Callable

from tracewiz.types import TickContext

# Tick counts derived from float seconds (e.g. 0.5 * 60) may land a hair above
# an integer; anything this close rounds down to it.
_TICK_EPSILON = 1e-9


class Clock:
    """Counts fixed steps of ``1 / tps`` seconds for one session driver."""

    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        """Simulated seconds since the last reset."""
        return self._tick_number * self._dt

    def ticks_for(self, seconds: float) -> int:
        """Number of whole steps needed to cover ``seconds`` of session time."""
        if seconds <= 0:
            return 0
        return math.ceil(seconds * self._tps - _TICK_EPSILON)

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def remaining(self, started: float) -> float:
        """Wall-clock seconds left in the step that began at ``started``.

        ``started`` is a ``time.monotonic()`` reading; negative when the step
        overran.
        """
        return self._dt - (time.monotonic() - started)

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self.elapsed,
            request_stop=stop_fn,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
