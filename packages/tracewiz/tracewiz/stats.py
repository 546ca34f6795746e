"""Completion sink protocol and in-memory streak statistics."""
from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tracewiz.session import SessionResult


class CompletionSink(Protocol):
    def record(self, result: SessionResult) -> None: ...


@dataclass
class GameStatistics:
    games_played: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    history: dict[str, bool] = field(default_factory=dict)


class StatisticsTracker:
    """Counts completed daily puzzles and the run of consecutive days."""

    def __init__(self) -> None:
        self._stats = GameStatistics()

    @property
    def statistics(self) -> GameStatistics:
        return self._stats

    def is_completed(self, day: _dt.date) -> bool:
        return self._stats.history.get(day.isoformat(), False)

    def record_completion(self, day: _dt.date) -> bool:
        """Mark ``day`` completed. Returns False if it already was."""
        key = day.isoformat()
        stats = self._stats
        if stats.history.get(key):
            return False

        stats.games_played += 1
        stats.history[key] = True
        yesterday = (day - _dt.timedelta(days=1)).isoformat()
        if stats.history.get(yesterday):
            stats.current_streak += 1
        else:
            stats.current_streak = 1
        stats.longest_streak = max(stats.longest_streak, stats.current_streak)
        return True

    def sink_for(self, day: _dt.date) -> CompletionSink:
        """A sink that credits ``day`` when a round on its puzzle is won."""
        return _DaySink(self, day)


class _DaySink:
    def __init__(self, tracker: StatisticsTracker, day: _dt.date) -> None:
        self._tracker = tracker
        self._day = day

    def record(self, result: SessionResult) -> None:
        if result.won:
            self._tracker.record_completion(self._day)
