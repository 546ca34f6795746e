"""Daily puzzle seeds.

Every calendar day maps to one seed and one difficulty level, so everyone
playing on the same local date traces the same course.
"""
from __future__ import annotations

import datetime as _dt
import zlib
from dataclasses import dataclass
from typing import Callable, Protocol

from tracewiz.difficulty import DifficultyProfile, difficulty_for_level


class SeedProvider(Protocol):
    def seed_for(self, day: _dt.date) -> int: ...


@dataclass(frozen=True)
class DailyPuzzle:
    day: _dt.date
    seed: int
    difficulty: DifficultyProfile


class DailySeedProvider:
    def __init__(self, today: Callable[[], _dt.date] = _dt.date.today) -> None:
        self._today = today

    def today(self) -> _dt.date:
        return self._today()

    def seed_for(self, day: _dt.date) -> int:
        """CRC-32 of the ``YYYY-MM-DD`` string; stable across runs and platforms."""
        return zlib.crc32(day.strftime("%Y-%m-%d").encode("ascii"))

    def seed_for_today(self) -> int:
        return self.seed_for(self.today())

    def level_for(self, day: _dt.date) -> int:
        """Difficulty level 1-3, cycling easy, medium, hard by day."""
        return day.toordinal() % 3 + 1

    def puzzle_for(self, day: _dt.date) -> DailyPuzzle:
        return DailyPuzzle(
            day=day,
            seed=self.seed_for(day),
            difficulty=difficulty_for_level(self.level_for(day)),
        )

    def today_puzzle(self) -> DailyPuzzle:
        return self.puzzle_for(self.today())

    def archive_dates(self, count: int = 30) -> list[_dt.date]:
        """The ``count`` days before today, most recent first."""
        today = self.today()
        return [today - _dt.timedelta(days=i) for i in range(1, count + 1)]
