"""Difficulty profiles."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DifficultyProfile:
    """How forgiving a session is.

    Attributes:
        name: Display name, also the key used by snapshots.
        reveal_speed: Pixels of reference path revealed per second.
        max_distance_from_line: Loss threshold for drifting away from the path.
        min_progress_behind: How far the player may trail the revealed tip.
        description: One-line summary for menus.
    """

    name: str
    reveal_speed: float
    max_distance_from_line: float
    min_progress_behind: float
    description: str = ""


EASY = DifficultyProfile(
    name="Easy",
    reveal_speed=150,
    max_distance_from_line=120,
    min_progress_behind=600,
    description="Slower reveal, generous tolerance",
)

MEDIUM = DifficultyProfile(
    name="Medium",
    reveal_speed=150,
    max_distance_from_line=150,
    min_progress_behind=500,
    description="Moderate speed, balanced tolerance",
)

HARD = DifficultyProfile(
    name="Hard",
    reveal_speed=250,
    max_distance_from_line=80,
    min_progress_behind=300,
    description="Fast reveal, tight tolerance",
)

DIFFICULTIES: dict[str, DifficultyProfile] = {
    p.name.lower(): p for p in (EASY, MEDIUM, HARD)
}


def get_difficulty(name: str) -> DifficultyProfile:
    """Look up a profile by name, case-insensitively. Raises KeyError if unknown."""
    try:
        return DIFFICULTIES[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown difficulty {name!r}") from None


def difficulty_for_level(level: int) -> DifficultyProfile:
    """Map a daily level (1-3) to a profile; out-of-range levels play easy."""
    if level == 2:
        return MEDIUM
    if level == 3:
        return HARD
    return EASY
