"""Session configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable timing and tolerance settings for a trace session.

    Attributes:
        round_time: Seconds of play before the round is lost on time.
        countdown_time: Seconds between start and the first running tick.
        catch_up_time: Round time at which the whole path is revealed.
        initial_reveal: Path length visible when a round starts or resets.
        preview_reveal: Path length visible right after a path is loaded.
        finish_radius: Trail tip closer than this to the finish wins.
        touch_distance: Trail tip closer than this to the path counts as crossing.
        min_sample_spacing: Input samples this close to the previous one are dropped.
        tip_tolerance: Input samples this far below the revealed tip are dropped.
    """

    round_time: float = 30.0
    countdown_time: float = 5.0
    catch_up_time: float = 27.0
    initial_reveal: float = 200.0
    preview_reveal: float = 300.0
    finish_radius: float = 50.0
    touch_distance: float = 4.0
    min_sample_spacing: float = 2.0
    tip_tolerance: float = 5.0

    def __post_init__(self) -> None:
        if self.round_time <= 0:
            raise ValueError("round_time must be positive")
        if self.countdown_time < 0:
            raise ValueError("countdown_time must not be negative")
        if not 0 <= self.catch_up_time <= self.round_time:
            raise ValueError("catch_up_time must lie within the round")
        if self.initial_reveal < 0 or self.preview_reveal < 0:
            raise ValueError("reveal lengths must not be negative")
        if self.finish_radius <= 0 or self.touch_distance < 0:
            raise ValueError("finish_radius must be positive and touch_distance not negative")
