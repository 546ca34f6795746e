"""Trace session -- progressive reveal and adherence checking.

A session owns one generated path and plays rounds on it::

    IDLE --start--> COUNTDOWN --(countdown elapsed)--> RUNNING <--pause/resume--> PAUSED
                                                          |
                                                          v
                                                        ENDED (won, reason)

``reset`` and ``cancel`` return any phase to IDLE. Only ENDED reports to the
completion sink; a cancelled round leaves no trace.

While RUNNING each ``tick`` grows the revealed length at the difficulty's
reveal speed and re-checks the latest trail sample against the revealed
prefix of the path. Win and loss are verdicts, not exceptions.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from tracewiz.config import GameConfig
from tracewiz.difficulty import MEDIUM, DifficultyProfile, get_difficulty
from tracewiz.generator import generate_path
from tracewiz.geometry import (
    distance,
    nearest_distance,
    point_segment_distance,
    segments_intersect,
)
from tracewiz.types import (
    GenerationResult,
    NoActiveSession,
    PathSegment,
    Point,
    SnapshotError,
)

if TYPE_CHECKING:
    from tracewiz.signals import SignalBus
    from tracewiz.stats import CompletionSink

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1

# Accumulated float deltas (e.g. 1800 x 1/60) land a hair either side of the
# limit; anything this close counts as reached.
_TIME_EPSILON = 1e-9

REASON_FINISHED = "finished"
REASON_TIMEOUT = "time's up"
REASON_CROSSED = "crossed"
REASON_TOO_FAR = "too far"

_MESSAGES = {
    REASON_FINISHED: "Amazing! You reached the finish line!",
    REASON_TIMEOUT: "Time's up! Try to reach the finish line faster!",
    REASON_CROSSED: "Crossed the black line!",
    REASON_TOO_FAR: "Too far from the black line!",
}


class Phase(Enum):
    IDLE = "idle"
    COUNTDOWN = "countdown"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


@dataclass(frozen=True)
class Verdict:
    won: bool
    reason: str
    message: str


@dataclass(frozen=True)
class SessionResult:
    """What a finished round hands to the completion sink."""

    won: bool
    reason: str
    message: str
    seed: int | None
    difficulty: str
    round_time: float


class TraceSession:
    def __init__(
        self,
        config: GameConfig | None = None,
        sink: CompletionSink | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._config = config if config is not None else GameConfig()
        self._sink = sink
        self._bus = bus
        self._path: GenerationResult | None = None
        self._difficulty: DifficultyProfile = MEDIUM
        self._phase = Phase.IDLE
        self._countdown = self._config.countdown_time
        self._round_time = 0.0
        self._revealed_length = 0.0
        self._revealed_count = 0
        self._trail: list[Point] = []
        self._drawing = False
        self._verdict: Verdict | None = None

    # -- Observables -------------------------------------------------------

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def path(self) -> GenerationResult | None:
        return self._path

    @property
    def difficulty(self) -> DifficultyProfile:
        return self._difficulty

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def trail(self) -> tuple[Point, ...]:
        return tuple(self._trail)

    @property
    def is_drawing(self) -> bool:
        return self._drawing

    @property
    def round_time(self) -> float:
        return self._round_time

    @property
    def time_remaining(self) -> float:
        return max(0.0, self._config.round_time - self._round_time)

    @property
    def countdown_remaining(self) -> float:
        return self._countdown

    @property
    def revealed_length(self) -> float:
        return self._revealed_length

    @property
    def revealed_segment_count(self) -> int:
        return self._revealed_count

    @property
    def revealed_segments(self) -> tuple[PathSegment, ...]:
        if self._path is None:
            return ()
        return self._path.segments[: self._revealed_count]

    @property
    def revealed_tip(self) -> Point | None:
        """End of the last revealed segment, or None before anything is revealed."""
        if self._path is None or self._revealed_count == 0:
            return None
        return self._path.segments[self._revealed_count - 1].end

    @property
    def verdict(self) -> Verdict | None:
        return self._verdict

    @property
    def show_starting_point(self) -> bool:
        """Whether the starting marker should still be drawn."""
        if self._path is None or self._trail:
            return False
        if self._phase in (Phase.IDLE, Phase.COUNTDOWN):
            return True
        return self._phase is Phase.RUNNING and self._round_time < 2.0

    @property
    def progress_behind(self) -> float:
        """Revealed length minus how far along the path the trail tip has got."""
        if not self._trail or self._revealed_count == 0:
            return 0.0
        tip = self._trail[-1]
        best = None
        progress = 0.0
        for seg in self.revealed_segments:
            d = point_segment_distance(tip, seg.start, seg.end)
            if best is None or d < best:
                best = d
                progress = seg.accumulated_length - seg.length + _along(tip, seg)
        return max(0.0, self._revealed_length - progress)

    # -- Path --------------------------------------------------------------

    def generate(self, seed: int, width: float, height: float) -> GenerationResult:
        """Generate and load the path for ``seed``. Raises InvalidCanvas."""
        result = generate_path(seed, width, height)
        self.load(result)
        return result

    def load(self, result: GenerationResult) -> None:
        """Install a path, discarding any round in progress."""
        self._path = result
        self._clear_round(self._config.preview_reveal)
        self._set_phase(Phase.IDLE)
        logger.debug(
            "Loaded path: %d segments, %.1fpx", len(result.segments), result.total_length,
        )
        if self._bus is not None:
            self._bus.publish(
                "path_loaded",
                segments=len(result.segments),
                total_length=result.total_length,
            )

    # -- Phase control -----------------------------------------------------

    def start(self, difficulty: DifficultyProfile | None = None) -> None:
        """Begin the countdown. Ignored unless IDLE."""
        self._require_path()
        if self._phase is not Phase.IDLE:
            return
        if difficulty is not None:
            self._difficulty = difficulty
        self._clear_round(self._config.initial_reveal)
        self._set_phase(Phase.COUNTDOWN)

    def pause(self) -> None:
        if self._phase is Phase.RUNNING:
            self._set_phase(Phase.PAUSED)

    def resume(self) -> None:
        if self._phase is Phase.PAUSED:
            self._set_phase(Phase.RUNNING)

    def reset(self) -> None:
        """Return to IDLE keeping the path."""
        self._clear_round(self._config.initial_reveal)
        self._set_phase(Phase.IDLE)

    def cancel(self) -> None:
        """Abandon the round without recording an outcome."""
        was_active = self._phase in (Phase.COUNTDOWN, Phase.RUNNING, Phase.PAUSED)
        self.reset()
        if was_active:
            logger.info("Session cancelled")
            if self._bus is not None:
                self._bus.publish("session_cancelled")

    # -- Time --------------------------------------------------------------

    def tick(self, dt: float) -> None:
        """Advance the session by ``dt`` seconds."""
        self._require_path()
        if dt < 0:
            raise ValueError(f"dt must not be negative, got {dt}")

        if self._phase is Phase.COUNTDOWN:
            self._countdown -= dt
            if self._countdown <= _TIME_EPSILON:
                self._countdown = 0.0
                self._round_time = 0.0
                self._set_phase(Phase.RUNNING)
            return

        if self._phase is not Phase.RUNNING:
            return

        cfg = self._config
        total = self._path.total_length
        self._round_time += dt
        self._revealed_length = min(
            total, self._revealed_length + self._difficulty.reveal_speed * dt,
        )
        if self._round_time >= cfg.catch_up_time - _TIME_EPSILON:
            self._revealed_length = total
        self._update_revealed()

        if self._round_time >= cfg.round_time - _TIME_EPSILON:
            self._end(False, REASON_TIMEOUT)
            return

        if len(self._trail) >= 2:
            self.check_rules()

    # -- Input -------------------------------------------------------------

    def begin_stroke(self, point: Point) -> None:
        """Start a new gesture at ``point``, resuming a paused round."""
        self._require_path()
        if self._phase not in (Phase.COUNTDOWN, Phase.RUNNING, Phase.PAUSED):
            return
        if self._phase is Phase.PAUSED:
            self.resume()
        self._drawing = True
        self._trail = [point]

    def append_trail_point(self, point: Point) -> bool:
        """Record one input sample. Returns False when the sample is dropped."""
        self._require_path()
        if self._phase not in (Phase.COUNTDOWN, Phase.RUNNING):
            return False
        if not self._drawing:
            self.begin_stroke(point)
            return True

        if distance(point, self._trail[-1]) <= self._config.min_sample_spacing:
            return False
        tip = self.revealed_tip
        if tip is not None and point.y > tip.y + self._config.tip_tolerance:
            return False

        self._trail.append(point)
        self.check_rules()
        return True

    def end_stroke(self) -> None:
        self._drawing = False

    # -- Rules -------------------------------------------------------------

    def check_rules(self) -> Verdict | None:
        """Judge the latest trail sample. Returns the verdict if the round ended."""
        self._require_path()
        if self._phase is not Phase.RUNNING:
            return None
        if len(self._trail) < 2 or self._revealed_count == 0:
            return None

        cfg = self._config
        last = self._trail[-1]
        prev = self._trail[-2]

        if distance(last, self._path.end_line) < cfg.finish_radius:
            return self._end(True, REASON_FINISHED)

        revealed = self.revealed_segments
        for seg in revealed:
            if segments_intersect(prev, last, seg.start, seg.end):
                return self._end(False, REASON_CROSSED)
            if point_segment_distance(last, seg.start, seg.end) < cfg.touch_distance:
                return self._end(False, REASON_CROSSED)

        if nearest_distance(last, revealed) > self._difficulty.max_distance_from_line:
            return self._end(False, REASON_TOO_FAR)
        return None

    # -- Snapshot ----------------------------------------------------------

    def snapshot(self) -> dict[str, Any]:
        """JSON-compatible state. The path itself is rebuilt from its seed."""
        if self._path is None:
            raise SnapshotError("No path loaded")
        if self._path.seed is None or self._path.canvas is None:
            raise SnapshotError("Path was not generated from a seed")
        verdict = None
        if self._verdict is not None:
            verdict = {
                "won": self._verdict.won,
                "reason": self._verdict.reason,
                "message": self._verdict.message,
            }
        return {
            "version": _SNAPSHOT_VERSION,
            "seed": self._path.seed,
            "canvas": [self._path.canvas.width, self._path.canvas.height],
            "difficulty": self._difficulty.name,
            "phase": self._phase.value,
            "countdown": self._countdown,
            "round_time": self._round_time,
            "revealed_length": self._revealed_length,
            "trail": [[p.x, p.y] for p in self._trail],
            "drawing": self._drawing,
            "verdict": verdict,
        }

    def restore(self, data: dict[str, Any]) -> None:
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )
        try:
            difficulty = get_difficulty(data["difficulty"])
            phase = Phase(data["phase"])
            width, height = data["canvas"]
            path = generate_path(data["seed"], width, height)
            trail = [Point(float(x), float(y)) for x, y in data["trail"]]
            countdown = float(data["countdown"])
            round_time = float(data["round_time"])
            revealed_length = float(data["revealed_length"])
            drawing = bool(data["drawing"])
            verdict = data.get("verdict")
            if verdict is not None:
                verdict = Verdict(
                    won=bool(verdict["won"]),
                    reason=verdict["reason"],
                    message=verdict["message"],
                )
        except (KeyError, TypeError, ValueError) as exc:
            raise SnapshotError(f"Invalid snapshot: {exc}") from exc

        self._path = path
        self._difficulty = difficulty
        self._phase = phase
        self._countdown = countdown
        self._round_time = round_time
        self._revealed_length = revealed_length
        self._trail = trail
        self._drawing = drawing
        self._verdict = verdict
        self._update_revealed()

    # -- Internals ---------------------------------------------------------

    def _require_path(self) -> None:
        if self._path is None:
            raise NoActiveSession("No path loaded; call generate() or load() first")

    def _clear_round(self, reveal: float) -> None:
        self._countdown = self._config.countdown_time
        self._round_time = 0.0
        self._trail = []
        self._drawing = False
        self._verdict = None
        self._revealed_length = reveal
        if self._path is not None:
            self._revealed_length = min(reveal, self._path.total_length)
        self._update_revealed()

    def _update_revealed(self) -> None:
        count = 0
        if self._path is not None:
            for seg in self._path.segments:
                if seg.accumulated_length > self._revealed_length:
                    break
                count += 1
        self._revealed_count = count

    def _set_phase(self, phase: Phase) -> None:
        old = self._phase
        if old is phase:
            return
        self._phase = phase
        logger.info("Session phase %s -> %s", old.value, phase.value)
        if self._bus is not None:
            self._bus.publish("phase_changed", old=old, new=phase)

    def _end(self, won: bool, reason: str) -> Verdict:
        verdict = Verdict(won=won, reason=reason, message=_MESSAGES[reason])
        self._verdict = verdict
        self._drawing = False
        self._set_phase(Phase.ENDED)
        logger.info(
            "Round over: %s (%s) at %.2fs", "won" if won else "lost", reason, self._round_time,
        )
        if self._sink is not None:
            self._sink.record(SessionResult(
                won=won,
                reason=reason,
                message=verdict.message,
                seed=self._path.seed,
                difficulty=self._difficulty.name,
                round_time=self._round_time,
            ))
        if self._bus is not None:
            self._bus.publish(
                "session_ended", won=won, reason=reason, message=verdict.message,
            )
        return verdict


def _along(p: Point, seg: PathSegment) -> float:
    """Length along ``seg`` of the projection of ``p``, clamped to the segment."""
    if seg.length == 0:
        return 0.0
    t = ((p.x - seg.start.x) * (seg.end.x - seg.start.x)
         + (p.y - seg.start.y) * (seg.end.y - seg.start.y)) / (seg.length * seg.length)
    return max(0.0, min(1.0, t)) * seg.length
