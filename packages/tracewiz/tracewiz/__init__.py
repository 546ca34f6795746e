"""tracewiz - Seeded trace-the-line puzzle engine."""

from tracewiz.clock import Clock
from tracewiz.config import GameConfig
from tracewiz.daily import DailyPuzzle, DailySeedProvider, SeedProvider
from tracewiz.difficulty import (
    EASY,
    HARD,
    MEDIUM,
    DifficultyProfile,
    difficulty_for_level,
    get_difficulty,
)
from tracewiz.engine import Engine
from tracewiz.generator import generate_path, path_from_points, path_height
from tracewiz.rng import Mulberry32, normalize_seed
from tracewiz.session import Phase, SessionResult, TraceSession, Verdict
from tracewiz.signals import SignalBus
from tracewiz.stats import CompletionSink, GameStatistics, StatisticsTracker
from tracewiz.systems import (
    make_autoscroll_system,
    make_session_system,
    make_signal_system,
)
from tracewiz.types import (
    CanvasSize,
    GenerationError,
    GenerationResult,
    InvalidCanvas,
    NoActiveSession,
    PathSegment,
    Point,
    SnapshotError,
    TickContext,
)
from tracewiz.viewport import Viewport

__all__ = [
    "CanvasSize",
    "Clock",
    "CompletionSink",
    "DailyPuzzle",
    "DailySeedProvider",
    "DifficultyProfile",
    "EASY",
    "Engine",
    "GameConfig",
    "GameStatistics",
    "GenerationError",
    "GenerationResult",
    "HARD",
    "InvalidCanvas",
    "MEDIUM",
    "Mulberry32",
    "NoActiveSession",
    "PathSegment",
    "Phase",
    "Point",
    "SeedProvider",
    "SessionResult",
    "SignalBus",
    "SnapshotError",
    "StatisticsTracker",
    "TickContext",
    "TraceSession",
    "Verdict",
    "Viewport",
    "difficulty_for_level",
    "generate_path",
    "get_difficulty",
    "make_autoscroll_system",
    "make_session_system",
    "make_signal_system",
    "normalize_seed",
    "path_from_points",
    "path_height",
]
