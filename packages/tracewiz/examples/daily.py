"""Daily puzzles -- one course per calendar day, with streaks.

Demonstrates:
- Looking up today's seed and difficulty
- Listing the archive of past puzzles
- Crediting wins to a day through a completion sink
- Listening to session signals on the bus

Run: python -m examples.daily
"""

import datetime as dt

from tracewiz import (
    DailySeedProvider,
    Engine,
    Phase,
    SignalBus,
    StatisticsTracker,
    TraceSession,
    make_session_system,
    make_signal_system,
)
from tracewiz.types import Point


def play_straight_down(engine: Engine) -> None:
    """A naive player: one vertical stroke beside the starting point."""
    session = engine.session
    start = session.path.starting_point
    while session.phase is not Phase.RUNNING:
        engine.step()
    session.begin_stroke(start)
    y = start.y
    while session.phase is Phase.RUNNING:
        engine.step()
        tip = session.revealed_tip
        if tip is not None and tip.y - 10 > y:
            y = tip.y - 10
            session.append_trail_point(Point(start.x, y))


def main() -> None:
    print("=== Daily Puzzles ===\n")

    provider = DailySeedProvider()
    tracker = StatisticsTracker()
    bus = SignalBus()
    bus.subscribe("phase_changed", lambda name, data: print(f"  [{data['old'].value} -> {data['new'].value}]"))
    bus.subscribe("session_ended", lambda name, data: print(f"  verdict: {data['message']}"))

    puzzle = provider.today_puzzle()
    print(f"Today ({puzzle.day}): seed={puzzle.seed}  difficulty={puzzle.difficulty.name}\n")

    # Pretend the three days before today were already won.
    for offset in (3, 2, 1):
        tracker.record_completion(puzzle.day - dt.timedelta(days=offset))

    session = TraceSession(sink=tracker.sink_for(puzzle.day), bus=bus)
    session.generate(puzzle.seed, 400, 800)
    session.start(puzzle.difficulty)

    engine = Engine(session, tps=60)
    engine.add_system(make_session_system())
    engine.add_system(make_signal_system(bus))
    play_straight_down(engine)
    bus.flush()

    stats = tracker.statistics
    print(f"\nCompleted today: {tracker.is_completed(puzzle.day)}")
    print(f"Games: {stats.games_played}  streak: {stats.current_streak}  best: {stats.longest_streak}")

    print("\nArchive:")
    for day in provider.archive_dates(7):
        past = provider.puzzle_for(day)
        print(f"  {day:%a %d %b}  seed={past.seed:>10}  {past.difficulty.name}")


if __name__ == "__main__":
    main()
