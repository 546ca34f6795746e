"""Snapshot and restore -- pause a round, save it, replay it.

Demonstrates:
- Taking a snapshot mid-round
- JSON serialization round-trip of snapshots
- Proving that a restored round continues identically

Run: python -m examples.snapshot
"""

import json

from tracewiz import EASY, Engine, make_session_system


def read_state(engine: Engine) -> tuple[str, float, float]:
    session = engine.session
    return (
        session.phase.value,
        round(session.round_time, 6),
        round(session.revealed_length, 6),
    )


def main() -> None:
    print("=== Snapshot & Restore ===\n")

    engine = Engine(tps=60)
    engine.session.generate(7, 400, 800)
    engine.session.start(EASY)
    engine.add_system(make_session_system())

    # --- Phase 1: countdown plus two seconds of play, then snapshot ---
    engine.run(engine.clock.ticks_for(engine.session.config.countdown_time + 2.0))
    snap = engine.snapshot()
    at_snap = read_state(engine)
    print(f"After {engine.clock.tick_number} ticks (snapshot taken): {at_snap}")

    # --- Phase 2: continue ---
    engine.run(300)
    result_a = read_state(engine)
    print(f"After {engine.clock.tick_number} ticks (continued):      {result_a}")

    # --- Phase 3: JSON round-trip ---
    snap_json = json.dumps(snap)
    print(f"\nSnapshot JSON size: {len(snap_json)} bytes")

    # --- Phase 4: restore into a fresh engine and replay ---
    replay = Engine(tps=60)
    replay.add_system(make_session_system())
    replay.restore(json.loads(snap_json))
    after_restore = read_state(replay)
    print(f"After restore to tick {replay.clock.tick_number}:        {after_restore}")

    replay.run(300)
    result_b = read_state(replay)
    print(f"After {replay.clock.tick_number} ticks (replayed):       {result_b}")

    print()
    assert at_snap == after_restore, "Restore failed!"
    print("Restore matches snapshot:  PASS")
    assert result_a == result_b, f"Replay mismatch: {result_a} != {result_b}"
    print("Replay matches original:   PASS")


if __name__ == "__main__":
    main()
