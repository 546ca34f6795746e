"""Generate a course -- the simplest tracewiz program.

Demonstrates:
- Generating a path from a seed and a canvas size
- Reading segments, the starting point, and the finish
- Proving determinism: same seed produces the same course

Run: python -m examples.basics
"""

from tracewiz import generate_path


def main() -> None:
    print("=== Generate a Course ===\n")

    path = generate_path(42, 400, 800)
    print(f"  segments:       {len(path.segments)}")
    print(f"  starting point: ({path.starting_point.x:.1f}, {path.starting_point.y:.1f})")
    print(f"  finish:         ({path.end_line.x:.1f}, {path.end_line.y:.1f})")
    print(f"  total length:   {path.total_length:.1f}px")
    print(f"  course height:  {path.path_height:.1f}px")
    print(f"  path bottom:    {path.bottom_y:.1f}px")

    print("\n  first five segments:")
    for seg in path.segments[:5]:
        print(
            f"    ({seg.start.x:6.1f}, {seg.start.y:6.1f}) -> "
            f"({seg.end.x:6.1f}, {seg.end.y:6.1f})  "
            f"len={seg.length:5.1f}  acc={seg.accumulated_length:7.1f}"
        )

    print()
    again = generate_path(42, 400, 800)
    if again.segments == path.segments:
        print("  Same seed -> IDENTICAL course (deterministic)")
    else:
        print("  ERROR: courses differ despite same seed!")

    other = generate_path(43, 400, 800)
    if other.segments != path.segments:
        print("  Different seed -> DIFFERENT course (as expected)")


if __name__ == "__main__":
    main()
