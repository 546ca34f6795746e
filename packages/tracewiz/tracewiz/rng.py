"""Mulberry32 -- the seeded stream behind path generation.

Python's ``random.Random`` is not used here: the generated path has to match
across platforms and implementations, so the mixing function is spelled out
with explicit 32-bit wraparound.
"""

from __future__ import annotations

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5


def normalize_seed(seed: int) -> int:
    """Fold an arbitrary integer (e.g. a negative hash) into the 32-bit seed range."""
    return abs(seed) % _MASK


class Mulberry32:
    def __init__(self, seed: int) -> None:
        if not 0 <= seed <= _MASK:
            raise ValueError(f"seed must fit in 32 bits, got {seed}")
        self._seed = seed
        self._state = seed

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> int:
        return self._state

    def reseed(self, seed: int | None = None) -> None:
        """Restart the stream. Without an argument the original seed is reused."""
        if seed is not None:
            if not 0 <= seed <= _MASK:
                raise ValueError(f"seed must fit in 32 bits, got {seed}")
            self._seed = seed
        self._state = self._seed

    def next_u32(self) -> int:
        self._state = (self._state + _INCREMENT) & _MASK
        z = self._state
        z = ((z ^ (z >> 15)) * (z | 1)) & _MASK
        z ^= (z + ((z ^ (z >> 7)) * (z | 61))) & _MASK
        return z ^ (z >> 14)

    def random(self) -> float:
        """Next value in [0, 1]. The divisor is 2**32 - 1, so 1.0 is reachable."""
        return self.next_u32() / _MASK
