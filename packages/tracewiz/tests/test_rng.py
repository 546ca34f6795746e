"""Tests for the Mulberry32 stream."""

import pytest

from tracewiz.rng import Mulberry32, normalize_seed


def _take(rng: Mulberry32, n: int) -> list[float]:
    return [rng.random() for _ in range(n)]


# --- Determinism ---


def test_same_seed_produces_identical_sequences():
    assert _take(Mulberry32(12345), 200) == _take(Mulberry32(12345), 200)


def test_different_seeds_produce_different_sequences():
    assert _take(Mulberry32(111), 50) != _take(Mulberry32(222), 50)


def test_reseed_restarts_sequence():
    rng = Mulberry32(42)
    first = _take(rng, 20)
    rng.reseed()
    assert _take(rng, 20) == first


def test_reseed_with_new_seed():
    rng = Mulberry32(1)
    rng.reseed(7)
    assert rng.seed == 7
    assert _take(rng, 10) == _take(Mulberry32(7), 10)


def test_state_advances_by_increment():
    rng = Mulberry32(0)
    rng.random()
    assert rng.state == 0x6D2B79F5
    rng.random()
    assert rng.state == (2 * 0x6D2B79F5) & 0xFFFFFFFF


# --- Range ---


def test_values_within_unit_interval():
    rng = Mulberry32(987654321)
    for value in _take(rng, 5000):
        assert 0.0 <= value <= 1.0


def test_u32_values_fit_in_32_bits():
    rng = Mulberry32(0xFFFFFFFF)
    for _ in range(1000):
        assert 0 <= rng.next_u32() <= 0xFFFFFFFF


def test_values_are_spread_out():
    values = _take(Mulberry32(2024), 2000)
    assert min(values) < 0.05
    assert max(values) > 0.95
    assert 0.4 < sum(values) / len(values) < 0.6


@pytest.mark.parametrize("seed", [-1, 0x1_0000_0000])
def test_out_of_range_seed_rejected(seed):
    with pytest.raises(ValueError):
        Mulberry32(seed)


# --- normalize_seed ---


def test_normalize_seed_folds_negative_values():
    assert normalize_seed(-5) == 5


def test_normalize_seed_wraps_large_values():
    assert normalize_seed(0xFFFFFFFF) == 0
    assert normalize_seed(0xFFFFFFFF + 3) == 3


def test_normalize_seed_output_is_valid_seed():
    for seed in (-(2**63), 2**63 - 1, 123456789012345):
        Mulberry32(normalize_seed(seed))


# --- Known answers ---

@pytest.mark.parametrize(
    "seed,expected",
    [
        (42, [2581720956, 1925393290, 3661312704, 2876485805, 750819978]),
        (0, [1144304738, 1416247, 958946056, 627933444, 2007157716]),
    ],
)
def test_matches_reference_mulberry32(seed, expected):
    rng = Mulberry32(seed)
    assert [rng.next_u32() for _ in range(5)] == expected


def test_random_is_u32_over_max():
    rng = Mulberry32(42)
    assert rng.random() == 2581720956 / 0xFFFFFFFF
