"""Tests for sequence generation."""

import random

import pytest

from drawbox.services.range_spec import BOUND_LIMIT
from drawbox.services.sequence_generator import generate, uniform_int


class ScriptedRandom:
    """Returns the given ``random()`` values in order."""

    def __init__(self, values):
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


def test_uniform_int_maps_unit_interval_onto_range():
    assert uniform_int(3, 7, ScriptedRandom([0.0])) == 3
    assert uniform_int(3, 7, ScriptedRandom([0.9999])) == 7
    assert uniform_int(3, 7, ScriptedRandom([0.5])) == 5


def test_non_unique_values_stay_in_bounds():
    rng = random.Random(1)
    for _ in range(200):
        values = generate(-5, 5, 8, False, rng)
        assert len(values) == 8
        assert all(-5 <= v <= 5 for v in values)


def test_non_unique_allows_duplicates():
    assert generate(1, 1, 4, False, random.Random(0)) == [1, 1, 1, 1]


def test_unique_values_are_distinct_and_in_bounds():
    rng = random.Random(7)
    for _ in range(100):
        values = generate(1, 10, 5, True, rng)
        assert len(values) == 5
        assert len(set(values)) == 5
        assert all(1 <= v <= 10 for v in values)


def test_unique_uses_rejection_sampling_in_draw_order():
    # 0.0 -> 1, 0.0 -> 1 (rejected), 0.5 -> 2
    assert generate(1, 2, 2, True, ScriptedRandom([0.0, 0.0, 0.5])) == [1, 2]


def test_unique_full_range_is_a_permutation():
    values = generate(1, 6, 6, True, random.Random(3))
    assert sorted(values) == [1, 2, 3, 4, 5, 6]


@pytest.mark.parametrize("count", [0, -1])
def test_non_positive_count_yields_nothing(count):
    assert generate(1, 10, count, True) == []


def test_unique_impossible_range_does_not_loop():
    with pytest.raises(ValueError):
        generate(1, 3, 5, True, random.Random(0))


def test_seeded_source_is_deterministic():
    assert generate(1, 100, 10, True, random.Random(99)) == generate(1, 100, 10, True, random.Random(99))


def test_widest_accepted_span_stays_in_bounds():
    top = ScriptedRandom([0.0, 0.999999999999])
    assert uniform_int(-BOUND_LIMIT, BOUND_LIMIT, top) == -BOUND_LIMIT
    assert uniform_int(-BOUND_LIMIT, BOUND_LIMIT, top) <= BOUND_LIMIT

    values = generate(-BOUND_LIMIT, BOUND_LIMIT, 5, True, rng=random.Random(3))
    assert all(-BOUND_LIMIT <= v <= BOUND_LIMIT for v in values)
