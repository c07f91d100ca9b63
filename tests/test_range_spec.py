"""Tests for draw range validation."""

import pytest

from drawbox.errors import RangeExhaustedError, ValidationError
from drawbox.services.range_spec import BOUND_LIMIT, validate


def test_bounds_are_reordered():
    spec = validate(10, 1, 3, False)
    assert (spec.lower, spec.upper) == (1, 10)


def test_count_is_clamped_not_rejected():
    assert validate(1, 10, 0, False).count == 1
    assert validate(1, 10, -4, False).count == 1
    assert validate(1, 1000, 500, False).count == 50
    assert validate(1, 1000, 500, False, max_count=20).count == 20


def test_unique_within_range_is_accepted():
    spec = validate(1, 10, 5, True)
    assert spec.unique is True
    assert spec.slots == 10


def test_unique_exhausted_range_reports_shortfall():
    with pytest.raises(RangeExhaustedError) as exc_info:
        validate(1, 3, 5, True)

    assert exc_info.value.code == "range_exhausted"
    assert exc_info.value.details == {"requested": 5, "available": 3}


def test_exact_fit_unique_range():
    spec = validate(5, 5, 1, True)
    assert spec.slots == 1


@pytest.mark.parametrize("bad", ["1", 1.5, None, True])
def test_non_integer_bounds_rejected(bad):
    with pytest.raises(ValidationError):
        validate(bad, 10, 1, False)


@pytest.mark.parametrize("bound", [10**400, BOUND_LIMIT + 1, -BOUND_LIMIT - 1])
def test_bounds_beyond_limit_rejected(bound):
    with pytest.raises(ValidationError) as exc_info:
        validate(1, bound, 1, False)
    assert "max" in exc_info.value.details


def test_widest_range_is_accepted():
    spec = validate(-BOUND_LIMIT, BOUND_LIMIT, 3, True)
    assert spec.slots == 2 * BOUND_LIMIT + 1
