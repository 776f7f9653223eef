"""Counter Value — pure arithmetic under both decrement policies."""

from countnotes.core.counter_value import (
    ZERO, CounterValue, decremented, incremented, make_counter,
)
from countnotes.core.domain_types import DecrementPolicy
from countnotes.core.errors import ValidationFailure
from countnotes.core.result import Err, Ok


def test_default_counter_is_zero():
    assert CounterValue() == ZERO
    assert ZERO.value == 0


def test_increment_adds_one():
    assert incremented(CounterValue(4)) == CounterValue(5)


def test_unbounded_decrement_goes_negative():
    assert decremented(ZERO, DecrementPolicy.UNBOUNDED) == CounterValue(-1)


def test_clamped_decrement_stops_at_zero():
    assert decremented(ZERO, DecrementPolicy.CLAMP_AT_ZERO) is ZERO


def test_clamped_decrement_above_zero():
    assert decremented(CounterValue(3), DecrementPolicy.CLAMP_AT_ZERO) == CounterValue(2)


def test_make_counter_rejects_negative_when_clamped():
    result = make_counter(-1, DecrementPolicy.CLAMP_AT_ZERO)
    assert isinstance(result, Err)
    assert isinstance(result.error, ValidationFailure)


def test_make_counter_allows_negative_when_unbounded():
    assert make_counter(-5, DecrementPolicy.UNBOUNDED) == Ok(CounterValue(-5))
