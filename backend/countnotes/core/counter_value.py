"""Counter Value — immutable counter entity and its pure arithmetic.

Invariants:
    - Under CLAMP_AT_ZERO the value never goes below 0; decrement at 0 returns
      the same value
    - Under UNBOUNDED the value may go negative
    - All functions are PURE: no IO, no async
"""

from dataclasses import dataclass

from countnotes.core.domain_types import DecrementPolicy
from countnotes.core.errors import ValidationFailure
from countnotes.core.result import Err, Ok, Result


@dataclass(frozen=True)
class CounterValue:
    value: int = 0


ZERO = CounterValue(0)


def make_counter(value: int, policy: DecrementPolicy) -> Result[CounterValue]:
    """Validating factory: rejects negatives under CLAMP_AT_ZERO."""
    if policy == DecrementPolicy.CLAMP_AT_ZERO and value < 0:
        return Err(ValidationFailure(
            "Counter value cannot be negative", field="value",
        ))
    return Ok(CounterValue(value))


def incremented(counter: CounterValue) -> CounterValue:
    return CounterValue(counter.value + 1)


def decremented(counter: CounterValue, policy: DecrementPolicy) -> CounterValue:
    if policy == DecrementPolicy.CLAMP_AT_ZERO and counter.value <= 0:
        return counter
    return CounterValue(counter.value - 1)
