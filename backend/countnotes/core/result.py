"""Result Type — tagged success/failure union returned by every public operation.

Invariants:
    - Ok carries a value, Err carries a CountNotesError instance
    - Expected failures (validation, storage, not-found) never raise out of
      the containers; they come back as Err
    - unwrap() is the only helper that raises, and only at the HTTP boundary
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from countnotes.core.errors import CountNotesError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Success variant."""
    value: T


@dataclass(frozen=True)
class Err:
    """Failure variant."""
    error: CountNotesError


Result = Union[Ok[T], Err]


def is_ok(result: "Result[T]") -> bool:
    return isinstance(result, Ok)


def unwrap(result: "Result[T]") -> T:
    """Return the Ok value or raise the carried error."""
    if isinstance(result, Err):
        raise result.error
    return result.value


def map_ok(result: "Result[T]", fn: Callable[[T], U]) -> "Result[U]":
    """Apply fn to the Ok value; Err passes through untouched."""
    if isinstance(result, Err):
        return result
    return Ok(fn(result.value))
