"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - NoteId wraps str; domain logic never passes bare ids around
    - Policy choices are Enums, no raw string matching
    - Storage keys are defined once here

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: settings and JSON carry the plain value
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

NoteId = NewType("NoteId", str)


# ─── Storage Keys ────────────────────────────────────────────────

COUNTER_KEY = "counter_value"
NOTES_KEY = "notes_list"


# ─── Limits ──────────────────────────────────────────────────────

NOTE_MAX_LENGTH = 500


# ─── Enums ───────────────────────────────────────────────────────

class DecrementPolicy(str, Enum):
    """How decrement behaves at zero."""
    UNBOUNDED = "unbounded"
    CLAMP_AT_ZERO = "clamp_at_zero"


class InsertPosition(str, Enum):
    """Where add() places a new note."""
    APPEND = "append"
    PREPEND = "prepend"


class ContainerState(str, Enum):
    """Lifecycle of a persisted container. No terminal state."""
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
