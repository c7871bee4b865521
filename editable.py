"""
Editable - draft vs committed values without boolean flags.

A value is either locked (ReadOnly) or being edited (Editable), in which case
it carries both the last saved value and the working draft.

Architecture: Functional Core
- Data: two immutable generic dataclasses and their union
- Computations: total, pure functions (no I/O, no printing)
- Every operation returns a value; nothing is mutated in place
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar


__all__ = [
    "Editable",
    "EditableValue",
    "ReadOnly",
    "cancel",
    "edit",
    "is_dirty",
    "is_dirty_with",
    "is_editable",
    "is_read_only",
    "map",
    "save",
    "update",
    "value",
]

A = TypeVar("A")


# =============================================================================
# DOMAIN TYPES (Data)
# =============================================================================


@dataclass(frozen=True)
class ReadOnly(Generic[A]):
    """Locked state: only the saved value exists."""

    saved: A


@dataclass(frozen=True)
class Editable(Generic[A]):
    """Unlocked state: the last saved value and the draft being worked on."""

    saved: A
    modified: A


EditableValue = ReadOnly[A] | Editable[A]


# =============================================================================
# TRANSITIONS (Pure: EditableValue -> EditableValue)
# =============================================================================


def edit(x: EditableValue[A]) -> EditableValue[A]:
    """
    Enter edit mode.

    A locked value becomes Editable with both halves set to the saved value.
    An already editable value is returned as-is, keeping its draft.

    Pure: EditableValue[A] -> EditableValue[A]
    """
    match x:
        case ReadOnly(saved):
            return Editable(saved, saved)
        case _:
            return x


def map(f: Callable[[A], A], x: EditableValue[A]) -> EditableValue[A]:
    """
    Apply ``f`` to the draft, leaving the saved value untouched.

    Locked values cannot be transformed: ``f`` is never called for them.

    Pure: (A -> A, EditableValue[A]) -> EditableValue[A]
    """
    match x:
        case Editable(saved, modified):
            return Editable(saved, f(modified))
        case _:
            return x


def update(new_value: A, x: EditableValue[A]) -> EditableValue[A]:
    """Replace the draft with ``new_value``. No-op when locked."""
    return map(lambda _: new_value, x)


def save(x: EditableValue[A]) -> EditableValue[A]:
    """
    Commit the draft and lock.

    The previous saved value is dropped. Locked values pass through.

    Pure: EditableValue[A] -> ReadOnly[A]
    """
    match x:
        case Editable(_, modified):
            return ReadOnly(modified)
        case _:
            return x


def cancel(x: EditableValue[A]) -> EditableValue[A]:
    """
    Discard the draft and lock on the last saved value.

    Pure: EditableValue[A] -> ReadOnly[A]
    """
    match x:
        case Editable(saved, _):
            return ReadOnly(saved)
        case _:
            return x


# =============================================================================
# QUERIES (Pure: EditableValue -> A | bool)
# =============================================================================


def value(x: EditableValue[A]) -> A:
    """Current value: the draft while editing, the saved value otherwise."""
    match x:
        case Editable(_, modified):
            return modified
        case _:
            return x.saved


def is_dirty(x: EditableValue[A]) -> bool:
    """Whether the draft differs from the saved value under ``==``."""
    return is_dirty_with(operator.eq, x)


def is_dirty_with(eq: Callable[[A, A], bool], x: EditableValue[A]) -> bool:
    """
    Whether the draft differs from the saved value under ``eq``.

    Locked values are never dirty and ``eq`` is not consulted for them.
    Otherwise ``eq`` is called once as ``eq(saved, modified)``; it should be
    reflexive and symmetric for the answer to mean "unchanged since save".

    Pure: ((A, A) -> bool, EditableValue[A]) -> bool
    """
    match x:
        case Editable(saved, modified):
            return not eq(saved, modified)
        case _:
            return False


def is_read_only(x: EditableValue[A]) -> bool:
    return isinstance(x, ReadOnly)


def is_editable(x: EditableValue[A]) -> bool:
    return isinstance(x, Editable)
