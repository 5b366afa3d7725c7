"""Define a generator that repeats a single value forever."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from pullgen.core import Generator

ValueT = TypeVar("ValueT")
"""Type of the repeated value."""


@dataclass(frozen=True)
class RepeaterState(Generic[ValueT]):
    """State of a constant sequence; never modified after construction."""

    value: ValueT

    def advance(self) -> ValueT:
        """Return the repeated value."""
        return self.value


Repeater = Generator[ValueT, RepeaterState[ValueT]]


def repeat(value: ValueT) -> Repeater:
    """Create a generator that infinitely repeats the given value.

    For example, repeat(7) yields 7, 7, 7, 7, ...
    """
    if value is None:
        raise ValueError("Cannot repeat None because None signals the end of a sequence.")

    return Generator(RepeaterState(value), RepeaterState.advance)
