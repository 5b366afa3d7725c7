"""Define a generator producing an evenly spaced (arithmetic) sequence of values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pullgen.core import Generator

logger = logging.getLogger(__name__)

NumberT = TypeVar("NumberT")
"""Type of the counted values (must support operator +)."""


@dataclass
class CounterState(Generic[NumberT]):
    """State of an arithmetic sequence: the next value to be produced and the step size."""

    current: NumberT
    step: NumberT

    def advance(self) -> NumberT:
        """Return the current value, then increase it by the step size."""
        value = self.current
        self.current = self.current + self.step
        return value


Counter = Generator[NumberT, CounterState[NumberT]]


def count(start: Any = 0, step: Any = 1) -> Counter:
    """Create a generator that returns evenly spaced values beginning with `start`.

    For example, count(0, 1) yields 0, 1, 2, 3, ... and count(10, 5) yields 10, 15, 20, ...

    The counter provides no protection from overflow or underflow: fixed-width numeric types
        (e.g., numpy.uint8) wrap around according to their own arithmetic.

    :param start: First value produced by the generator (defaults to 0)
    :param step: Difference between consecutive values (defaults to 1)
    :return: Infinite generator over start, start + step, start + 2 * step, ...
    """
    logger.debug(f"Creating counter with start {start!r} and step {step!r}")
    return Generator(CounterState(start, step), CounterState.advance)
