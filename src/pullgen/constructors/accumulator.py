"""Define a generator yielding the running total (prefix sums) of another generator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pullgen.core import Generator

logger = logging.getLogger(__name__)

SummandT = TypeVar("SummandT")
"""Type of the accumulated values (must support operator +)."""


@dataclass
class AccumulatorState(Generic[SummandT]):
    """State of a running accumulation over a source generator owned by this state."""

    source: Generator[SummandT, Any]
    running_total: SummandT | None = None
    """Sum of all values pulled from the source so far (None until the first value arrives)."""

    def advance(self) -> SummandT | None:
        """Pull the next source value and return the updated running total.

        :return: Sum of all source values pulled so far, or None once the source is exhausted
        """
        item = self.source.next_optional()
        if item is None:
            return None

        if self.running_total is None:
            self.running_total = item  # The first total is the source's first value
        else:
            self.running_total = self.running_total + item

        return self.running_total

    def close(self) -> None:
        """Release the source generator owned by this state."""
        self.source.close()


Accumulator = Generator[SummandT, AccumulatorState[SummandT]]


def accumulate(source: Generator[SummandT, Any]) -> Accumulator:
    """Create a generator yielding the running totals of the values from `source`.

    This is a specialization of a fold over a generator using operator +, producing every partial
        sum rather than only the final one. For example:

        accumulator = accumulate(repeat(2))
        accumulator.next_value()  # 2
        accumulator.next_value()  # 4
        accumulator.next_value()  # 6

    The source generator is moved into the accumulator: callers must not pull from it afterwards.

    :param source: Generator whose values are accumulated (ends when the source ends)
    :return: Generator over s0, s0 + s1, s0 + s1 + s2, ... for source values s0, s1, s2, ...
    """
    logger.debug(f"Creating accumulator over source: {source!r}")
    return Generator(AccumulatorState(source), AccumulatorState.advance)
