"""Define a generic "pull" generator coupling a state with a transition function.

A generator is advanced one step at a time by one of its retrieval methods:

    next() - Returns a YieldResult: Yielded(value), or END once the sequence is exhausted
    next_value() - Returns the value, or raises EndOfIteration once the sequence is exhausted
    next_optional() - Returns the value, or None once the sequence is exhausted

Every retrieval mutates the state in place through exactly one call to the transition function,
so the three modes are interchangeable views of the same underlying step.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Callable, Generic, Optional, TypeVar

from typing_extensions import Self

from pullgen.core.errors import EndOfIteration
from pullgen.core.yield_result import END, YieldResult, Yielded

logger = logging.getLogger(__name__)

YieldT = TypeVar("YieldT")
"""Type of the values produced by a generator."""

StateT = TypeVar("StateT")
"""Type of the mutable state advanced by a generator's transition function."""

TransitionFunction = Callable[[StateT], Optional[YieldT]]
"""Function that advances a state in place and returns the next value (None when exhausted)."""


class Generator(Generic[YieldT, StateT]):
    """A lazily evaluated sequence of values defined by a state and a transition function.

    The generator exclusively owns its state: no other object should mutate the state while the
        generator is in use. Because None signals exhaustion, None is never produced as a value.

    Generators are not thread-safe; each retrieval assumes exclusive access to the state.
    """

    def __init__(self, initial_state: StateT, transition: TransitionFunction) -> None:
        """Initialize the generator from an initial state and a transition function.

        :param initial_state: State owned by the generator and advanced on each retrieval
        :param transition: Function advancing the state and returning a value (or None if done)
        """
        self.state = initial_state
        self._transition = transition

        self._exhausted = False
        self._closed = False
        self._yield_count = 0
        """Number of values produced by the generator so far."""

    def __repr__(self) -> str:
        """Return a debug representation showing the generator's state and transition."""
        name = getattr(self._transition, "__qualname__", repr(self._transition))
        return f"Generator(state={self.state!r}, transition={name})"

    @property
    def transition(self) -> TransitionFunction:
        """Retrieve the transition function fixed when the generator was constructed."""
        return self._transition

    @property
    def exhausted(self) -> bool:
        """Check whether the generator has signaled the end of its sequence."""
        return self._exhausted

    @property
    def yield_count(self) -> int:
        """Retrieve the number of values the generator has produced."""
        return self._yield_count

    def _step(self) -> YieldT | None:
        """Advance the state once and return the produced value, or None if exhausted."""
        if self._exhausted:
            return None  # Never resurrect a generator after it has ended

        value = self._transition(self.state)
        if value is None:
            self._exhausted = True
            logger.debug(f"Generator exhausted after {self._yield_count} values: {self!r}")
            return None

        self._yield_count += 1
        return value

    def next(self) -> YieldResult[YieldT]:
        """Pull the next value from the generator as a tri-state result.

        :return: Yielded(value) if a value was produced, otherwise END
        """
        value = self._step()
        if value is None:
            return END
        return Yielded(value)

    def next_value(self) -> YieldT:
        """Pull the next value from the generator.

        :return: Next value produced by the generator
        :raises EndOfIteration: If the generator's sequence is exhausted
        """
        value = self._step()
        if value is None:
            raise EndOfIteration(f"Generator has no more values: {self!r}")
        return value

    def next_optional(self) -> YieldT | None:
        """Pull the next value from the generator, or None if the sequence is exhausted."""
        return self._step()

    def __iter__(self) -> Self:
        """Return the generator itself, providing an Iterator over its values."""
        return self

    def __next__(self) -> YieldT:
        """Return the next value, raising StopIteration when the sequence is exhausted.

        Reference: https://docs.python.org/3/library/stdtypes.html#iterator.__next__
        """
        value = self._step()
        if value is None:
            raise StopIteration
        return value

    def close(self) -> None:
        """Release the generator's state and mark the generator as exhausted.

        The state is released only if it provides a callable `close()` method; states without one
            hold nothing that needs to be released. Closing more than once has no further effect.
        """
        if self._closed:
            return

        release = getattr(self.state, "close", None)
        if callable(release):
            logger.debug(f"Releasing generator state: {self.state!r}")
            release()

        self._exhausted = True
        self._closed = True

    def __enter__(self) -> Self:
        """Provide a context in which the generator is used and then closed."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        """Close the generator upon exiting the context."""
        self.close()
