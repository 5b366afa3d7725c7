"""Define the two-variant result returned when pulling a value from a generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

YieldT = TypeVar("YieldT")
"""Type of the values produced by a generator."""


@dataclass(frozen=True)
class Yielded(Generic[YieldT]):
    """A value was produced by the generator."""

    value: YieldT


@dataclass(frozen=True)
class End:
    """The generator's sequence has ended."""


END = End()
"""Shared instance of the end-of-sequence signal (all End instances compare equal)."""

YieldResult = Union[Yielded[YieldT], End]
"""Result of a single tri-state retrieval: either Yielded(value) or End."""
