"""Define a generator that replays a finite sequence of items forever."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from pullgen.core import Generator

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")
"""Type of the items in the cycled sequence."""


@dataclass
class CyclerState(Generic[ItemT]):
    """State of a cyclic replay over a borrowed, read-only sequence of items.

    The sequence is referenced rather than copied: it must outlive the generator and must not
        be modified elsewhere while the generator is in use.
    """

    data: Sequence[ItemT]
    index: int = 0
    """Number of items produced so far (the next item is at `index % len(data)`)."""

    def advance(self) -> ItemT:
        """Return the item at the current position, then move to the next position."""
        item = self.data[self.index % len(self.data)]
        self.index += 1
        return item


Cycler = Generator[ItemT, CyclerState[ItemT]]


def cycle(items: Sequence[ItemT]) -> Cycler:
    """Create a generator replaying the given items indefinitely.

    For example, cycle("abc") yields 'a', 'b', 'c', 'a', 'b', 'c', ...

    The generator does not take ownership of `items`; the caller must keep the sequence alive and
        unmodified for as long as the generator is used.

    :param items: Non-empty sequence of (non-None) items to be replayed
    :return: Infinite generator cycling over the items
    :raises ValueError: If the given sequence is empty or contains None
    """
    if len(items) == 0:
        raise ValueError(f"Cannot cycle over an empty sequence: {items!r}.")
    if any(item is None for item in items):
        raise ValueError("Cannot cycle over None because None signals the end of a sequence.")

    logger.debug(f"Creating cycler over {len(items)} items")
    return Generator(CyclerState(items), CyclerState.advance)
