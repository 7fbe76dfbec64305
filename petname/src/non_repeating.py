"""Enumerate every name exactly once, in random order, without storing them.

Each name position gets its own shuffled copy of its word list followed by a
cycle-end marker. The positions then behave like the wheels of an odometer:
the first word of the name turns fastest, and each time a wheel passes its
marker it carries into the next (slower) wheel. When the slowest wheel
carries, every combination has been produced once and enumeration stops for
good. Memory is the sum of the list sizes, never the size of the product.
"""

from __future__ import annotations

import logging
import math
import random
import sys
from collections.abc import Sequence

logger = logging.getLogger(__name__)

_CYCLE_END = None


class _Wheel:
    """One odometer position: a shuffled word list cycled forever."""

    def __init__(self, words: Sequence[str], rng: random.Random):
        self.slots: list[str | None] = list(words)
        rng.shuffle(self.slots)
        self.slots.append(_CYCLE_END)
        self.index = 0
        self.word: str | None = None

    def turn(self) -> str | None:
        slot = self.slots[self.index]
        self.index = (self.index + 1) % len(self.slots)
        return slot


class NonRepeating:
    """Iterator producing every combination of `lists` exactly once.

    `lists` are in name order. If any list is empty, or there are no lists,
    nothing is produced.
    """

    def __init__(self, lists: Sequence[Sequence[str]], rng: random.Random, separator: str = "-"):
        self.separator = separator
        if lists and all(lists):
            self._remaining = math.prod(len(words) for words in lists)
            self._wheels = [_Wheel(words, rng) for words in lists]
        else:
            self._remaining = 0
            self._wheels = []
        self._exhausted = self._remaining == 0

    @property
    def remaining(self) -> int:
        """Exact number of names still to come."""
        return self._remaining

    def __iter__(self) -> NonRepeating:
        return self

    def __next__(self) -> str:
        if self._exhausted:
            raise StopIteration

        carry = True
        for wheel in self._wheels:
            if not carry and wheel.word is not None:
                break
            word = wheel.turn()
            if word is _CYCLE_END:
                word = wheel.turn()
                carry = True
            else:
                carry = False
            wheel.word = word

        if carry:
            # The slowest wheel wrapped: every combination has been seen.
            self._exhausted = True
            self._remaining = 0
            logger.debug("Enumeration of %d-word names exhausted", len(self._wheels))
            raise StopIteration

        self._remaining -= 1
        return self.separator.join(wheel.word for wheel in self._wheels)

    def __length_hint__(self) -> int:
        return min(self._remaining, sys.maxsize)


class NonRepeatingGroups:
    """Runs several `NonRepeating` iterators one after the other."""

    def __init__(self, iterators: Sequence[NonRepeating]):
        self._iterators = list(iterators)

    @property
    def remaining(self) -> int:
        return sum(iterator.remaining for iterator in self._iterators)

    def __iter__(self) -> NonRepeatingGroups:
        return self

    def __next__(self) -> str:
        while self._iterators:
            try:
                return next(self._iterators[0])
            except StopIteration:
                self._iterators.pop(0)
        raise StopIteration

    def __length_hint__(self) -> int:
        return min(self.remaining, sys.maxsize)
