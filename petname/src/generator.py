"""Generator interface shared by `Petnames` and `Alliterations`."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Iterator

logger = logging.getLogger(__name__)


class Generator(ABC):
    """Base interface for petname generators.

    Subclasses supply `generate_raw` along with counting and enumeration;
    the other generation methods are built on `generate_raw`. The random
    source is always supplied by the caller: anything with the
    `random.Random` API.
    """

    @abstractmethod
    def generate_raw(self, rng: random.Random, words: int) -> list[str] | None:
        """Draw the words for one name, in name order.

        Returns [] when no words are requested, or None when words were
        requested but every word list involved is empty.
        """
        ...

    @abstractmethod
    def cardinality(self, words: int) -> int:
        """Count of distinct `words`-long names this generator can produce."""
        ...

    @abstractmethod
    def iter_non_repeating(self, rng: random.Random, words: int, separator: str = "-") -> Iterator[str]:
        """Every distinct name exactly once, in random order, then stop."""
        ...

    def generate(self, rng: random.Random, words: int, separator: str = "-") -> str | None:
        """Generate a single name, or None if no name can be produced."""
        parts = self.generate_raw(rng, words)
        if parts is None:
            return None
        return separator.join(parts)

    def generate_one(self, words: int, separator: str = "-") -> str | None:
        """Generate a single name using a freshly seeded random source."""
        return self.generate(random.Random(), words, separator)

    def iter(self, rng: random.Random, words: int, separator: str = "-") -> Iterator[str]:
        """Yield names forever, drawing from `rng` each time.

        Duplicates are likely. Stops straight away if no name can be
        produced, including when no words are requested (unlike
        `generate(rng, 0)`, which returns "").
        """
        if words <= 0:
            return
        while True:
            name = self.generate(rng, words, separator)
            if name is None:
                logger.debug("No name can be generated with %d words; stopping", words)
                return
            yield name
