"""Alliterative names: every word starts with the same letter.

Word lists are split into groups by first letter. Generating picks one group
at random and draws the whole name from it.
"""

from __future__ import annotations

import logging
import random
from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .cardinality import saturating_sum
from .generator import Generator
from .non_repeating import NonRepeatingGroups
from .petnames import Petnames

logger = logging.getLogger(__name__)


def _by_first_letter(words: Iterable[str]) -> dict[str, list[str]]:
    buckets: dict[str, list[str]] = defaultdict(list)
    for word in words:
        if word:
            buckets[word[0]].append(word)
    return buckets


@dataclass
class Alliterations(Generator):
    """Mapping of first letter → `Petnames` holding only words with that letter."""
    groups: dict[str, Petnames] = field(default_factory=dict)

    @classmethod
    def from_petnames(cls, petnames: Petnames) -> Alliterations:
        adjectives = _by_first_letter(petnames.adjectives)
        adverbs = _by_first_letter(petnames.adverbs)
        nouns = _by_first_letter(petnames.nouns)
        # Every name ends with a noun, so only letters with nouns get a group.
        groups = {
            letter: Petnames(
                adjectives=adjectives.get(letter, ()),
                adverbs=adverbs.get(letter, ()),
                nouns=nouns[letter],
            )
            for letter in sorted(nouns)
        }
        logger.debug("Grouped word lists into %d alliteration groups", len(groups))
        return cls(groups=groups)

    @classmethod
    def default(cls) -> Alliterations:
        return cls.from_petnames(Petnames.default())

    def __len__(self) -> int:
        return len(self.groups)

    def __contains__(self, letter: object) -> bool:
        return letter in self.groups

    def __getitem__(self, letter: str) -> Petnames:
        return self.groups[letter]

    def retain(self, predicate: Callable[[str, Petnames], bool]) -> None:
        """Keep only the groups for which `predicate(letter, group)` is true."""
        self.groups = {
            letter: group for letter, group in self.groups.items() if predicate(letter, group)
        }

    def cardinality(self, words: int) -> int:
        return saturating_sum(group.cardinality(words) for group in self.groups.values())

    def generate_raw(self, rng: random.Random, words: int) -> list[str] | None:
        if words <= 0:
            return []
        if not self.groups:
            return None
        group = rng.choice(list(self.groups.values()))
        return group.generate_raw(rng, words)

    def iter_non_repeating(self, rng: random.Random, words: int, separator: str = "-") -> NonRepeatingGroups:
        """Every distinct alliterative name exactly once, group by group."""
        groups = list(self.groups.values())
        rng.shuffle(groups)
        return NonRepeatingGroups(
            [group.iter_non_repeating(rng, words, separator) for group in groups]
        )
