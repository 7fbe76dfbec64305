"""Word store and the sampling generator built on it.

A `Petnames` holds three word lists, one per role. Names are drawn by
picking one word per role, uniformly and with replacement.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .cardinality import cardinality, saturating_pow
from .generator import Generator
from .non_repeating import NonRepeating
from .roles import Lists, Role
from .words import DEFAULT_SIZE, builtin_list, read_directories, split_words

logger = logging.getLogger(__name__)


@dataclass
class Petnames(Generator):
    """Word lists of adjectives, adverbs and nouns.

    The lists are tuples, so stores built from the built-in data share them
    freely. `retain` narrows a store in place by replacing its tuples.
    """
    adjectives: tuple[str, ...] = field(default_factory=tuple)
    adverbs: tuple[str, ...] = field(default_factory=tuple)
    nouns: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        self.adjectives = tuple(self.adjectives)
        self.adverbs = tuple(self.adverbs)
        self.nouns = tuple(self.nouns)

    # ── Construction ────────────────────────────────────────────

    @classmethod
    def from_text(cls, adjectives: str, adverbs: str, nouns: str) -> Petnames:
        """Build a store from whitespace-separated words. Never fails."""
        return cls(
            adjectives=split_words(adjectives),
            adverbs=split_words(adverbs),
            nouns=split_words(nouns),
        )

    @classmethod
    def builtin(cls, size: str = DEFAULT_SIZE) -> Petnames:
        return cls(
            adjectives=builtin_list(size, "adjectives"),
            adverbs=builtin_list(size, "adverbs"),
            nouns=builtin_list(size, "nouns"),
        )

    @classmethod
    def default(cls) -> Petnames:
        return cls.builtin(DEFAULT_SIZE)

    @classmethod
    def small(cls) -> Petnames:
        return cls.builtin("small")

    @classmethod
    def medium(cls) -> Petnames:
        return cls.builtin("medium")

    @classmethod
    def large(cls) -> Petnames:
        return cls.builtin("large")

    @classmethod
    def from_directories(cls, directories: list[Path]) -> Petnames:
        """Load word lists from one or more directories, concatenated."""
        texts = read_directories(directories)
        return cls.from_text(texts["adjectives"], texts["adverbs"], texts["nouns"])

    # ── Queries ─────────────────────────────────────────────────

    def words_for(self, role: Role) -> tuple[str, ...]:
        return getattr(self, role.value)

    def lists(self, words: int) -> list[tuple[str, ...]]:
        """The word list for each position of a `words`-long name."""
        return [self.words_for(role) for role in Lists(words)]

    def cardinality(self, words: int) -> int:
        """Number of distinct names, saturating at 2**128 - 1.

        Closed form, so huge word counts cost no more than small ones.
        """
        if words <= 0:
            return 0
        if words == 1:
            return cardinality([len(self.nouns)])
        if words == 2:
            return cardinality([len(self.adjectives), len(self.nouns)])
        adverbs = saturating_pow(len(self.adverbs), words - 2)
        return cardinality([adverbs, len(self.adjectives), len(self.nouns)])

    # ── Mutation ────────────────────────────────────────────────

    def retain(self, predicate: Callable[[str], bool]) -> None:
        """Keep only words for which `predicate` is true, in every list."""
        self.adjectives = tuple(word for word in self.adjectives if predicate(word))
        self.adverbs = tuple(word for word in self.adverbs if predicate(word))
        self.nouns = tuple(word for word in self.nouns if predicate(word))
        logger.debug(
            "Retained %d adjectives, %d adverbs, %d nouns",
            len(self.adjectives), len(self.adverbs), len(self.nouns),
        )

    # ── Generation ──────────────────────────────────────────────

    def generate_raw(self, rng: random.Random, words: int) -> list[str] | None:
        # Empty lists are skipped rather than failing the whole name
        name = [
            word_list[rng.randrange(len(word_list))]
            for word_list in self.lists(words)
            if word_list
        ]
        if words > 0 and not name:
            return None
        return name

    def iter_non_repeating(self, rng: random.Random, words: int, separator: str = "-") -> NonRepeating:
        return NonRepeating(self.lists(words), rng, separator)


def petname(words: int, separator: str = "-") -> str | None:
    """Generate one name from the default word lists."""
    return Petnames.default().generate_one(words, separator)
