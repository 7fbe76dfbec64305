"""Shared test fixtures for petname tests."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from petname.src.petnames import Petnames


# ── Random sources ──────────────────────────────────────────────


class StepRandom(random.Random):
    """Deterministic random source that counts up by `increment`.

    Every call to getrandbits returns the current value (masked to the
    requested width) and then steps it. With the defaults, list choices
    mostly land on the first element.
    """

    def __init__(self, initial: int = 0, increment: int = 1):
        super().__init__(0)
        self.value = initial
        self.increment = increment
        self.calls = 0

    def getrandbits(self, k: int) -> int:
        self.calls += 1
        result = self.value % (1 << k)
        self.value += self.increment
        return result

    def random(self) -> float:
        return self.getrandbits(53) * 2**-53


@pytest.fixture
def step_rng():
    """A StepRandom starting at zero, stepping by one."""
    return StepRandom(0, 1)


@pytest.fixture
def rng():
    """A seeded, repeatable random source."""
    return random.Random(42)


# ── Word store fixtures ─────────────────────────────────────────


@pytest.fixture
def single_word_petnames():
    """One word per list, so every name is fully determined."""
    return Petnames.from_text("adjective", "adverb", "noun")


@pytest.fixture
def small_petnames():
    """2 adjectives, 3 adverbs, 2 nouns: 12 three-word names."""
    return Petnames.from_text("a1 a2", "b1 b2 b3", "c1 c2")


@pytest.fixture
def alliterative_petnames():
    return Petnames.from_text("able bold", "burly curly", "ant bee cow")


def write_word_lists(
    directory: Path,
    adjectives: str = "a1 a2",
    adverbs: str = "b1",
    nouns: str | None = "c1 c2 c3",
    legacy_nouns: str | None = None,
) -> Path:
    """Write a word list directory and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "adjectives.txt").write_text(adjectives)
    (directory / "adverbs.txt").write_text(adverbs)
    if nouns is not None:
        (directory / "nouns.txt").write_text(nouns)
    if legacy_nouns is not None:
        (directory / "names.txt").write_text(legacy_nouns)
    return directory


@pytest.fixture
def words_dir(tmp_path):
    """A word list directory with 2 adjectives, 1 adverb and 3 nouns."""
    return write_word_lists(tmp_path / "words")
