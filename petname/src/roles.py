"""Which word list supplies each position of a name.

Names are adverbs all the way, finishing with an adjective then a noun:

    1 word   -> noun
    2 words  -> adjective noun
    N words  -> adverb * (N - 2), adjective, noun
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    """A word list, named after the matching `Petnames` attribute."""
    ADVERB = "adverbs"
    ADJECTIVE = "adjectives"
    NOUN = "nouns"


# ── States ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Adverb:
    remaining: int  # adverbs still to come after this one


@dataclass(frozen=True)
class Adjective:
    pass


@dataclass(frozen=True)
class Noun:
    pass


@dataclass(frozen=True)
class Done:
    pass


State = Adverb | Adjective | Noun | Done


def initial_state(words: int) -> State:
    if words <= 0:
        return Done()
    if words == 1:
        return Noun()
    if words == 2:
        return Adjective()
    return Adverb(words - 3)


def advance(state: State) -> State:
    match state:
        case Adverb(remaining=0):
            return Adjective()
        case Adverb(remaining=remaining):
            return Adverb(remaining - 1)
        case Adjective():
            return Noun()
        case _:
            return Done()


def role_of(state: State) -> Role | None:
    match state:
        case Adverb():
            return Role.ADVERB
        case Adjective():
            return Role.ADJECTIVE
        case Noun():
            return Role.NOUN
        case _:
            return None


def remaining(state: State) -> int:
    """Number of roles left to yield, counting the current state."""
    match state:
        case Adverb(remaining=count):
            return count + 3
        case Adjective():
            return 2
        case Noun():
            return 1
        case _:
            return 0


# ── Iterator ────────────────────────────────────────────────────


class Lists:
    """Iterator over the roles of a `words`-long name, in name order.

    Finite and single-use; build a new one to start again.
    """

    def __init__(self, words: int):
        self.state = initial_state(words)

    def __iter__(self) -> Lists:
        return self

    def __next__(self) -> Role:
        role = role_of(self.state)
        if role is None:
            raise StopIteration
        self.state = advance(self.state)
        return role

    def __len__(self) -> int:
        return remaining(self.state)

    def __length_hint__(self) -> int:
        return remaining(self.state)
