"""Saturating arithmetic for counting distinct names.

Counts are clamped at the largest unsigned 128-bit value so that callers
comparing against a fixed ceiling get the same answers no matter how large
the word lists or the requested name length.
"""

from __future__ import annotations

from collections.abc import Iterable

U128_MAX = 2**128 - 1


def saturating_mul(a: int, b: int) -> int:
    return min(a * b, U128_MAX)


def saturating_add(a: int, b: int) -> int:
    return min(a + b, U128_MAX)


def saturating_pow(base: int, exponent: int) -> int:
    if exponent <= 0:
        return 1
    if base <= 1:
        return base
    # base**exponent >= 2**(exponent * floor(log2(base)))
    if exponent * (base.bit_length() - 1) >= 128:
        return U128_MAX
    return min(base**exponent, U128_MAX)


def saturating_sum(values: Iterable[int]) -> int:
    total = 0
    for value in values:
        total = saturating_add(total, value)
    return total


def cardinality(lengths: Iterable[int]) -> int:
    """Saturating product of list lengths.

    An empty product is 0, not 1: asking for no words produces no names.
    """
    total = None
    for length in lengths:
        if length == 0:
            return 0
        total = length if total is None else saturating_mul(total, length)
    return 0 if total is None else total
