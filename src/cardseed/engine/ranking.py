"""Lehmer-code ranking of partial permutations of the 52-card pool.

A sequence of ``k`` distinct card ids is a partial permutation of
``range(52)``. Its rank is the mixed-radix number whose digit ``i`` is the
card's index among the ids not yet drawn, with radix ``52 - i``. Ranks of
length-``k`` sequences fill ``[0, P(52, k))`` exactly once each.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from cardseed.engine.errors import DuplicateCardError, ErrorCode, ParseError
from cardseed.utils.cards import DECK_SIZE


def permutation_count(length: int) -> int:
    """Number of ordered, repetition-free draws of ``length`` cards."""
    if not 0 <= length <= DECK_SIZE:
        raise ValueError(f"length must be within [0, {DECK_SIZE}], got {length}")
    return math.perm(DECK_SIZE, length)


def rank_ids(card_ids: Sequence[int]) -> int:
    pool = list(range(DECK_SIZE))
    rank = 0
    for position, card_id in enumerate(card_ids):
        if not 0 <= card_id < DECK_SIZE:
            raise ParseError(
                ErrorCode.INVALID_IDENTIFIER,
                f"card id {card_id} is outside [0, {DECK_SIZE})",
                position=position,
            )
        try:
            digit = pool.index(card_id)
        except ValueError:
            raise DuplicateCardError(card_id, position) from None
        del pool[digit]
        rank = rank * (DECK_SIZE - position) + digit
    return rank


def unrank(rank: int, length: int) -> list[int]:
    """Inverse of :func:`rank_ids` for sequences of ``length`` cards."""
    if not 0 <= rank < permutation_count(length):
        raise ValueError(f"rank {rank} out of range for {length} cards")

    digits: list[int] = []
    for position in reversed(range(length)):
        rank, digit = divmod(rank, DECK_SIZE - position)
        digits.append(digit)
    digits.reverse()

    pool = list(range(DECK_SIZE))
    return [pool.pop(digit) for digit in digits]
