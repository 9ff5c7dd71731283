from __future__ import annotations
from itertools import combinations
from math import comb
from typing import List, Sequence, Tuple

from .cards import HAND_SIZE, Card


def five_card_combos(cards: Sequence[Card]) -> List[Tuple[Card, ...]]:
    """
    Every distinct 5-card subset, in input-position order.
    Subsets are combinations, so reordering the input never adds entries.
    """
    if len(cards) < HAND_SIZE:
        return []
    return list(combinations(cards, HAND_SIZE))


def count_combos(n: int) -> int:
    return comb(n, HAND_SIZE) if n >= HAND_SIZE else 0
