from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .cards import ACE_HIGH_VALUE, HAND_SIZE, Card, RankOrder, rank_value, sort_key


def sort_descending(cards: Sequence[Card], order: RankOrder = RankOrder.ACE_HIGH) -> List[Card]:
    return sorted(cards, key=sort_key(order))


def suit_histogram(cards: Sequence[Card]) -> Dict[str, int]:
    d: Dict[str, int] = {}
    for c in cards:
        d[c.suit] = d.get(c.suit, 0) + 1
    return d


def _rank_counts(cards: Sequence[Card]) -> Dict[str, int]:
    d: Dict[str, int] = {}
    for c in cards:
        d[c.rank] = d.get(c.rank, 0) + 1
    return d


def rank_histogram_sorted(cards: Sequence[Card]) -> List[int]:
    # quads -> [4, 1], full house -> [3, 2], two pair -> [2, 2, 1]
    return sorted(_rank_counts(cards).values(), reverse=True)


def rank_histogram_by_rank(cards: Sequence[Card]) -> List[Tuple[str, int]]:
    """(rank, count) pairs ordered by ace-high rank value, highest first."""
    counts = _rank_counts(cards)
    return sorted(counts.items(), key=lambda kv: ACE_HIGH_VALUE[kv[0]], reverse=True)


def gaps(cards: Sequence[Card], order: RankOrder = RankOrder.ACE_HIGH) -> List[int]:
    srt = sort_descending(cards, order)
    return [rank_value(srt[i], order) - rank_value(srt[i + 1], order) for i in range(len(srt) - 1)]


def distance(cards: Sequence[Card], order: RankOrder = RankOrder.ACE_HIGH) -> int:
    if not cards:
        return 0
    vals = [rank_value(c, order) for c in cards]
    return max(vals) - min(vals)


@dataclass(frozen=True, slots=True)
class HandShape:
    """
    Everything the classifier reads about one 5-card hand, computed once.
    high / low are the hand sorted descending under ace-high and ace-low order.
    """
    cards: Tuple[Card, ...]
    high: Tuple[Card, ...]
    low: Tuple[Card, ...]
    suit_counts: Dict[str, int]
    rank_counts: Dict[str, int]
    count_pattern: Tuple[int, ...]
    by_rank: Tuple[Tuple[str, int], ...]

    @staticmethod
    def of(cards: Sequence[Card]) -> "HandShape":
        if len(cards) != HAND_SIZE:
            raise ValueError("HandShape expects exactly 5 cards")
        return HandShape(
            cards=tuple(cards),
            high=tuple(sort_descending(cards, RankOrder.ACE_HIGH)),
            low=tuple(sort_descending(cards, RankOrder.ACE_LOW)),
            suit_counts=suit_histogram(cards),
            rank_counts=_rank_counts(cards),
            count_pattern=tuple(rank_histogram_sorted(cards)),
            by_rank=tuple(rank_histogram_by_rank(cards)),
        )

    def sorted_by(self, order: RankOrder) -> Tuple[Card, ...]:
        return self.high if order == RankOrder.ACE_HIGH else self.low

    def slices(self, order: RankOrder) -> Tuple[Tuple[Card, ...], Tuple[Card, ...]]:
        """First-four and last-four of the hand sorted under `order`."""
        srt = self.sorted_by(order)
        return srt[:4], srt[1:]
