from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, List, Sequence, Tuple, Union

from .errors import (
    DuplicateCardError,
    InvalidRankError,
    InvalidSuitError,
    MalformedCardError,
    NotASequenceError,
    TooFewCardsError,
)

RANKS = "23456789TJQKA"
SUITS = "shdc"
HAND_SIZE = 5

ACE_HIGH_VALUE = {r: i + 1 for i, r in enumerate(RANKS)}          # 2..A => 1..13
ACE_LOW_VALUE = {r: i + 1 for i, r in enumerate("A23456789TJQK")}  # A..K => 1..13
SUIT_INDEX = {s: i for i, s in enumerate(SUITS)}


class RankOrder(IntEnum):
    ACE_HIGH = 0
    ACE_LOW = 1  # wheel


_VALUES = {
    RankOrder.ACE_HIGH: ACE_HIGH_VALUE,
    RankOrder.ACE_LOW: ACE_LOW_VALUE,
}


@dataclass(frozen=True, slots=True)
class Card:
    rank: str
    suit: str

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def value(self, order: RankOrder = RankOrder.ACE_HIGH) -> int:
        return _VALUES[order][self.rank]

    @staticmethod
    def from_str(s: str, index: int = 0) -> "Card":
        """
        Parse a two-character token like "As" or "Td".
        Everything but the last character is the rank, so "10s" is rejected
        as an unknown rank rather than read as a ten.
        """
        if not isinstance(s, str) or len(s) < 2:
            raise MalformedCardError(f"Card at index {index} has invalid format: {s!r}")
        rank, suit = s[:-1], s[-1]
        if rank not in ACE_HIGH_VALUE:
            raise InvalidRankError(f'Card at index {index} has invalid rank: "{rank}"')
        if suit not in SUIT_INDEX:
            raise InvalidSuitError(f'Card at index {index} has invalid suit: "{suit}"')
        return Card(rank, suit)


def rank_value(card: Card, order: RankOrder = RankOrder.ACE_HIGH) -> int:
    return _VALUES[order][card.rank]


def sort_key(order: RankOrder = RankOrder.ACE_HIGH) -> Callable[[Card], Tuple[int, int]]:
    """Descending-by-rank key; equal ranks fall back to suit order s, h, d, c."""
    values = _VALUES[order]
    return lambda c: (-values[c.rank], SUIT_INDEX[c.suit])


def parse_cards(cards: Sequence[Union[str, Card]], min_cards: int = HAND_SIZE) -> List[Card]:
    if isinstance(cards, str) or not isinstance(cards, (list, tuple)):
        raise NotASequenceError("Cards must be a list or tuple of card strings")
    if len(cards) < min_cards:
        raise TooFewCardsError(f"Expected at least {min_cards} cards, received {len(cards)}")

    out: List[Card] = []
    seen = set()
    for i, x in enumerate(cards):
        if isinstance(x, Card):
            token = str(x)
        elif isinstance(x, str):
            token = x
        else:
            raise MalformedCardError(f"Card at index {i} must be a string")
        if len(token) < 2:
            raise MalformedCardError(f"Card at index {i} has invalid format: {token!r}")
        if token in seen:
            raise DuplicateCardError(f'Duplicate card found: "{token}"')
        seen.add(token)
        out.append(Card.from_str(token, i))
    return out


def format_cards(cards: Iterable[Card]) -> List[str]:
    return [str(c) for c in cards]


def make_deck(exclude: Iterable[Card] = ()) -> List[Card]:
    dead = set(exclude)
    deck = [Card(r, s) for r in RANKS for s in SUITS]
    return [c for c in deck if c not in dead]
