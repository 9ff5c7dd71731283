from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Sequence, Tuple

from handclass.helpers.analysis import HandShape, distance, gaps, sort_descending
from handclass.helpers.cards import Card, RankOrder, format_cards

from .classifier import CATEGORIES, HandFlags, external_name

CardTuple = Tuple[Card, ...]

_SEARCH_ORDER = (RankOrder.ACE_HIGH, RankOrder.ACE_LOW)


def _of_rank_count(shape: HandShape, count: int) -> CardTuple:
    ranks = {r for r, n in shape.rank_counts.items() if n == count}
    return tuple(c for c in shape.high if c.rank in ranks)


def _of_suit_count(shape: HandShape, count: int) -> CardTuple:
    suits = [s for s, n in shape.suit_counts.items() if n == count]
    if not suits:
        return ()
    return tuple(c for c in shape.high if c.suit == suits[0])


def straight_cards(shape: HandShape) -> CardTuple:
    """The five cards of a straight, in whichever order runs in steps of one."""
    for order in _SEARCH_ORDER:
        if all(g == 1 for g in gaps(shape.cards, order)):
            return shape.sorted_by(order)
    return ()


def draw_cards(shape: HandShape, distances: Tuple[int, ...], orders=_SEARCH_ORDER) -> CardTuple:
    """
    First four-card slice whose rank distance is in `distances`, checking the
    first-four then last-four slice of each order in turn.
    """
    for order in orders:
        for part in shape.slices(order):
            if distance(part, order) in distances:
                return part
    return ()


_RULES: Dict[str, Callable[[HandShape], CardTuple]] = {
    "royal_flush": lambda s: s.high,
    "straight_flush": lambda s: s.high,
    "four_of_a_kind": lambda s: _of_rank_count(s, 4),
    "full_house": lambda s: s.high,
    "flush": lambda s: _of_suit_count(s, 5),
    "straight": straight_cards,
    "three_of_a_kind": lambda s: _of_rank_count(s, 3),
    "two_pair": lambda s: _of_rank_count(s, 2),
    "pair": lambda s: _of_rank_count(s, 2),
    "top_pair": lambda s: _of_rank_count(s, 2),
    "middle_pair": lambda s: _of_rank_count(s, 2),
    "bottom_pair": lambda s: _of_rank_count(s, 2),
    "top_and_middle_pair": lambda s: _of_rank_count(s, 2),
    "top_and_bottom_pair": lambda s: _of_rank_count(s, 2),
    "middle_and_bottom_pair": lambda s: _of_rank_count(s, 2),
    "top_three_of_a_kind": lambda s: _of_rank_count(s, 3),
    "middle_three_of_a_kind": lambda s: _of_rank_count(s, 3),
    "bottom_three_of_a_kind": lambda s: _of_rank_count(s, 3),
    "flush_draw": lambda s: _of_suit_count(s, 4),
    "backdoor_flush_draw": lambda s: _of_suit_count(s, 3),
    "straight_wheel": straight_cards,
    "open_ended_straight_draw_wheel": lambda s: draw_cards(s, (3,), (RankOrder.ACE_LOW,)),
    "inside_straight_draw_wheel": lambda s: draw_cards(s, (4,), (RankOrder.ACE_LOW,)),
    "high_card": lambda s: (),
}

# main straight draws: slice distances accepted per category
_DRAW_DISTANCES: Dict[str, Tuple[int, ...]] = {
    "open_ended_straight_draw": (3,),
    "inside_straight_draw": (4,),
    "straight_draw": (3, 4),
}


def draw_orders(flags: HandFlags) -> Tuple[RankOrder, ...]:
    """
    Rank orders whose slices can back a main straight-draw flag.
    A paired hand or a made straight only gets its draws from the ace-low check.
    """
    paired = flags.pair or flags.two_pair or flags.three_of_a_kind or flags.full_house or flags.four_of_a_kind
    if paired or flags.straight:
        return (RankOrder.ACE_LOW,)
    return _SEARCH_ORDER


def kicker_cards(shape: HandShape, key: CardTuple) -> CardTuple:
    if not key:
        return ()
    used = set(key)
    return tuple(c for c in shape.high if c not in used)


def extract_evidence(shape: HandShape, flags: HandFlags) -> Tuple[Dict[str, CardTuple], Dict[str, CardTuple]]:
    """
    Build key-card and kicker-card maps for every category.
    A false flag gets empty evidence. high_card never has key cards; its
    kickers are the whole hand when it holds.
    """
    truth = flags.as_dict()
    orders = draw_orders(flags)
    keys: Dict[str, CardTuple] = {}
    kickers: Dict[str, CardTuple] = {}
    for name in CATEGORIES:
        if not truth[name]:
            key = ()
        elif name in _DRAW_DISTANCES:
            key = draw_cards(shape, _DRAW_DISTANCES[name], orders)
        else:
            key = _RULES[name](shape)
        keys[name] = key
        if name == "high_card":
            kickers[name] = shape.high if truth[name] else ()
        else:
            kickers[name] = kicker_cards(shape, key)
    return keys, kickers


@dataclass(frozen=True)
class HandEvaluation:
    cards: CardTuple
    flags: HandFlags
    key_cards: Dict[str, CardTuple]
    kicker_cards: Dict[str, CardTuple]

    @property
    def key(self) -> str:
        return hand_key(self.cards)

    def to_dict(self) -> Dict[str, Any]:
        """External shape: isXxx booleans plus keyCards / kickerCards maps of card strings."""
        out: Dict[str, Any] = {external_name(k): v for k, v in self.flags.as_dict().items()}
        out["keyCards"] = {external_name(k): format_cards(v) for k, v in self.key_cards.items()}
        out["kickerCards"] = {external_name(k): format_cards(v) for k, v in self.kicker_cards.items()}
        return out


def hand_key(cards: Sequence[Card]) -> str:
    """'As, Ah, Kd, Kc, Qs': ace-high order, equal ranks by suit, comma-space joined."""
    return ", ".join(format_cards(sort_descending(cards)))


def build_evaluation(shape: HandShape, flags: HandFlags) -> HandEvaluation:
    keys, kickers = extract_evidence(shape, flags)
    return HandEvaluation(cards=shape.high, flags=flags, key_cards=keys, kicker_cards=kickers)
