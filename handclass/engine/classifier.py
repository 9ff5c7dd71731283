from __future__ import annotations
from dataclasses import astuple, dataclass, fields
from typing import Dict, Tuple

from handclass.helpers.analysis import HandShape, distance
from handclass.helpers.cards import RankOrder

ROYAL_RANKS = frozenset("AKQJT")


@dataclass(frozen=True, slots=True)
class HandFlags:
    """One boolean per category. Field order is the canonical category order."""
    royal_flush: bool = False
    straight_flush: bool = False
    four_of_a_kind: bool = False
    full_house: bool = False
    flush: bool = False
    straight: bool = False
    three_of_a_kind: bool = False
    two_pair: bool = False
    pair: bool = False

    top_pair: bool = False
    middle_pair: bool = False
    bottom_pair: bool = False

    top_and_middle_pair: bool = False
    top_and_bottom_pair: bool = False
    middle_and_bottom_pair: bool = False

    top_three_of_a_kind: bool = False
    middle_three_of_a_kind: bool = False
    bottom_three_of_a_kind: bool = False

    flush_draw: bool = False
    backdoor_flush_draw: bool = False
    open_ended_straight_draw: bool = False
    inside_straight_draw: bool = False
    straight_draw: bool = False

    # auxiliary ace-low variants
    straight_wheel: bool = False
    open_ended_straight_draw_wheel: bool = False
    inside_straight_draw_wheel: bool = False

    high_card: bool = False

    def as_dict(self) -> Dict[str, bool]:
        return dict(zip(CATEGORIES, astuple(self)))

    def true_categories(self) -> Tuple[str, ...]:
        return tuple(name for name, v in zip(CATEGORIES, astuple(self)) if v)


CATEGORIES: Tuple[str, ...] = tuple(f.name for f in fields(HandFlags))

MADE_HANDS: Tuple[str, ...] = (
    "royal_flush",
    "straight_flush",
    "four_of_a_kind",
    "full_house",
    "flush",
    "straight",
    "three_of_a_kind",
    "two_pair",
    "pair",
    "high_card",
)


def external_name(category: str) -> str:
    """'top_and_middle_pair' -> 'isTopAndMiddlePair'"""
    return "is" + "".join(w.capitalize() for w in category.split("_"))


def _has_draw_slice(shape: HandShape, order: RankOrder, dist: int) -> bool:
    first, last = shape.slices(order)
    return distance(first, order) == dist or distance(last, order) == dist


def classify(shape: HandShape) -> HandFlags:
    """
    Derive every category flag for one 5-card hand in dependency order.
    No strict-mode filtering happens here; overlapping flags (a royal flush is
    also a flush and a straight) are all reported.
    """
    h = list(shape.count_pattern)

    # made hands by rank multiplicity
    four_of_a_kind = h == [4, 1]
    full_house = h == [3, 2]
    three_of_a_kind = h == [3, 1, 1]
    two_pair = h == [2, 2, 1]
    pair = h == [2, 1, 1, 1]
    paired = pair or two_pair or three_of_a_kind or full_house or four_of_a_kind

    flush = any(n == 5 for n in shape.suit_counts.values())

    straight_wheel = (not paired) and distance(shape.cards, RankOrder.ACE_LOW) == 4
    straight = (not paired) and (distance(shape.cards, RankOrder.ACE_HIGH) == 4 or straight_wheel)

    royal_flush = flush and straight and ROYAL_RANKS <= set(shape.rank_counts)
    straight_flush = flush and straight and not royal_flush

    # positional: top / bottom read the ace-high sorted hand, middle reads by_rank
    top_rank = shape.high[0].rank
    bottom_rank = shape.high[-1].rank
    by_rank = shape.by_rank

    top_pair = pair and shape.rank_counts[top_rank] == 2
    middle_pair = pair and not two_pair and len(by_rank) == 4 and (by_rank[1][1] == 2 or by_rank[2][1] == 2)
    bottom_pair = pair and shape.rank_counts[bottom_rank] == 2

    top_and_middle_pair = two_pair and by_rank[0][1] == 2 and by_rank[1][1] == 2
    top_and_bottom_pair = two_pair and by_rank[0][1] == 2 and by_rank[-1][1] == 2
    middle_and_bottom_pair = two_pair and len(by_rank) == 3 and by_rank[1][1] == 2 and by_rank[2][1] == 2

    top_three_of_a_kind = three_of_a_kind and shape.rank_counts[top_rank] == 3
    middle_three_of_a_kind = three_of_a_kind and len(by_rank) == 3 and by_rank[1][1] == 3
    bottom_three_of_a_kind = three_of_a_kind and shape.rank_counts[bottom_rank] == 3

    # flush draws
    flush_draw = (not flush) and any(n == 4 for n in shape.suit_counts.values())
    backdoor_flush_draw = (not flush) and (not flush_draw) and any(n == 3 for n in shape.suit_counts.values())

    # straight draws: the wheel variants carry their own made-hand guard
    wheel_blocked = paired or straight_wheel
    open_ended_straight_draw_wheel = (not wheel_blocked) and _has_draw_slice(shape, RankOrder.ACE_LOW, 3)
    inside_straight_draw_wheel = (not wheel_blocked) and _has_draw_slice(shape, RankOrder.ACE_LOW, 4)

    # a paired hand or a made straight still falls back to the wheel check
    if paired or straight:
        open_ended_straight_draw = open_ended_straight_draw_wheel
        inside_straight_draw = inside_straight_draw_wheel
    else:
        open_ended_straight_draw = _has_draw_slice(shape, RankOrder.ACE_HIGH, 3) or open_ended_straight_draw_wheel
        inside_straight_draw = _has_draw_slice(shape, RankOrder.ACE_HIGH, 4) or inside_straight_draw_wheel
    straight_draw = open_ended_straight_draw or inside_straight_draw

    high_card = not (paired or flush or straight)

    return HandFlags(
        royal_flush=royal_flush,
        straight_flush=straight_flush,
        four_of_a_kind=four_of_a_kind,
        full_house=full_house,
        flush=flush,
        straight=straight,
        three_of_a_kind=three_of_a_kind,
        two_pair=two_pair,
        pair=pair,
        top_pair=top_pair,
        middle_pair=middle_pair,
        bottom_pair=bottom_pair,
        top_and_middle_pair=top_and_middle_pair,
        top_and_bottom_pair=top_and_bottom_pair,
        middle_and_bottom_pair=middle_and_bottom_pair,
        top_three_of_a_kind=top_three_of_a_kind,
        middle_three_of_a_kind=middle_three_of_a_kind,
        bottom_three_of_a_kind=bottom_three_of_a_kind,
        flush_draw=flush_draw,
        backdoor_flush_draw=backdoor_flush_draw,
        open_ended_straight_draw=open_ended_straight_draw,
        inside_straight_draw=inside_straight_draw,
        straight_draw=straight_draw,
        straight_wheel=straight_wheel,
        open_ended_straight_draw_wheel=open_ended_straight_draw_wheel,
        inside_straight_draw_wheel=inside_straight_draw_wheel,
        high_card=high_card,
    )
