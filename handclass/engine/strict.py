from __future__ import annotations
from dataclasses import replace
from typing import Dict, Optional

from .classifier import MADE_HANDS
from .evidence import HandEvaluation

STRENGTH: Dict[str, int] = {
    "royal_flush": 10,
    "straight_flush": 9,
    "four_of_a_kind": 8,
    "full_house": 7,
    "flush": 6,
    "straight": 5,
    "three_of_a_kind": 4,
    "two_pair": 3,
    "pair": 2,
    "high_card": 1,
}

PAIR_POSITIONS = ("top_pair", "middle_pair", "bottom_pair")
TWO_PAIR_POSITIONS = ("top_and_middle_pair", "top_and_bottom_pair", "middle_and_bottom_pair")
TRIPS_POSITIONS = ("top_three_of_a_kind", "middle_three_of_a_kind", "bottom_three_of_a_kind")
STRAIGHT_DRAWS = ("straight_draw", "open_ended_straight_draw", "inside_straight_draw")


def strongest_made_hand(ev: HandEvaluation) -> Optional[str]:
    truth = ev.flags.as_dict()
    made = [name for name in MADE_HANDS if truth[name]]
    if not made:
        return None
    return max(made, key=lambda name: STRENGTH[name])


def apply_strict(ev: HandEvaluation) -> HandEvaluation:
    """
    Keep only the strongest made hand and the sub-flags consistent with it.
    Operates on one 5-card hand; never compares sibling combinations.
    Flush draws and the ace-low auxiliary flags are left alone.
    """
    best = strongest_made_hand(ev)
    strongest = STRENGTH[best] if best else 0

    cleared = [name for name in MADE_HANDS if STRENGTH[name] < strongest]
    if strongest != STRENGTH["pair"]:
        cleared.extend(PAIR_POSITIONS)
    if strongest != STRENGTH["two_pair"]:
        cleared.extend(TWO_PAIR_POSITIONS)
    if strongest != STRENGTH["three_of_a_kind"]:
        cleared.extend(TRIPS_POSITIONS)
    # a made flush or better is never also advertised as a straight draw
    if strongest >= STRENGTH["flush"]:
        cleared.extend(STRAIGHT_DRAWS)

    flags = replace(ev.flags, **{name: False for name in cleared})
    keys = dict(ev.key_cards)
    kickers = dict(ev.kicker_cards)
    for name in cleared:
        keys[name] = ()
        kickers[name] = ()
    return replace(ev, flags=flags, key_cards=keys, kicker_cards=kickers)
