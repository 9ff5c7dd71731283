from __future__ import annotations
import logging
from typing import Any, Dict, Sequence, Union

from handclass.helpers.analysis import HandShape
from handclass.helpers.cards import HAND_SIZE, Card, parse_cards
from handclass.helpers.combos import count_combos, five_card_combos

from .classifier import classify
from .evidence import HandEvaluation, build_evaluation
from .strict import apply_strict

logger = logging.getLogger(__name__)

Result = Dict[str, HandEvaluation]


def evaluate_five(cards5: Sequence[Card], strict: bool = True) -> HandEvaluation:
    """Analyze, classify and extract evidence for exactly five parsed cards."""
    if len(cards5) != HAND_SIZE:
        raise ValueError("evaluate_five expects exactly 5 cards")

    shape = HandShape.of(cards5)
    ev = build_evaluation(shape, classify(shape))
    if strict:
        ev = apply_strict(ev)
    return ev


def evaluate_hand(cards: Sequence[Union[str, Card]], strict: bool = True) -> Result:
    """
    Evaluate every 5-card combination of `cards` (5 or more card tokens).

    Returns a dict keyed by the combination's canonical string
    ("As, Ks, Qs, Js, Ts"), one entry per combination: exactly one for five
    cards, C(n, 5) otherwise. Raises a CardError subclass for bad input before
    any combination is evaluated.

    strict=True keeps only the strongest made hand per combination.
    """
    parsed = parse_cards(cards)
    logger.debug(
        "evaluating %d cards (%d combinations, strict=%s)",
        len(parsed), count_combos(len(parsed)), strict,
    )

    result: Result = {}
    for combo in five_card_combos(parsed):
        ev = evaluate_five(combo, strict=strict)
        result[ev.key] = ev
    return result


def result_to_dict(result: Result) -> Dict[str, Dict[str, Any]]:
    return {key: ev.to_dict() for key, ev in result.items()}


def evaluate_hand_dict(cards: Sequence[Union[str, Card]], strict: bool = True) -> Dict[str, Dict[str, Any]]:
    """evaluate_hand rendered in the plain-dict / JSON shape."""
    return result_to_dict(evaluate_hand(cards, strict=strict))
