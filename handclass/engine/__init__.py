from .evaluator import (
    Result,
    evaluate_five,
    evaluate_hand,
    evaluate_hand_dict,
    result_to_dict,
)
from .classifier import CATEGORIES, MADE_HANDS, HandFlags, classify, external_name
from .evidence import HandEvaluation, extract_evidence, hand_key
from .strict import STRENGTH, apply_strict, strongest_made_hand

__all__ = [
    # entry points
    "Result", "evaluate_five", "evaluate_hand", "evaluate_hand_dict", "result_to_dict",

    # classification
    "CATEGORIES", "MADE_HANDS", "HandFlags", "classify", "external_name",

    # evidence
    "HandEvaluation", "extract_evidence", "hand_key",

    # strict mode
    "STRENGTH", "apply_strict", "strongest_made_hand",
]
