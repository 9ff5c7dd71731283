# cards
from .cards import (
    HAND_SIZE,
    RANKS,
    SUITS,
    Card,
    RankOrder,
    format_cards,
    make_deck,
    parse_cards,
    rank_value,
)
from .errors import (
    CardError,
    DuplicateCardError,
    InvalidRankError,
    InvalidSuitError,
    MalformedCardError,
    NotASequenceError,
    TooFewCardsError,
)

# combinations
from .combos import count_combos, five_card_combos

# rank / suit analysis
from .analysis import (
    HandShape,
    distance,
    gaps,
    rank_histogram_by_rank,
    rank_histogram_sorted,
    sort_descending,
    suit_histogram,
)

__all__ = [
    # cards
    "HAND_SIZE", "RANKS", "SUITS", "Card", "RankOrder",
    "format_cards", "make_deck", "parse_cards", "rank_value",

    # errors
    "CardError", "DuplicateCardError", "InvalidRankError", "InvalidSuitError",
    "MalformedCardError", "NotASequenceError", "TooFewCardsError",

    # combinations
    "count_combos", "five_card_combos",

    # analysis
    "HandShape", "distance", "gaps", "rank_histogram_by_rank",
    "rank_histogram_sorted", "sort_descending", "suit_histogram",
]
