from __future__ import annotations


class CardError(ValueError):
    """Base class for rejected card input. Raised before any classification runs."""


class NotASequenceError(CardError, TypeError):
    pass


class TooFewCardsError(CardError):
    pass


class MalformedCardError(CardError):
    pass


class InvalidRankError(CardError):
    pass


class InvalidSuitError(CardError):
    pass


class DuplicateCardError(CardError):
    pass
