"""Exceptions raised by the hand evaluation engine."""


class ShowdownError(Exception):
    """Base class for hand evaluation errors."""


class InvalidCardError(ShowdownError, ValueError):
    """A card was built or parsed from an unknown rank or suit."""


class InvalidHandInputError(ShowdownError, ValueError):
    """Wrong number of cards, or a duplicate card, supplied for evaluation."""


class EmptyResultSetError(ShowdownError, ValueError):
    """Winner selection was called without any results."""
