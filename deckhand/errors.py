"""
Exceptions raised by the deck.
"""


class DeckError(Exception):
    """Base class for deck errors."""
    pass


class InsufficientCardsError(DeckError):
    """Raised when a deal asks for more cards than the deck holds."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"cannot deal {requested} cards, only {available} left in the deck"
        )
