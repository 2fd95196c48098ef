"""
Deck of cards with shuffling and dealing.

A Deck is built in a fixed order from SUITS x VALUES, shuffled in place with
its own random.Random, and dealt from the top into hands.
"""

from .cards import SUITS, VALUES, Card, Deck
from .errors import DeckError, InsufficientCardsError

__all__ = ["SUITS", "VALUES", "Card", "Deck", "DeckError", "InsufficientCardsError"]
