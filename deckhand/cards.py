"""
Card and Deck classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional
import logging
import random

from deckhand.errors import InsufficientCardsError

logger = logging.getLogger(__name__)


# ----------------------------
# Cards / Deck
# ----------------------------

SUITS = ("Hearts", "Spades", "Diamonds")
VALUES = ("Ace", "Two", "Three")


@dataclass(frozen=True)
class Card:
    value: str  # 'Ace'..'Three'
    suit: str   # 'Hearts', 'Spades', 'Diamonds'

    def __str__(self) -> str:
        return f"{self.value} of {self.suit}"


class Deck:
    """
    Ordered pile of cards. The end of the list is the top of the deck:
    deal() takes cards from there.

    Construction is deterministic (suit by suit, values in order); call
    shuffle() to randomize. Pass a seeded random.Random to make shuffles
    reproducible.
    """
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.cards: List[Card] = [Card(v, s) for s in SUITS for v in VALUES]
        logger.debug("Built deck of %d cards", len(self.cards))

    def shuffle(self) -> None:
        self.rng.shuffle(self.cards)
        logger.debug("Shuffled %d cards", len(self.cards))

    def deal(self, num_cards: int) -> List[Card]:
        """
        Remove and return the last num_cards cards, keeping their order.

        Raises InsufficientCardsError if the deck holds fewer cards; the deck
        is left untouched in that case.
        """
        if num_cards < 0:
            raise ValueError(f"num_cards must be >= 0, got {num_cards}")
        if num_cards > len(self.cards):
            logger.warning(
                "Rejected deal of %d cards from a deck of %d", num_cards, len(self.cards)
            )
            raise InsufficientCardsError(num_cards, len(self.cards))

        split = len(self.cards) - num_cards
        hand = self.cards[split:]
        del self.cards[split:]
        logger.debug("Dealt %d cards, %d left", len(hand), len(self.cards))
        return hand

    def labels(self) -> List[str]:
        return [str(c) for c in self.cards]

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck(cards={self.labels()!r})"
