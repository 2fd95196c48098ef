#!/usr/bin/env python3
"""
Deal a hand from a freshly shuffled deck - Entry point.

Builds the deck, shuffles it, deals a hand off the top and prints both the
hand and whatever is left in the deck.

Usage:
    python3 game.py --hand-size 3 --seed 42
"""

from typing import List, Optional
import argparse
import logging
import random

from rich.console import Console

from deckhand.cards import Deck
from deckhand.display import render_deal
from deckhand.errors import InsufficientCardsError

console = Console()
logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Shuffle a deck and deal a hand"
    )
    parser.add_argument(
        "--hand-size",
        type=int,
        default=3,
        help="Number of cards to deal (default: 3)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for a reproducible shuffle (default: random)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log deck operations"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    deck = Deck(random.Random(args.seed))
    deck.shuffle()

    try:
        hand = deck.deal(args.hand_size)
    except InsufficientCardsError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 2

    logger.info("Dealt %d cards, %d left in deck", len(hand), len(deck))
    render_deal(hand, deck, console)
    return 0


if __name__ == "__main__":
    exit(main())
