"""
Console rendering for hands and decks.
"""

from __future__ import annotations
from typing import Iterable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.pretty import Pretty

from deckhand.cards import Card, Deck

console = Console()


def render_cards(title: str, cards: Iterable[Card], out: Optional[Console] = None) -> None:
    """Print the card labels as a pretty-printed list inside a panel."""
    out = out or console
    labels = [str(c) for c in cards]
    out.print(Panel(Pretty(labels, expand_all=True), title=f"[bold]{title}[/bold]", border_style="blue"))


def render_deal(hand: Iterable[Card], deck: Deck, out: Optional[Console] = None) -> None:
    render_cards("Here's your hand", hand, out)
    render_cards("Here's your deck", deck.cards, out)
