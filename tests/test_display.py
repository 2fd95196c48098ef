import io

from rich.console import Console

from deckhand.cards import Card, Deck
from deckhand.display import render_cards, render_deal


def make_console():
    buf = io.StringIO()
    return Console(file=buf, width=100, color_system=None), buf


def test_render_cards_lists_each_label():
    out, buf = make_console()
    render_cards("Hand", [Card("Ace", "Hearts"), Card("Two", "Spades")], out)

    text = buf.getvalue()
    assert "Hand" in text
    assert "'Ace of Hearts'" in text
    assert "'Two of Spades'" in text
    assert text.index("Ace of Hearts") < text.index("Two of Spades")


def test_render_deal_prints_hand_before_deck():
    deck = Deck()
    hand = deck.deal(2)
    out, buf = make_console()

    render_deal(hand, deck, out)

    text = buf.getvalue()
    assert text.index("Here's your hand") < text.index("Here's your deck")
    for label in deck.labels() + [str(c) for c in hand]:
        assert label in text


def test_render_empty_hand():
    out, buf = make_console()
    render_cards("Hand", [], out)
    assert "[]" in buf.getvalue()
