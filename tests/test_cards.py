import io
import random

import pytest

from stacklab.cards import Card, Deck, Rank, Suit, main


def test_new_deck_has_every_card_once():
    deck = Deck()
    assert len(deck) == 52
    assert len(set(deck.cards)) == 52
    assert deck.drawn == []


def test_card_label():
    assert str(Card(Suit.SPADE, Rank.KING)) == "Spade K"
    assert str(Card(Suit.HEART, Rank.TEN)) == "Heart 10"


def test_unshuffled_deck_draws_top_card():
    deck = Deck()
    assert deck.draw() == Card(Suit.SPADE, Rank.KING)
    assert len(deck) == 51


def test_draw_and_return_round_trip():
    deck = Deck()
    deck.shuffle(random.Random(7))
    before = list(deck.cards)
    first = deck.draw()
    second = deck.draw()
    assert deck.drawn == [first, second]
    assert deck.return_last() == second
    assert deck.return_last() == first
    assert deck.cards == before
    assert deck.drawn == []


def test_shuffle_keeps_the_same_cards():
    deck = Deck()
    original = sorted(deck.cards)
    deck.shuffle(random.Random(1))
    assert sorted(deck.cards) == original


def test_shuffle_is_reproducible_with_seed():
    one, two = Deck(), Deck()
    one.shuffle(random.Random(3))
    two.shuffle(random.Random(3))
    assert one.cards == two.cards


def test_draw_from_empty_deck_raises():
    deck = Deck()
    for _ in range(52):
        deck.draw()
    with pytest.raises(IndexError):
        deck.draw()
    assert len(deck.drawn) == 52


def test_return_without_drawn_card_raises():
    with pytest.raises(IndexError):
        Deck().return_last()


def test_suit_counts_follow_draws():
    deck = Deck()
    full = deck.suit_counts()
    assert set(full.values()) == {13}
    card = deck.draw()
    counts = deck.suit_counts()
    assert counts[card.suit] == full[card.suit] - 1
    assert sum(counts.values()) == len(deck)


def test_main_reports_failed_return(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("return\ndraw\nstatus\nexit\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "[Return failed] Nothing to return." in out
    assert "[Drawn]" in out
    assert " 1. " in out