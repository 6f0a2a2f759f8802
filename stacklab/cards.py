"""A deck of 52 playing cards to draw from, return to and shuffle."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    HEART = 0
    DIAMOND = 1
    CLUB = 2
    SPADE = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Rank(IntEnum):
    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12

    @property
    def label(self) -> str:
        return _RANK_LABELS[self]


_RANK_LABELS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")


@dataclass(frozen=True, order=True)
class Card:
    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{self.suit.label} {self.rank.label}"


class Deck:
    """Cards in the deck, top last, and the cards drawn from it, latest last."""

    def __init__(self) -> None:
        self.cards: list[Card] = [Card(suit, rank) for suit in Suit for rank in Rank]
        self.drawn: list[Card] = []

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the cards left in the deck."""
        (rng or random.Random()).shuffle(self.cards)

    def draw(self) -> Card:
        """Take the top card and record it as drawn."""
        if not self.cards:
            raise IndexError("the deck is empty")
        card = self.cards.pop()
        self.drawn.append(card)
        return card

    def return_last(self) -> Card:
        """Put the most recently drawn card back on top of the deck."""
        if not self.drawn:
            raise IndexError("no drawn card to return")
        card = self.drawn.pop()
        self.cards.append(card)
        return card

    def suit_counts(self) -> dict[Suit, int]:
        """Return how many cards of each suit are left in the deck."""
        counts = dict.fromkeys(Suit, 0)
        for card in self.cards:
            counts[card.suit] += 1
        return counts


def _show_status(deck: Deck) -> None:
    print("\n===== Deck status =====")
    print(f"Cards left : {len(deck):2d}")
    for suit, count in deck.suit_counts().items():
        print(f"  {suit.label:>7} : {count:2d}")
    print("=======================")
    print("===== Drawn cards =====")
    if not deck.drawn:
        print("  [none]")
    for number, card in enumerate(deck.drawn, start=1):
        print(f"  {number:2d}. {card}")
    print("=======================")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the deck on standard input; no arguments are used."""
    rng = random.Random()
    deck = Deck()
    deck.shuffle(rng)
    print("Card deck started!")
    print("Commands: draw, return, shuffle, status, exit")
    while True:
        try:
            words = input("\nCommand >> ").split()
        except EOFError:
            break
        command = words[0] if words else ""
        if command == "draw":
            try:
                print(f"[Drawn] {deck.draw()}")
            except IndexError:
                print("[Draw failed] The deck is empty!")
        elif command == "return":
            try:
                print(f"[Returned] {deck.return_last()}")
            except IndexError:
                print("[Return failed] Nothing to return.")
        elif command == "shuffle":
            deck.shuffle(rng)
            print("[Shuffled] The deck has been shuffled.")
        elif command == "status":
            _show_status(deck)
        elif command == "exit":
            print("Bye.")
            break
        else:
            print("[Error] Unknown command. Try again.")
    return 0


if __name__ == "__main__":
    sys.exit(main())