"""
Schafkopf deck: 32 cards (4 suits × 8 ranks).
Card values for counting: Ace 11, Ten 10, King 4, Ober 3, Under 2, rest 0 (120 per deal).
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable


class Suit(IntEnum):
    """Schellen, Herz, Gras, Eichel. Order used for tie-break only (smallest = Bells)."""
    BELLS = 0
    HEARTS = 1
    LEAVES = 2
    ACORNS = 3


class Rank(IntEnum):
    """
    Ranks in trick-taking order, not face value.
    Under and Ober sit high because they are trumps in most contracts.
    """
    SEVEN = 0
    EIGHT = 1
    NINE = 2
    KING = 3
    TEN = 4
    UNDER = 5
    OBER = 6
    ACE = 7


RANK_POINTS = {
    Rank.TEN: 10,
    Rank.UNDER: 2,
    Rank.OBER: 3,
    Rank.KING: 4,
    Rank.ACE: 11,
}

DECK_POINTS = 120
DECK_SIZE = 32
HAND_SIZE = 8

_RANK_STR = {
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.KING: "K",
    Rank.TEN: "10",
    Rank.UNDER: "U",
    Rank.OBER: "O",
    Rank.ACE: "A",
}


@dataclass(frozen=True)
class Card:
    """A single card, equal by value."""

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Unknown suit: {self.suit!r}")
        if not isinstance(self.rank, Rank):
            raise ValueError(f"Unknown rank: {self.rank!r}")

    def points(self) -> int:
        return RANK_POINTS.get(self.rank, 0)

    def is_ace_of(self, suit: Suit) -> bool:
        return self.suit == suit and self.rank == Rank.ACE

    def __str__(self) -> str:
        return f"{self.suit.name.capitalize()}-{_RANK_STR[self.rank]}"

    def __repr__(self) -> str:
        return str(self)


def make_deck_32() -> list[Card]:
    """Build the full 32-card deck, ordered by suit then rank."""
    return [Card(suit, rank) for suit in Suit for rank in Rank]


def shuffled_deck(rng: random.Random | None = None) -> list[Card]:
    """Full deck in uniformly random order. Pass a seeded rng for reproducible deals."""
    if rng is None:
        rng = random.Random()
    deck = make_deck_32()
    rng.shuffle(deck)
    return deck


def cards_point_total(cards: Iterable[Card]) -> int:
    """Total points in a set of cards. 120 per deal."""
    return sum(c.points() for c in cards)


@dataclass
class Hand:
    """
    One player's cards for a deal.

    ``cards`` holds what is still in hand (order irrelevant); ``played`` keeps the
    cards already played in play order. A card is never in both lists.
    """

    cards: list[Card] = field(default_factory=list)
    played: list[Card] = field(default_factory=list)

    def play(self, card: Card) -> None:
        if card not in self.cards:
            raise ValueError(f"Card {card} not in hand")
        self.cards.remove(card)
        self.played.append(card)

    def has_ace_of(self, suit: Suit) -> bool:
        return any(c.is_ace_of(suit) for c in self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        ordered = sorted(self.cards, key=lambda c: (c.suit, c.rank), reverse=True)
        return " ".join(str(c) for c in ordered)
