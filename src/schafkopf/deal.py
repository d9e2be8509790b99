"""
Distribution (deal) for 4 players: 8 cards each from a shuffled 32-card deck.
Seats are numbered clockwise; the forehand leads the first trick and opens the auction.
"""
from __future__ import annotations

import random
from typing import NamedTuple

from .deck import DECK_SIZE, HAND_SIZE, Card, Hand, make_deck_32

PLAYERS = 4


class Deal4P(NamedTuple):
    """Result of a deal. Hands are mutable for play."""
    hands: tuple[Hand, Hand, Hand, Hand]
    forehand: int  # 0..3


def check_player(player: int) -> int:
    if not 0 <= player < PLAYERS:
        raise ValueError(f"Player index must be in 0..{PLAYERS - 1}, got {player}")
    return player


def check_deck(deck: list[Card]) -> None:
    """The deck must be the 32 distinct cards of the game."""
    if len(deck) != DECK_SIZE or set(deck) != set(make_deck_32()):
        raise ValueError(f"Deck must hold the {DECK_SIZE} distinct cards, got {len(deck)} cards")


def deal_4p(
    deck: list[Card] | None = None,
    rng: random.Random | None = None,
    forehand: int = 0,
) -> Deal4P:
    """
    Shuffle a copy of ``deck`` with ``rng`` and give 8 consecutive cards to each player,
    starting with the forehand.
    """
    check_player(forehand)
    if deck is None:
        deck = make_deck_32()
    check_deck(deck)
    if rng is None:
        rng = random.Random()
    deck = list(deck)
    rng.shuffle(deck)

    hands = [Hand(), Hand(), Hand(), Hand()]
    for i in range(PLAYERS):
        player = (forehand + i) % PLAYERS
        hands[player].cards.extend(deck[i * HAND_SIZE:(i + 1) * HAND_SIZE])

    return Deal4P(hands=(hands[0], hands[1], hands[2], hands[3]), forehand=forehand)


def next_forehand(forehand: int) -> int:
    """Forehand rotates clockwise (0 -> 1 -> 2 -> 3 -> 0)."""
    return (forehand + 1) % PLAYERS
