"""
Trick-taking: legal moves, trick winner, turn order.
Rules: trump led -> play trump if you can; called suit led -> the called partner
must give the Ace unless they ran away; otherwise follow suit if you can.
"""
from __future__ import annotations

from typing import NamedTuple, Sequence

from .contracts import Contract, is_trump
from .deck import Card, Hand, Rank, Suit

PLAYERS = 4
TRICKS_PER_DEAL = 8
RUN_MIN_CARDS = 4


class PlayedCard(NamedTuple):
    """One entry of the deal's play log."""
    card: Card
    player: int


def trick_cards(played: Sequence[PlayedCard], trick_index: int) -> list[PlayedCard]:
    """The (up to 4) plays of trick ``trick_index`` in the flat play log."""
    start = trick_index * PLAYERS
    return list(played[start:start + PLAYERS])


def compare_cards(a: Card, b: Card, contract: Contract, leading_suit: Suit) -> int:
    """
    Compare two cards inside a trick: 1 if ``a`` beats ``b``, -1 if ``b`` beats ``a``,
    0 if neither can be preferred (two off-suit discards).
    """
    a_trump = is_trump(a, contract)
    b_trump = is_trump(b, contract)
    if a_trump != b_trump:
        return 1 if a_trump else -1
    if a_trump:
        key_a, key_b = (a.rank, a.suit), (b.rank, b.suit)
        return (key_a > key_b) - (key_a < key_b)
    a_led = a.suit == leading_suit
    b_led = b.suit == leading_suit
    if a_led != b_led:
        return 1 if a_led else -1
    if a_led:
        return (a.rank > b.rank) - (a.rank < b.rank)
    return 0


def trick_winner(trick: Sequence[PlayedCard], contract: Contract) -> int:
    """Player index of the winner of a complete trick."""
    leading_suit = trick[0].card.suit
    best = trick[0]
    for entry in trick[1:]:
        if compare_cards(entry.card, best.card, contract, leading_suit) > 0:
            best = entry
    return best.player


def determine_trick_winner(
    played: Sequence[PlayedCard],
    trick_index: int,
    contract: Contract,
) -> int | None:
    """Winner of trick ``trick_index``, or None while the trick is incomplete."""
    trick = trick_cards(played, trick_index)
    if len(trick) < PLAYERS:
        return None
    return trick_winner(trick, contract)


def next_player_after(played: Sequence[PlayedCard], current: int, contract: Contract) -> int:
    """
    Player to act after the last entry of ``played`` was made by ``current``.
    A completed trick hands the lead to its winner; otherwise play goes clockwise.
    """
    if played and len(played) % PLAYERS == 0:
        winner = determine_trick_winner(played, len(played) // PLAYERS - 1, contract)
        if winner is not None:
            return winner
    return (current + 1) % PLAYERS


def player_is_called(contract: Contract, card: Card, hand: Hand) -> bool:
    """True if ``hand`` holds the called Ace and ``card`` belongs to the called suit."""
    called = contract.called_suit
    if called is None:
        return False
    return card.suit == called and hand.has_ace_of(called)


def can_run(contract: Contract, card: Card, hand: Hand) -> bool:
    """True if ``card`` is of the called suit and the hand has enough of that suit to run away."""
    called = contract.called_suit
    if called is None or card.suit != called:
        return False
    return sum(1 for c in hand.cards if c.suit == called) >= RUN_MIN_CARDS


def is_running_lead(
    contract: Contract,
    played: Sequence[PlayedCard],
    trick_index: int,
    card: Card,
    hand: Hand,
) -> bool:
    """True if leading ``card`` from ``hand`` releases the called partner (ran away)."""
    if trick_cards(played, trick_index):
        return False
    return player_is_called(contract, card, hand) and card.rank != Rank.ACE


def _valid_for_any_hand(
    contract: Contract,
    trick: Sequence[PlayedCard],
    card: Card,
    ran_away: bool,
) -> bool:
    # Without the hand only plays that are legal for every possible hand pass.
    called = contract.called_suit
    if not trick:
        return called is None or ran_away or card.suit != called
    lead = trick[0].card
    if is_trump(lead, contract):
        return is_trump(card, contract)
    if card.suit != lead.suit:
        return False
    if lead.suit == called and not ran_away:
        return card.is_ace_of(called)
    return True


def action_is_valid(
    contract: Contract,
    played: Sequence[PlayedCard],
    trick_index: int,
    card: Card,
    hand: Hand | None,
    ran_away: bool = False,
) -> bool:
    """
    True if ``card`` may be played into trick ``trick_index``.

    Suits are printed suits: the Ober of Acorns follows Acorns and counts towards
    a run on Acorns, trump or not. Pass ``hand=None`` when the acting hand is
    hidden: only plays that are legal whatever the hand holds are then reported valid.
    """
    trick = trick_cards(played, trick_index)
    if hand is None:
        return _valid_for_any_hand(contract, trick, card, ran_away)
    if card not in hand.cards:
        return False

    called = contract.called_suit

    if not trick:
        if ran_away or not player_is_called(contract, card, hand):
            return True
        if all(c.suit == called for c in hand.cards):
            # Nothing but the called suit left to lead with.
            return True
        if card.rank == Rank.ACE:
            return False
        return can_run(contract, card, hand)

    lead = trick[0].card
    if is_trump(lead, contract) and any(is_trump(c, contract) for c in hand.cards):
        return is_trump(card, contract)
    if lead.suit == called and hand.has_ace_of(called) and not ran_away:
        return card.is_ace_of(called)
    if any(c.suit == lead.suit for c in hand.cards):
        return card.suit == lead.suit
    return True


def legal_plays(
    contract: Contract,
    played: Sequence[PlayedCard],
    trick_index: int,
    hand: Hand,
    ran_away: bool = False,
) -> list[Card]:
    """Cards of ``hand`` that may legally be played now."""
    return [
        c for c in hand.cards
        if action_is_valid(contract, played, trick_index, c, hand, ran_away=ran_away)
    ]


__all__ = [
    "PlayedCard",
    "trick_cards",
    "compare_cards",
    "trick_winner",
    "determine_trick_winner",
    "next_player_after",
    "player_is_called",
    "can_run",
    "is_running_lead",
    "action_is_valid",
    "legal_plays",
]
