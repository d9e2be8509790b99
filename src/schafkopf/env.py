"""
Observation / action encoding for decision-makers that work on flat vectors.

Global action space (44 actions):
- [0:2)   intent: 0 = no, 1 = yes
- [2:12)  bids: the 9 contracts of the auction, then pass
- [12:44) cards: one per card, suit-major then rank (see ``card_index``)

Observations are fixed-size float32 numpy vectors built from a
``PlayerGameState`` and, while the auction runs, the ``Auction``.
"""
from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from .bidding import BID_UNIVERSE, Auction
from .contracts import NO_CONTRACT, RAMSCH, Contract
from .deal import PLAYERS
from .deck import Card, Rank, Suit
from .game import PlayerGameState
from .play import TRICKS_PER_DEAL

NUM_CARDS: int = 32
NUM_INTENT_ACTIONS: int = 2
BID_ACTIONS: tuple[Contract, ...] = (*BID_UNIVERSE, NO_CONTRACT)
NUM_BID_ACTIONS: int = len(BID_ACTIONS)  # 10
NUM_CARD_ACTIONS: int = NUM_CARDS
NUM_ACTIONS: int = NUM_INTENT_ACTIONS + NUM_BID_ACTIONS + NUM_CARD_ACTIONS  # 44

BID_OFFSET: int = NUM_INTENT_ACTIONS
CARD_OFFSET: int = NUM_INTENT_ACTIONS + NUM_BID_ACTIONS

# Every contract a game can end up with: the auction bids, Ramsch and "undecided".
CONTRACTS: tuple[Contract, ...] = (*BID_UNIVERSE, RAMSCH, NO_CONTRACT)
NUM_CONTRACTS: int = len(CONTRACTS)  # 11

# 32 hand + 32 seen + 4 × 32 current trick by seat + contract + player + declarer
# + trick number (0..8) + intents + highest bid + highest bidder + bidding flag
OBS_SIZE: int = (
    NUM_CARDS * (2 + PLAYERS)
    + NUM_CONTRACTS
    + PLAYERS
    + PLAYERS
    + (TRICKS_PER_DEAL + 1)
    + PLAYERS
    + NUM_CONTRACTS
    + PLAYERS
    + 1
)  # 240


def card_index(card: Card) -> int:
    """Stable index 0..31, matching the order of ``make_deck_32()``."""
    return int(card.suit) * len(Rank) + int(card.rank)


def index_to_card(index: int) -> Card:
    if not 0 <= index < NUM_CARDS:
        raise ValueError(f"Card index out of range: {index}")
    return Card(Suit(index // len(Rank)), Rank(index % len(Rank)))


def contract_index(contract: Contract) -> int:
    return CONTRACTS.index(contract)


def bid_index(bid: Contract) -> int:
    """Position of ``bid`` in the bid region of the action space (without offset)."""
    return BID_ACTIONS.index(bid)


def _one_hot(index: int | None, size: int) -> np.ndarray:
    vec = np.zeros(size, dtype=np.float32)
    if index is not None and 0 <= index < size:
        vec[index] = 1.0
    return vec


def encode_card_set(cards: Iterable[Card]) -> np.ndarray:
    """Binary 32-dim vector: 1 if the card is in the set."""
    vec = np.zeros(NUM_CARDS, dtype=np.float32)
    for c in cards:
        vec[card_index(c)] = 1.0
    return vec


def encode_observation(state: PlayerGameState, auction: Auction | None = None) -> np.ndarray:
    """
    Flat observation of size OBS_SIZE:

    - [0:32)    : the player's hand
    - [32:64)   : every card played so far
    - [64:192)  : current trick, one 32-block per seat
    - contract one-hot (11), player (4), declarer (4), trick number (9)
    - auction: intent flags (4), highest bid (11), highest bidder (4), bid phase flag (1);
      all zeros when no auction is given
    """
    trick_vec = np.zeros((PLAYERS, NUM_CARDS), dtype=np.float32)
    for entry in state.current_trick():
        trick_vec[entry.player, card_index(entry.card)] = 1.0

    parts = [
        encode_card_set(state.hand.cards),
        encode_card_set(entry.card for entry in state.played),
        trick_vec.reshape(-1),
        _one_hot(contract_index(state.contract), NUM_CONTRACTS),
        _one_hot(state.player, PLAYERS),
        _one_hot(state.declarer if not state.contract.is_none() else None, PLAYERS),
        _one_hot(state.trick, TRICKS_PER_DEAL + 1),
    ]
    if auction is not None:
        parts.extend([
            np.asarray(auction.intent, dtype=np.float32),
            _one_hot(contract_index(auction.highest_bid), NUM_CONTRACTS),
            _one_hot(auction.highest_bidder if not auction.highest_bid.is_none() else None, PLAYERS),
            np.array([1.0 if auction.bidding_phase_started() else 0.0], dtype=np.float32),
        ])
    else:
        parts.append(np.zeros(PLAYERS + NUM_CONTRACTS + PLAYERS + 1, dtype=np.float32))

    obs = np.concatenate(parts)
    assert obs.shape == (OBS_SIZE,)
    return obs


def legal_action_mask_intent() -> np.ndarray:
    """Both intent answers are always allowed; nothing else is."""
    mask = np.zeros(NUM_ACTIONS, dtype=bool)
    mask[:NUM_INTENT_ACTIONS] = True
    return mask


def legal_action_mask_bids(valid_bids: Sequence[Contract]) -> np.ndarray:
    """Mask over the bid region from ``Auction.valid_bids(hand)``."""
    mask = np.zeros(NUM_ACTIONS, dtype=bool)
    for bid in valid_bids:
        mask[BID_OFFSET + bid_index(bid)] = True
    return mask


def legal_action_mask_play(legal_cards: Sequence[Card]) -> np.ndarray:
    """Mask over the card region from the engine's legal cards."""
    mask = np.zeros(NUM_ACTIONS, dtype=bool)
    for c in legal_cards:
        mask[CARD_OFFSET + card_index(c)] = True
    return mask


def action_to_intent(action: int) -> bool:
    if not 0 <= action < NUM_INTENT_ACTIONS:
        raise ValueError(f"Action {action} is not an intent action")
    return action == 1


def action_to_bid(action: int) -> Contract:
    if not BID_OFFSET <= action < CARD_OFFSET:
        raise ValueError(f"Action {action} is not a bid action")
    return BID_ACTIONS[action - BID_OFFSET]


def action_to_card(action: int) -> Card:
    if not CARD_OFFSET <= action < NUM_ACTIONS:
        raise ValueError(f"Action {action} is not a card action")
    return index_to_card(action - CARD_OFFSET)


__all__ = [
    "NUM_CARDS",
    "NUM_ACTIONS",
    "NUM_INTENT_ACTIONS",
    "NUM_BID_ACTIONS",
    "NUM_CARD_ACTIONS",
    "OBS_SIZE",
    "card_index",
    "index_to_card",
    "contract_index",
    "bid_index",
    "encode_card_set",
    "encode_observation",
    "legal_action_mask_intent",
    "legal_action_mask_bids",
    "legal_action_mask_play",
    "action_to_intent",
    "action_to_bid",
    "action_to_card",
]
