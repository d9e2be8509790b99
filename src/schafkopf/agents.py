"""
Decision-makers and the interfaces they implement.

An ``Agent`` answers the three questions a deal asks a seat: do you want to
play, what do you bid, which card do you play. Anything implementing those
three methods (random bot, scripted test double, UI bridge) can sit at the table.

The smaller ``Policy`` protocol works on flat observations and action masks
(see ``schafkopf.env``); ``PolicyAgent`` adapts a Policy to the Agent protocol.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence

import numpy as np

from .bidding import Auction
from .contracts import Contract
from .deck import Card
from .env import (
    action_to_bid,
    action_to_card,
    action_to_intent,
    encode_observation,
    legal_action_mask_bids,
    legal_action_mask_intent,
    legal_action_mask_play,
)
from .game import PlayerGameState


class Agent(Protocol):
    """A seat at the table."""

    def get_intent(self, state: PlayerGameState, auction: Auction) -> bool:
        """True if the player wants to take part in the bidding."""

    def get_bid(self, state: PlayerGameState, auction: Auction) -> Contract:
        """A bid from ``auction.valid_bids(state.hand)``; NO_CONTRACT passes."""

    def get_play(self, state: PlayerGameState, legal_plays: Sequence[Card]) -> Card:
        """One card out of ``legal_plays``."""


class Policy(Protocol):
    """Stateless or stateful decision policy working on flat observations."""

    def act(self, obs: Sequence[float], legal_actions_mask: Iterable[bool]) -> int:
        """
        Choose an action index given an observation and a boolean legal-action mask.

        Implementations must only return indices where ``legal_actions_mask[i]`` is
        true; PolicyAgent hands the decoded choice to the engine, which rejects anything else.
        """


@dataclass
class RandomAgent:
    """
    Baseline seat: wants to play with probability ``intent_probability``,
    then picks uniformly among valid bids and legal cards.
    """

    seed: int | None = None
    intent_probability: float = 0.5

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def get_intent(self, state: PlayerGameState, auction: Auction) -> bool:
        return self._rng.random() < self.intent_probability

    def get_bid(self, state: PlayerGameState, auction: Auction) -> Contract:
        bids = auction.valid_bids(state.hand)
        if not bids:
            raise ValueError("No valid bids available for RandomAgent")
        return self._rng.choice(bids)

    def get_play(self, state: PlayerGameState, legal_plays: Sequence[Card]) -> Card:
        if not legal_plays:
            raise ValueError("No legal plays available for RandomAgent")
        return self._rng.choice(list(legal_plays))


@dataclass
class RandomPolicy:
    """
    Policy that samples uniformly among legal actions.

    Usage:
        policy = RandomPolicy(seed=42)
        action = policy.act(obs, legal_actions_mask)
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        self._rng = np.random.default_rng(self.seed)

    def act(self, obs: Sequence[float], legal_actions_mask: Iterable[bool]) -> int:
        legal_indices = np.flatnonzero(np.fromiter(legal_actions_mask, dtype=bool))
        if legal_indices.size == 0:
            raise ValueError("No legal actions available for RandomPolicy")
        return int(self._rng.choice(legal_indices))


@dataclass
class PolicyAgent:
    """Seat driven by a ``Policy`` through the flat observation encoding."""

    policy: Policy

    def get_intent(self, state: PlayerGameState, auction: Auction) -> bool:
        action = self.policy.act(encode_observation(state, auction), legal_action_mask_intent())
        return action_to_intent(action)

    def get_bid(self, state: PlayerGameState, auction: Auction) -> Contract:
        mask = legal_action_mask_bids(auction.valid_bids(state.hand))
        action = self.policy.act(encode_observation(state, auction), mask)
        return action_to_bid(action)

    def get_play(self, state: PlayerGameState, legal_plays: Sequence[Card]) -> Card:
        mask = legal_action_mask_play(legal_plays)
        action = self.policy.act(encode_observation(state), mask)
        return action_to_card(action)


__all__ = ["Agent", "Policy", "RandomAgent", "RandomPolicy", "PolicyAgent"]
