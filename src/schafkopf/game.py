"""
Single deal and match orchestration: deal → auction → play → count points.
The Game object owns the four hands and the play log of one deal; the match
loop rotates the forehand and sums raw card points across deals.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Sequence

from .bidding import BiddingResult, run_auction
from .contracts import NO_CONTRACT, Contract
from .deal import PLAYERS, check_deck, check_player, deal_4p, next_forehand
from .deck import DECK_SIZE, HAND_SIZE, Card, Hand, Suit
from .errors import AlreadyOver, IllegalBid, IllegalPlay, NotReady, OutOfTurn
from .play import (
    PlayedCard,
    action_is_valid,
    determine_trick_winner,
    is_running_lead,
    legal_plays,
    next_player_after,
    trick_cards,
)
from .scoring import points_per_player, team_points

if TYPE_CHECKING:  # pragma: no cover - import cycle guard for type checking only
    from .agents import Agent

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    UNDECIDED = "undecided"      # dealt, no contract yet
    READY = "ready"              # contract assigned, no card played
    IN_PROGRESS = "in_progress"  # 1..31 cards played
    OVER = "over"                # all 32 cards played


@dataclass(frozen=True)
class PlayerGameState:
    """What one player is allowed to see when asked for a decision."""

    hand: Hand
    contract: Contract
    player: int
    trick: int
    played: tuple[PlayedCard, ...]
    declarer: int

    def current_trick(self) -> list[PlayedCard]:
        return trick_cards(self.played, self.trick)


class Game:
    """Mutable state for one deal: hands, contract, play log, turn and the ran-away flag."""

    def __init__(
        self,
        forehand: int = 0,
        rng: random.Random | None = None,
        deck: list[Card] | None = None,
    ):
        deal = deal_4p(deck=deck, rng=rng, forehand=forehand)
        self._start(forehand, list(deal.hands))

    def _start(self, forehand: int, hands: list[Hand]) -> None:
        self.forehand: int = forehand
        self.hands: list[Hand] = hands
        self.contract: Contract = NO_CONTRACT
        self.declarer: int = forehand
        self.played: list[PlayedCard] = []
        self.trick: int = 0
        # The called partner ran away with the called suit and is free of the Ace rules.
        self.ran_away: bool = False
        self.next_player: int = forehand

    @classmethod
    def from_hands(cls, hands: Sequence[Sequence[Card]], forehand: int = 0) -> "Game":
        """Game with fixed, already dealt hands (no shuffling)."""
        if len(hands) != PLAYERS or any(len(h) != HAND_SIZE for h in hands):
            raise ValueError(f"Need {PLAYERS} hands of {HAND_SIZE} cards")
        check_player(forehand)
        check_deck([c for h in hands for c in h])
        game = cls.__new__(cls)
        game._start(forehand, [Hand(cards=list(h)) for h in hands])
        return game

    @property
    def phase(self) -> GamePhase:
        if self.is_over():
            return GamePhase.OVER
        if self.played:
            return GamePhase.IN_PROGRESS
        if self.contract.is_none():
            return GamePhase.UNDECIDED
        return GamePhase.READY

    def assign_contract(self, contract: Contract, declarer: int) -> None:
        """Apply the auction result. Only possible once, before any card is played."""
        check_player(declarer)
        if self.phase is not GamePhase.UNDECIDED:
            raise IllegalBid(f"Contract already assigned ({self.contract})")
        if contract.is_none():
            raise ValueError("Cannot assign the undecided contract")
        if contract.is_call() and contract.suit == Suit.HEARTS:
            raise ValueError("Hearts is trump and cannot be called")
        self.contract = contract
        self.declarer = declarer
        logger.debug("Contract %s for declarer %d", contract, declarer)

    def is_ready_to_play(self) -> bool:
        return (
            not self.played
            and not self.contract.is_none()
            and self.trick == 0
            and all(len(h.cards) == HAND_SIZE and not h.played for h in self.hands)
        )

    def is_over(self) -> bool:
        return len(self.played) == DECK_SIZE

    def current_trick(self) -> list[PlayedCard]:
        return trick_cards(self.played, self.trick)

    def player_state(self, player: int) -> PlayerGameState:
        check_player(player)
        hand = self.hands[player]
        return PlayerGameState(
            hand=Hand(cards=list(hand.cards), played=list(hand.played)),
            contract=self.contract,
            player=player,
            trick=self.trick,
            played=tuple(self.played),
            declarer=self.declarer,
        )

    def action_is_valid(self, card: Card, hand: Hand | None) -> bool:
        """Legality of ``card`` in the current trick; pass hand=None for a hidden hand."""
        return action_is_valid(
            self.contract, self.played, self.trick, card, hand, ran_away=self.ran_away
        )

    def legal_actions(self, player: int) -> list[Card]:
        """Cards ``player`` may play now. Empty before the contract is known or after the deal."""
        check_player(player)
        if self.phase in (GamePhase.UNDECIDED, GamePhase.OVER):
            return []
        return legal_plays(
            self.contract, self.played, self.trick, self.hands[player], ran_away=self.ran_away
        )

    def play_card(self, card: Card, player: int | None = None) -> None:
        """
        Play ``card`` for the current player (``player``, if given, must be that player).
        Raises NotReady / AlreadyOver / OutOfTurn / IllegalPlay instead of ignoring the call.
        """
        phase = self.phase
        if phase is GamePhase.UNDECIDED:
            raise NotReady("No contract assigned yet")
        if phase is GamePhase.OVER:
            raise AlreadyOver("All cards have been played")
        current = self.next_player
        if player is not None and player != current:
            raise OutOfTurn(f"Player {player} played, but it is player {current}'s turn")
        hand = self.hands[current]
        if card not in hand.cards:
            raise IllegalPlay(f"Card {card} not in hand of player {current}")
        if not self.action_is_valid(card, hand):
            raise IllegalPlay(f"Illegal play {card}; legal {self.legal_actions(current)}")

        if not self.ran_away and is_running_lead(self.contract, self.played, self.trick, card, hand):
            self.ran_away = True
            logger.debug("Player %d runs away with %s", current, card)

        self.played.append(PlayedCard(card, current))
        hand.play(card)
        self.next_player = next_player_after(self.played, current, self.contract)
        self.trick = len(self.played) // PLAYERS
        if len(self.played) % PLAYERS == 0:
            logger.debug("Trick %d won by player %d", self.trick - 1, self.next_player)

    def trick_winner(self, trick: int) -> int | None:
        return determine_trick_winner(self.played, trick, self.contract)

    def points(self) -> list[int]:
        """Card points per player over the tricks resolved so far."""
        return points_per_player(self.played, self.contract)

    def partner(self) -> int | None:
        """Holder of the called Ace in a Call game, else None."""
        called = self.contract.called_suit
        if called is None:
            return None
        for player, hand in enumerate(self.hands):
            if any(c.is_ace_of(called) for c in hand.cards + hand.played):
                return player
        return None

    def team_points(self) -> tuple[int, int] | None:
        """(declarer side, opponents) points; None for Ramsch, where everybody plays alone."""
        if self.contract.is_none() or self.contract.is_ramsch():
            return None
        return team_points(self.points(), self.declarer, self.partner())


# ---- Orchestration ----


def run_deal(game: Game, agents: Sequence["Agent"]) -> list[int]:
    """
    Run auction and play of ``game`` with one agent per seat.
    Returns the card points per player. Illegal choices from an agent propagate.
    """
    if len(agents) != PLAYERS:
        raise ValueError(f"Need {PLAYERS} agents, got {len(agents)}")

    bidding = run_auction(
        game.forehand,
        lambda p, auction: agents[p].get_intent(game.player_state(p), auction),
        lambda p, auction: agents[p].get_bid(game.player_state(p), auction),
        hands=game.hands,
    )
    game.assign_contract(bidding.contract, bidding.declarer)

    while not game.is_over():
        player = game.next_player
        legal = game.legal_actions(player)
        card = agents[player].get_play(game.player_state(player), legal)
        game.play_card(card, player=player)

    return game.points()


def play_one_deal(
    agents: Sequence["Agent"],
    forehand: int = 0,
    rng: random.Random | None = None,
) -> tuple[list[int], Game]:
    """Deal, bid and play one deal. Returns (points per player, finished game)."""
    if rng is None:
        rng = random.Random()
    game = Game(forehand=forehand, rng=rng)
    points = run_deal(game, agents)
    return points, game


@dataclass
class MatchConfig:
    """Settings for a match of several deals."""

    num_deals: int = 4
    first_forehand: int = 0
    seed: int | None = None


@dataclass
class DealSummary:
    forehand: int
    declarer: int
    contract: Contract
    points: list[int]


@dataclass
class MatchResult:
    totals: list[int] = field(default_factory=lambda: [0] * PLAYERS)
    per_deal: list[DealSummary] = field(default_factory=list)


def run_match(
    agents: Sequence["Agent"],
    config: MatchConfig | None = None,
    rng: random.Random | None = None,
) -> MatchResult:
    """
    Run a match of ``config.num_deals`` deals. Forehand rotates 0->1->2->3->0.
    Totals are the summed card points of every deal.
    """
    config = config or MatchConfig()
    if config.num_deals < 0:
        raise ValueError("num_deals must be >= 0")
    if rng is None:
        rng = random.Random(config.seed)
    forehand = check_player(config.first_forehand)
    result = MatchResult()
    for deal_nr in range(config.num_deals):
        points, game = play_one_deal(agents, forehand=forehand, rng=rng)
        result.per_deal.append(
            DealSummary(forehand=forehand, declarer=game.declarer, contract=game.contract, points=points)
        )
        for i in range(PLAYERS):
            result.totals[i] += points[i]
        logger.info(
            "Deal %d/%d: %s by player %d, points %s",
            deal_nr + 1, config.num_deals, game.contract, game.declarer, points,
        )
        forehand = next_forehand(forehand)
    return result
