"""
Auction (Reizen) for 4 players, in two phases.

1. Intent: starting with the forehand, every player says once whether they want to play.
2. Bids: only players who said yes take part, in table order. A bid must come from
   ``valid_bids()``; bidding None passes and drops the player out.

Call < Wenz < Solo. Nobody wanting to play means Ramsch.
"""
from __future__ import annotations

import logging
from typing import Callable, Sequence

from .contracts import NO_CONTRACT, RAMSCH, WENZ, Contract, call, is_trump, solo
from .deal import PLAYERS, check_player
from .deck import Card, Hand, Rank, Suit
from .errors import IllegalBid, OutOfTurn

logger = logging.getLogger(__name__)

_SUIT_ORDER = (Suit.ACORNS, Suit.BELLS, Suit.LEAVES, Suit.HEARTS)

BID_UNIVERSE: tuple[Contract, ...] = (
    *(call(s) for s in _SUIT_ORDER),
    *(solo(s) for s in _SUIT_ORDER),
    WENZ,
)


class Auction:
    """Single-use auction state for one deal."""

    def __init__(self, starting_bidder: int):
        check_player(starting_bidder)
        self.highest_bid: Contract = NO_CONTRACT
        self.highest_bidder: int = starting_bidder
        self.next_bidder: int | None = starting_bidder
        self.intent: list[bool] = [False] * PLAYERS
        self.intent_count: int = 0

    def valid_bids(self, hand: Hand | None = None) -> list[Contract]:
        """
        Bids allowed against the current highest bid. None (pass) is offered only once
        a contract stands. With a hand, Calls the hand cannot make are removed.
        """
        bids = list(BID_UNIVERSE)
        if self.highest_bid.is_call():
            bids = [b for b in bids if not b.is_call()]
            bids.append(NO_CONTRACT)
        elif self.highest_bid.is_solo():
            bids = []
        elif self.highest_bid.is_wenz():
            bids = [b for b in bids if not (b.is_wenz() or b.is_call())]
            bids.append(NO_CONTRACT)

        if hand is not None:
            # Can't call an Ace you hold, nor a suit you have no plain card of.
            bids = [
                b for b in bids
                if not b.is_call() or (
                    not hand.has_ace_of(b.suit)
                    and any(c.suit == b.suit and not is_trump(c, b) for c in hand.cards)
                )
            ]
        return bids

    def bidding_phase_started(self) -> bool:
        return self.intent_count == PLAYERS

    def is_finished(self) -> bool:
        """Everybody passed or no higher bid is possible."""
        return not self.valid_bids() or self.next_bidder is None

    def winning_contract(self) -> Contract:
        """Contract of a finished auction: the highest bid, or Ramsch if nobody bid."""
        if not self.is_finished():
            return NO_CONTRACT
        if self.highest_bid.is_none():
            return RAMSCH
        return self.highest_bid

    def _check_turn(self, player: int | None) -> int:
        if self.next_bidder is None:
            raise IllegalBid("Auction is finished")
        if player is not None and player != self.next_bidder:
            raise OutOfTurn(f"Player {player} acted, but it is player {self.next_bidder}'s turn")
        return self.next_bidder

    def announce_intent(self, intent: bool, player: int | None = None) -> None:
        if self.bidding_phase_started():
            raise IllegalBid("Intent phase is over")
        bidder = self._check_turn(player)
        self.intent[bidder] = intent
        self.intent_count += 1
        logger.debug("Player %d announces intent=%s", bidder, intent)
        self._update_next_bidder()

    def bid(self, contract: Contract, player: int | None = None, hand: Hand | None = None) -> None:
        """
        Place ``contract`` for the next bidder; NO_CONTRACT passes.
        A Call on the trump suit is refused even when no hand is given.
        """
        if not self.bidding_phase_started():
            raise IllegalBid("Bid phase has not started")
        if self.is_finished():
            raise IllegalBid("Auction is finished")
        bidder = self._check_turn(player)
        if contract not in self.valid_bids(hand):
            raise IllegalBid(f"Bid {contract} not allowed; valid {self.valid_bids(hand)}")
        if contract.is_call() and is_trump(Card(contract.suit, Rank.ACE), contract):
            # No hand can hold a plain card of the trump suit.
            raise IllegalBid(f"Bid {contract} calls the trump suit")
        if contract.is_none():
            self.intent[bidder] = False
            logger.debug("Player %d passes", bidder)
        else:
            self.highest_bid = contract
            self.highest_bidder = bidder
            logger.debug("Player %d bids %s", bidder, contract)
        self._update_next_bidder()

    def _update_next_bidder(self) -> None:
        assert self.next_bidder is not None
        if self.is_finished():
            self.next_bidder = None
            return
        if self.intent_count < PLAYERS:
            self.next_bidder = (self.next_bidder + 1) % PLAYERS
            return

        nr_bidders = sum(self.intent)
        if nr_bidders == 0:
            # nobody wants to play
            self.next_bidder = None
            return
        if nr_bidders == 1 and not self.highest_bid.is_none():
            # contract stands and nobody is left to outbid it
            self.next_bidder = None
            return

        bidder = (self.next_bidder + 1) % PLAYERS
        while not self.intent[bidder]:
            bidder = (bidder + 1) % PLAYERS
        self.next_bidder = bidder


class BiddingResult:
    """Result of a completed auction."""
    __slots__ = ("declarer", "contract", "bids")

    def __init__(self, declarer: int, contract: Contract, bids: list[tuple[int, Contract]]):
        self.declarer = declarer
        self.contract = contract
        # bids: list of (player_index, bid) where NO_CONTRACT is a pass
        self.bids = bids


def run_auction(
    forehand: int,
    get_intent: Callable[[int, Auction], bool],
    get_bid: Callable[[int, Auction], Contract],
    hands: Sequence[Hand] | None = None,
) -> BiddingResult:
    """
    Run a full auction. get_intent(player, auction) answers the intent question,
    get_bid(player, auction) returns a bid from ``auction.valid_bids(...)``.
    With ``hands``, every bid is also checked against the bidder's hand.
    """
    auction = Auction(forehand)
    while not auction.bidding_phase_started() and auction.next_bidder is not None:
        player = auction.next_bidder
        auction.announce_intent(bool(get_intent(player, auction)), player=player)

    bids: list[tuple[int, Contract]] = []
    while not auction.is_finished():
        player = auction.next_bidder
        assert player is not None
        bid = get_bid(player, auction)
        auction.bid(bid, player=player, hand=hands[player] if hands is not None else None)
        bids.append((player, bid))

    contract = auction.winning_contract()
    logger.debug("Auction won by player %d with %s", auction.highest_bidder, contract)
    return BiddingResult(declarer=auction.highest_bidder, contract=contract, bids=bids)
