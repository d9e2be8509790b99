"""
Rule violations raised by the engine.

Every error is local and leaves the engine state untouched, so the caller may
retry with a different choice. All of them are ``ValueError`` subclasses.
"""
from __future__ import annotations


class RulesError(ValueError):
    """Base class for all rule violations."""


class IllegalBid(RulesError):
    """Bid not in ``Auction.valid_bids()`` or made in the wrong phase."""


class IllegalPlay(RulesError):
    """Card not held by the acting player or not legal in the current trick."""


class OutOfTurn(RulesError):
    """Action invoked for a player who is not the current bidder / player."""


class NotReady(RulesError):
    """Card played before a contract was assigned."""


class AlreadyOver(RulesError):
    """Card played after the 32nd card."""


__all__ = ["RulesError", "IllegalBid", "IllegalPlay", "OutOfTurn", "NotReady", "AlreadyOver"]
