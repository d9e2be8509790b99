"""
Contracts and trump rules.

Call(suit): declarer plays with whoever holds the Ace of ``suit``.
Solo(suit): declarer alone, ``suit`` is trump with Obers and Unders.
Wenz: declarer alone, only Unders are trump.
Ramsch: nobody bid; everybody plays for themselves with the Call trumps.
NO_CONTRACT: sentinel before the auction is decided.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .deck import Card, Rank, Suit, make_deck_32

CALL = "call"
SOLO = "solo"
WENZ_KIND = "wenz"
RAMSCH_KIND = "ramsch"
NONE_KIND = "none"

_SUITED_KINDS = (CALL, SOLO)
_KINDS = (CALL, SOLO, WENZ_KIND, RAMSCH_KIND, NONE_KIND)


@dataclass(frozen=True)
class Contract:
    """
    A contract. Either:
    - suited: kind "call" or "solo" with a suit
    - plain: kind "wenz", "ramsch" or "none" without suit
    """

    kind: str
    suit: Optional[Suit] = None

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"Unknown contract kind: {self.kind}")
        if self.kind in _SUITED_KINDS and self.suit is None:
            raise ValueError(f"Contract {self.kind} needs a suit")
        if self.kind not in _SUITED_KINDS and self.suit is not None:
            raise ValueError(f"Contract {self.kind} takes no suit")

    def is_call(self) -> bool:
        return self.kind == CALL

    def is_solo(self) -> bool:
        return self.kind == SOLO

    def is_wenz(self) -> bool:
        return self.kind == WENZ_KIND

    def is_ramsch(self) -> bool:
        return self.kind == RAMSCH_KIND

    def is_none(self) -> bool:
        return self.kind == NONE_KIND

    @property
    def called_suit(self) -> Suit | None:
        """Suit of the called Ace for Call contracts, else None."""
        return self.suit if self.kind == CALL else None

    def __str__(self) -> str:
        if self.suit is not None:
            return f"{self.kind.capitalize()}({self.suit.name.capitalize()})"
        return self.kind.capitalize()

    def __repr__(self) -> str:
        return str(self)


WENZ = Contract(WENZ_KIND)
RAMSCH = Contract(RAMSCH_KIND)
NO_CONTRACT = Contract(NONE_KIND)


def call(suit: Suit) -> Contract:
    return Contract(CALL, suit)


def solo(suit: Suit) -> Contract:
    return Contract(SOLO, suit)


def is_trump(card: Card, contract: Contract) -> bool:
    """True if ``card`` is trump under ``contract``. Nothing is trump before a contract exists."""
    if contract.kind in (CALL, RAMSCH_KIND):
        return card.suit == Suit.HEARTS or card.rank in (Rank.OBER, Rank.UNDER)
    if contract.kind == SOLO:
        return card.suit == contract.suit or card.rank in (Rank.OBER, Rank.UNDER)
    if contract.kind == WENZ_KIND:
        return card.rank == Rank.UNDER
    return False


def trump_order(contract: Contract) -> list[Card]:
    """All trumps of ``contract`` from weakest to strongest (rank first, then suit)."""
    trumps = [c for c in make_deck_32() if is_trump(c, contract)]
    trumps.sort(key=lambda c: (c.rank, c.suit))
    return trumps
