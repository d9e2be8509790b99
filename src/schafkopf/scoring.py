"""
Card-point counting: 120 points per deal, credited trick by trick to the trick winner.
Stakes (Schneider, Schwarz, tariffs) are not computed here.
"""
from __future__ import annotations

from typing import Sequence

from .contracts import Contract
from .deck import cards_point_total
from .play import PLAYERS, TRICKS_PER_DEAL, PlayedCard, determine_trick_winner, trick_cards


def trick_points(trick: Sequence[PlayedCard]) -> int:
    """Points of the cards in one trick."""
    return cards_point_total(entry.card for entry in trick)


def points_per_player(played: Sequence[PlayedCard], contract: Contract) -> list[int]:
    """Points won by each player over the resolved tricks of ``played``."""
    points = [0] * PLAYERS
    for trick_index in range(TRICKS_PER_DEAL):
        winner = determine_trick_winner(played, trick_index, contract)
        if winner is None:
            continue
        points[winner] += trick_points(trick_cards(played, trick_index))
    return points


def team_points(points: Sequence[int], declarer: int, partner: int | None) -> tuple[int, int]:
    """
    (declarer side, opponents) point totals.
    partner is None when the declarer plays alone.
    """
    side = {declarer} if partner is None else {declarer, partner}
    declarer_side = sum(points[p] for p in side)
    return declarer_side, sum(points) - declarer_side
