"""Schafkopf rules engine (auction, legal plays, trick resolution, card points)."""

__version__ = "0.1.0"

from .deck import Card, Hand, Rank, Suit, make_deck_32, shuffled_deck, cards_point_total
from .contracts import Contract, NO_CONTRACT, RAMSCH, WENZ, call, solo, is_trump, trump_order
from .deal import deal_4p, Deal4P, next_forehand
from .bidding import Auction, BiddingResult, BID_UNIVERSE, run_auction
from .play import (
    PlayedCard,
    action_is_valid,
    compare_cards,
    determine_trick_winner,
    legal_plays,
    trick_winner,
)
from .scoring import points_per_player, team_points
from .game import (
    Game,
    GamePhase,
    PlayerGameState,
    MatchConfig,
    MatchResult,
    play_one_deal,
    run_deal,
    run_match,
)
from .errors import AlreadyOver, IllegalBid, IllegalPlay, NotReady, OutOfTurn, RulesError
