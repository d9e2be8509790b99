"""
Tiny CLI to play random matches with four RandomAgents.

Usage (from project root, after installing in editable mode):
    python -m schafkopf.play_random --deals 8 --seed 42
"""
from __future__ import annotations

import argparse
import logging

from .agents import RandomAgent
from .game import MatchConfig, MatchResult, run_match

logger = logging.getLogger(__name__)


def run_random_match(num_deals: int, seed: int, first_forehand: int = 0) -> MatchResult:
    agents = [RandomAgent(seed=seed + seat) for seat in range(4)]
    config = MatchConfig(num_deals=num_deals, first_forehand=first_forehand, seed=seed)
    return run_match(agents, config)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a random Schafkopf match.")
    parser.add_argument(
        "--deals",
        type=int,
        default=4,
        help="Number of deals in the match.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility.",
    )
    parser.add_argument(
        "--forehand",
        type=int,
        choices=range(4),
        default=0,
        help="Forehand of the first deal.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every bid, trick and run-away.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.info("Random match: %d deals, seed %d", args.deals, args.seed)
    result = run_random_match(args.deals, seed=args.seed, first_forehand=args.forehand)
    for i, deal in enumerate(result.per_deal, start=1):
        print(f"deal {i}: {deal.contract} declarer={deal.declarer} points={deal.points}")
    print(f"totals={result.totals}")


if __name__ == "__main__":
    main()
