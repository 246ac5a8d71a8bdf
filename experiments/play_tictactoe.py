#!/usr/bin/env python3
"""Play one game of tic-tac-toe: MCTS (X, moves first) against a random player.

Usage:
    python experiments/play_tictactoe.py \
        --config configs/mcts/base.yaml \
        --rollouts 100000 \
        --seed 7
"""

import argparse
import logging

import numpy as np

from arena_mcts.games.base import WinState
from arena_mcts.games.tictactoe import TicTacToe
from arena_mcts.mcts.config import SearchConfig
from arena_mcts.mcts.search import play
from arena_mcts.utils.logging import setup_logging


def main():
    parser = argparse.ArgumentParser(description="MCTS vs random tic-tac-toe")
    parser.add_argument("--config", type=str, default=None,
                        help="Search config file")
    parser.add_argument("--rollouts", type=int, default=None,
                        help="Rollouts per MCTS move (overrides config)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed (default: fresh entropy)")
    parser.add_argument("--verbose", action="store_true", help="Log every move")

    args = parser.parse_args()

    setup_logging(logging.INFO if args.verbose else logging.WARNING)
    logger = logging.getLogger(__name__)

    config = SearchConfig.from_yaml(args.config) if args.config else SearchConfig()

    # allow deterministic seeding from command line.
    seed = args.seed
    if seed is None:
        seed = config.seed
    if seed is None:
        seed = int(np.random.SeedSequence().entropy % (2 ** 32))
    logger.info(f"Seed: {seed}")

    rng = np.random.default_rng(seed)
    record = play(rng, TicTacToe, n_rollouts=args.rollouts, config=config)

    for state in record.states:
        print(state)

    winner = record.winner
    if winner == WinState.TIE:
        print("Tie game")
    else:
        print(f"player {int(winner)} wins")


if __name__ == "__main__":
    main()
