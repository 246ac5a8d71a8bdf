"""UCB1 scoring for move selection."""

import numpy as np

from ..core.fastlog import fastlog


def ucb_scores(
    wins: np.ndarray,
    tries: np.ndarray,
    tot_tries: float,
    flip: float,
    c: float,
    log_bias: float = 1e-4
) -> np.ndarray:
    """Compute UCB scores for explored moves.

    UCB = flip * W / n + c * sqrt(log(N + bias) / n)

    Statistics are stored from player 0's point of view; ``flip`` is +1 when
    player 0 is to move and -1 otherwise.

    Args:
        wins: Accumulated outcomes per move
        tries: Visit counts per move, all positive
        tot_tries: Total visits of the parent
        flip: Sign converting stored outcomes to the mover's perspective
        c: Exploration constant
        log_bias: Keeps the log argument positive on the first evaluation

    Returns:
        Array of UCB scores, one per move
    """
    # The approximation can dip just below zero around log(1).
    log_n = max(fastlog(tot_tries + log_bias), 0.0)
    exploitation = flip * wins / tries
    exploration = c * np.sqrt(log_n / tries)
    return exploitation + exploration


def select_best(moves: np.ndarray, scores: np.ndarray) -> int:
    """Return the move with the highest score; ties go to the first one."""
    if len(moves) == 0:
        raise ValueError("No moves to select from")
    return int(moves[np.argmax(scores)])
