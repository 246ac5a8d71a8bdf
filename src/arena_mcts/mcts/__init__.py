"""MCTS module: tree search over two-player games.

Rollouts grow a tree of nodes in an arena.
Unexplored moves are expanded with random playouts.
Fully explored nodes pick moves by UCB1.
"""

from .config import SearchConfig, DEFAULT_CONFIG
from .node import Node
from .tree import MCTSTree
from .ucb import ucb_scores, select_best
from .search import GameRecord, play, run_rollouts

__all__ = [
    "SearchConfig",
    "DEFAULT_CONFIG",
    "Node",
    "MCTSTree",
    "ucb_scores",
    "select_best",
    "GameRecord",
    "play",
    "run_rollouts",
]
