"""Arena-backed Monte Carlo Tree Search for two-player games.

Core loop per rollout:
1. Select: follow UCB1 while every move at a node has been tried
2. Expand + simulate: play random untried moves down to a terminal state,
   keeping every step as a tree node
3. Backprop: add the terminal outcome to each move on the path

Components:
- core/ - Arena allocator, fast logarithm, errors
- games/ - Game capability contract, tic-tac-toe
- mcts/ - Node statistics and rollouts, UCB, self-play driver
"""

__version__ = "0.1.0"

from .core.arena import Arena
from .core.errors import ContractViolation
from .games.base import Game, WinState
from .games.tictactoe import TicTacToe
from .mcts.config import SearchConfig
from .mcts.node import Node
from .mcts.search import GameRecord, play

__all__ = [
    "Arena",
    "ContractViolation",
    "Game",
    "WinState",
    "TicTacToe",
    "SearchConfig",
    "Node",
    "GameRecord",
    "play",
]
