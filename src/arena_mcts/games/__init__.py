"""Games searchable by the engine."""

from .base import Game, WinState
from .tictactoe import TicTacToe

__all__ = ["Game", "WinState", "TicTacToe"]
