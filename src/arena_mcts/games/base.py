"""Game capability contract.

Any game searched by the engine implements these methods. The contract is
structural: games do not inherit from a shared base.
"""

from enum import IntEnum
from typing import Protocol, TypeVar


class WinState(IntEnum):
    """Game outcome from player 0's point of view."""
    WIN = 1
    TIE = 0
    LOSS = -1
    NONE = -2  # game still in progress


class Game(Protocol):
    """Two-player, perfect-information game state.

    States are immutable: ``move`` returns a new state.
    """

    @staticmethod
    def n_moves() -> int:
        """Fixed upper bound on the move index range."""
        ...

    def player_turn(self) -> int:
        """Whose move it is, 0 or 1. Player 0 goes first."""
        ...

    def winner(self) -> WinState:
        """Outcome, or ``WinState.NONE`` if the game is not over."""
        ...

    def n_valid_moves(self) -> int:
        """Number of legal moves, ``0 < n <= n_moves()`` unless terminal."""
        ...

    def is_valid(self, move: int) -> bool:
        """Whether ``0 <= move < n_moves()`` is legal in this state."""
        ...

    def move(self, move: int) -> "Game":
        """Play ``move`` and return the resulting new state."""
        ...


G = TypeVar("G", bound=Game)
