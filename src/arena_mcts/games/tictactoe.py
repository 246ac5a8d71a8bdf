"""Tic-tac-toe on a 3x3 board.

Each player's marks are stored in a 9-bit board, bit ``3 * row + col``.
"""

from dataclasses import dataclass
from typing import Tuple

from ..core.errors import ContractViolation
from .base import WinState

FULL_BOARD = 0x1FF

WINNING_LINES = (
    0b000_000_111, 0b000_111_000, 0b111_000_000,
    0b001_001_001, 0b010_010_010, 0b100_100_100,
    0b100_010_001, 0b001_010_100,
)


def _is_win(board: int) -> bool:
    return any((line & board) == line for line in WINNING_LINES)


@dataclass(frozen=True)
class TicTacToe:
    """Immutable tic-tac-toe state. Player 0 plays X and moves first."""
    xos: Tuple[int, int] = (0, 0)
    iplayer: int = 0

    @staticmethod
    def n_moves() -> int:
        return 9

    def player_turn(self) -> int:
        return self.iplayer

    def winner(self) -> WinState:
        w0 = _is_win(self.xos[0])
        w1 = _is_win(self.xos[1])
        if not (w0 or w1) and (self.xos[0] | self.xos[1]) == FULL_BOARD:
            return WinState.TIE
        if w0:
            return WinState.WIN
        if w1:
            return WinState.LOSS
        return WinState.NONE

    def n_valid_moves(self) -> int:
        return 9 - bin(self.xos[0] | self.xos[1]).count("1")

    def is_valid(self, move: int) -> bool:
        return ((1 << move) & (self.xos[0] | self.xos[1])) == 0

    def move(self, move: int) -> "TicTacToe":
        xos = list(self.xos)
        xos[self.iplayer] |= 1 << move
        return TicTacToe(xos=(xos[0], xos[1]), iplayer=(self.iplayer + 1) & 1)

    def __str__(self) -> str:
        rows = []
        for i in range(3):
            row = []
            for j in range(3):
                bit = 1 << (3 * i + j)
                x = bool(self.xos[0] & bit)
                o = bool(self.xos[1] & bit)
                if x and o:
                    raise ContractViolation(f"Cell {3 * i + j} is owned by both players")
                row.append("X" if x else "O" if o else "-")
            rows.append("".join(row))
        return "\n".join(rows) + "\n"
