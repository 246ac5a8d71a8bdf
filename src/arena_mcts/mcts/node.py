"""MCTS search tree node.

A node owns one game state plus per-move statistics:
- tries[i]: rollouts that took move i
- wins[i]: sum of terminal outcomes (+1/0/-1, player 0's view) of those rollouts
- children[i]: the subtree reached by move i, allocated in the arena

children[i] is set exactly when tries[i] > 0. Random rollouts materialize a
full path of nodes down to a terminal state, so there is no untracked
simulation phase.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional

import numpy as np

from ..core.arena import Arena
from ..core.errors import ContractViolation
from ..games.base import G, WinState
from .config import DEFAULT_CONFIG, SearchConfig
from .ucb import select_best, ucb_scores


@dataclass(eq=False)
class Node(Generic[G]):
    """Search tree node.

    Attributes:
        state: Game state, never mutated after construction
        outcome: Cached ``state.winner()``
        children: Per-move child slots (None if unexplored)
        tries: N_i - visits per move
        wins: W_i - accumulated outcome per move
        tot_tries: N - completed rollouts through this node
        valid_mask: Legal moves of ``state``
    """
    state: G
    outcome: WinState = field(init=False)
    children: List[Optional["Node[G]"]] = field(init=False)
    tries: np.ndarray = field(init=False)
    wins: np.ndarray = field(init=False)
    tot_tries: int = field(init=False, default=0)
    valid_mask: np.ndarray = field(init=False)

    def __post_init__(self):
        n = self.state.n_moves()
        self.outcome = WinState(self.state.winner())
        self.children = [None] * n
        self.tries = np.zeros(n, dtype=np.int64)
        self.wins = np.zeros(n, dtype=np.int64)
        self.valid_mask = np.fromiter(
            (self.state.is_valid(i) for i in range(n)), dtype=bool, count=n
        )

    def is_leaf(self) -> bool:
        """Terminal state: no further expansion possible."""
        return self.outcome != WinState.NONE

    def is_move_explored(self, move: int) -> bool:
        return self.children[move] is not None

    def child(self, move: int) -> "Node[G]":
        """Owned child for an explored move."""
        child = self.children[move]
        if child is None:
            raise ContractViolation(f"Move {move} has not been explored")
        return child

    def n_unplayed_moves(self) -> int:
        """Number of valid moves never tried from this node."""
        return int(np.count_nonzero(self.valid_mask & (self.tries == 0)))

    # ------------------------------------------------------------------
    # Rollouts
    # ------------------------------------------------------------------

    def ucb_rollout(
        self,
        rng: np.random.Generator,
        arena: Arena["Node[G]"],
        config: SearchConfig = DEFAULT_CONFIG
    ) -> WinState:
        """One rollout following the UCB exploration rule.

        Expands via ``random_rollout`` while any move is unexplored, and only
        selects by UCB once every move has been visited.

        Returns:
            Terminal outcome reached by the rollout
        """
        if self.is_leaf():
            return self.outcome

        # random_rollout updates counts
        if self.n_unplayed_moves() > 0:
            return self.random_rollout(rng, arena)

        move = self.ucb_move(config)
        outcome = self.child(move).ucb_rollout(rng, arena, config)
        self._update(move, outcome)
        return outcome

    def random_rollout(
        self,
        rng: np.random.Generator,
        arena: Arena["Node[G]"]
    ) -> WinState:
        """Random playout down to a terminal state, aka "simulation".

        Every step becomes a permanent node: one fresh path per call.
        """
        if self.is_leaf():
            self.tot_tries = 1
            return self.outcome

        move = self.random_unplayed_move(rng)
        node = arena.alloc(self.state.move(move))
        outcome = node.random_rollout(rng, arena)
        if self.children[move] is not None:
            raise ContractViolation(f"Move {move} expanded twice")
        self.children[move] = node
        self._update(move, outcome)
        return outcome

    # ------------------------------------------------------------------
    # Move selection
    # ------------------------------------------------------------------

    def random_move(self, rng: np.random.Generator) -> int:
        """Uniformly random valid move."""
        n_valid = self.state.n_valid_moves()
        if n_valid != int(np.count_nonzero(self.valid_mask)):
            raise ContractViolation(
                f"n_valid_moves()={n_valid} disagrees with is_valid() "
                f"({int(np.count_nonzero(self.valid_mask))} valid)"
            )
        return _sample_move(self.valid_mask, rng)

    def random_unplayed_move(self, rng: np.random.Generator) -> int:
        """Uniformly random valid move that has not been tried yet."""
        return _sample_move(self.valid_mask & (self.tries == 0), rng)

    def ucb_move(self, config: SearchConfig = DEFAULT_CONFIG) -> int:
        """Move according to the UCB (upper confidence bound) rule.

        Requires every valid move to be explored. A child that is already a
        proven win for the mover is returned without scoring the rest.
        """
        moves = np.flatnonzero(self.valid_mask)
        if len(moves) == 0:
            raise ContractViolation("UCB selection with no valid moves")
        if self.n_unplayed_moves() > 0:
            raise ContractViolation("UCB selection before all moves are explored")

        player = self.state.player_turn()
        flip = 1.0 if player == 0 else -1.0
        proven_win = WinState.WIN if player == 0 else WinState.LOSS

        # exit early if one of our children is a winning leaf state.
        for i in moves:
            if self.children[i].outcome == proven_win:
                return int(i)

        scores = ucb_scores(
            self.wins[moves],
            self.tries[moves],
            self.tot_tries,
            flip,
            c=config.ucb_c,
            log_bias=config.log_bias
        )
        return select_best(moves, scores)

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------

    def clone(self, arena: Arena["Node[G]"]) -> "Node[G]":
        """Deep copy this subtree into ``arena``."""
        node = arena.alloc(self.state)
        node.tot_tries = self.tot_tries
        node.tries = self.tries.copy()
        node.wins = self.wins.copy()
        node.children = [
            child.clone(arena) if child is not None else None
            for child in self.children
        ]
        return node

    def _update(self, move: int, outcome: WinState) -> None:
        if outcome == WinState.NONE:
            raise ContractViolation("Rollout ended in a non-terminal state")
        self.tries[move] += 1
        self.tot_tries += 1
        self.wins[move] += int(outcome)

    def __repr__(self) -> str:
        return (f"Node(player={self.state.player_turn()}, outcome={self.outcome.name}, "
                f"visits={self.tot_tries}, unplayed={self.n_unplayed_moves()})")


def _sample_move(mask: np.ndarray, rng: np.random.Generator) -> int:
    """Pick the k-th qualifying index for k uniform in [1, count].

    One scan over the running count of qualifying moves; no candidate list.
    """
    count = int(np.count_nonzero(mask))
    if count == 0:
        raise ContractViolation("No move to sample from")
    k = rng.integers(1, count + 1)
    return int(np.argmax(np.cumsum(mask) == k))
