"""Self-play driver: MCTS agent (player 0) against a uniform random agent.

Each MCTS turn:
1. Run the rollout budget through ucb_rollout from the current root
2. Pick the move with ucb_move
Each opponent turn picks a uniform random valid move, which the rollouts
have already explored. The chosen child becomes the new root; sibling
subtrees are abandoned.

Search is single-threaded. Root parallelization (independent trees merged
after all rollouts) would start from Node.clone and is not implemented.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterator, List, Optional

import numpy as np

from ..core.arena import Arena
from ..core.errors import ContractViolation
from ..games.base import G, WinState
from .config import DEFAULT_CONFIG, SearchConfig
from .node import Node

logger = logging.getLogger(__name__)

MCTS_PLAYER = 0


@dataclass
class GameRecord(Generic[G]):
    """States visited and moves taken during one game."""
    states: List[G] = field(default_factory=list)
    moves: List[int] = field(default_factory=list)

    @property
    def winner(self) -> WinState:
        return self.states[-1].winner()

    def __iter__(self) -> Iterator:
        # Unpacks as (states, moves).
        return iter((self.states, self.moves))

    def __len__(self) -> int:
        return len(self.moves)


def run_rollouts(
    root: Node[G],
    rng: np.random.Generator,
    arena: Arena[Node[G]],
    n_rollouts: int,
    config: SearchConfig = DEFAULT_CONFIG
) -> None:
    """Run ``n_rollouts`` UCB rollouts from ``root``."""
    for _ in range(n_rollouts):
        root.ucb_rollout(rng, arena, config)


def play(
    rng: np.random.Generator,
    game_factory: Callable[[], G],
    n_rollouts: Optional[int] = None,
    config: Optional[SearchConfig] = None
) -> GameRecord[G]:
    """Play an entire game between the MCTS agent and a random agent.

    Deterministic for a given generator state and rollout budget.

    Args:
        rng: Random source shared by rollouts and the opponent
        game_factory: Builds the initial game state
        n_rollouts: Rollouts per MCTS move (defaults to config.n_rollouts)
        config: Search configuration

    Returns:
        GameRecord with every state visited and every move taken
    """
    config = config or DEFAULT_CONFIG
    n_rollouts = config.n_rollouts if n_rollouts is None else n_rollouts
    if n_rollouts <= 0:
        raise ValueError("n_rollouts must be positive")

    arena: Arena[Node[G]] = Arena(Node, block_size=config.arena_block_size)
    tree = arena.alloc(game_factory())
    record = GameRecord(states=[tree.state])

    while not tree.is_leaf():
        player = tree.state.player_turn()
        if player == MCTS_PLAYER:
            run_rollouts(tree, rng, arena, n_rollouts, config)
            move = tree.ucb_move(config)
        elif player == 1 - MCTS_PLAYER:
            move = tree.random_move(rng)
            # Rollouts through the previous move explore the opponent's replies.
            if not tree.is_move_explored(move):
                raise ContractViolation(f"Opponent move {move} was never explored")
        else:
            raise ContractViolation(f"player_turn() returned {player}")

        if len(record) % config.log_every == 0:
            logger.info(
                f"Move {len(record) + 1}: player={player}, move={move}, "
                f"root_visits={tree.tot_tries}, arena_nodes={len(arena)}"
            )
        tree = tree.child(move)
        record.moves.append(move)
        record.states.append(tree.state)

    logger.info(f"Game over after {len(record)} moves: {record.winner.name}")
    arena.clear()
    return record
