"""Property tests: statistics stay consistent under any number of rollouts."""

import numpy as np
import pytest

from arena_mcts.core.arena import Arena
from arena_mcts.games.base import WinState
from arena_mcts.mcts.config import SearchConfig
from arena_mcts.mcts.node import Node
from arena_mcts.mcts.tree import MCTSTree


@pytest.mark.parametrize("n_rollouts", [1, 9, 50, 400])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_invariants_after_rollouts(empty_board, n_rollouts, seed):
    """tot_tries == sum(tries), explored iff tries > 0, |wins| <= tries."""
    rng = np.random.default_rng(seed)
    arena = Arena(Node, block_size=64)
    root = arena.alloc(empty_board)
    for _ in range(n_rollouts):
        root.ucb_rollout(rng, arena)

    tree = MCTSTree(root)
    assert tree.find_violations() == []
    assert tree.count_nodes() == len(arena)
    assert root.tot_tries == n_rollouts


@pytest.mark.parametrize("moves", [[4], [0, 4], [0, 4, 8, 2]])
def test_invariants_from_midgame_root(empty_board, play_moves, moves, rng, arena):
    root = arena.alloc(play_moves(empty_board, moves))
    for _ in range(200):
        root.ucb_rollout(rng, arena)
    assert MCTSTree(root).find_violations() == []


def test_rollout_outcomes_match_leaves(empty_board, rng, arena):
    """Wins at the root add up to the outcomes the rollouts returned."""
    root = arena.alloc(empty_board)
    outcomes = [root.ucb_rollout(rng, arena) for _ in range(300)]
    assert all(o != WinState.NONE for o in outcomes)
    assert root.wins.sum() == sum(int(o) for o in outcomes)


def test_small_exploration_constant_keeps_invariants(empty_board, rng, arena):
    config = SearchConfig(ucb_c=0.05, log_bias=1e-2)
    root = arena.alloc(empty_board)
    for _ in range(300):
        root.ucb_rollout(rng, arena, config)
    assert MCTSTree(root).find_violations() == []


def test_arena_references_stable_across_blocks(empty_board, rng):
    """Nodes handed out early are unchanged after many more allocations."""
    arena = Arena(Node, block_size=16)
    root = arena.alloc(empty_board)
    root.ucb_rollout(rng, arena)
    first_child = next(c for c in root.children if c is not None)
    snapshot = (first_child.state, first_child.tries.copy(), first_child.wins.copy())

    other_arena_nodes = [arena.alloc(empty_board) for _ in range(200)]
    assert arena.num_blocks > 10
    assert first_child.state == snapshot[0]
    assert np.array_equal(first_child.tries, snapshot[1])
    assert np.array_equal(first_child.wins, snapshot[2])
    assert root.children[root.children.index(first_child)] is first_child
    assert len(other_arena_nodes) == 200
