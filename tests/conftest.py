"""Pytest fixtures for testing."""

import pytest
import numpy as np


def pytest_addoption(parser):
    parser.addoption("--runslow", action="store_true", default=False,
                     help="Run full-budget end-to-end games")


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running end-to-end games")


def pytest_collection_modifyitems(config, items):
    """Skip slow games unless --runslow is given."""
    if config.getoption("--runslow"):
        return
    skip_slow = pytest.mark.skip(reason="needs --runslow")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def seed():
    """Seed for reproducibility."""
    return 42


@pytest.fixture
def rng(seed):
    """Seeded random generator."""
    return np.random.default_rng(seed)


@pytest.fixture
def arena():
    """Empty node arena."""
    from arena_mcts.core.arena import Arena
    from arena_mcts.mcts.node import Node
    return Arena(Node)


@pytest.fixture
def empty_board():
    """Initial tic-tac-toe state."""
    from arena_mcts.games.tictactoe import TicTacToe
    return TicTacToe()


@pytest.fixture
def play_moves():
    """Apply a sequence of moves to a state."""
    def apply(state, moves):
        for move in moves:
            state = state.move(move)
        return state
    return apply
