"""Test logging setup."""

import logging

import pytest

from arena_mcts.utils.logging import ARENA_LOGGER, ENGINE_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def restore_levels():
    engine = logging.getLogger(ENGINE_LOGGER)
    arena = logging.getLogger(ARENA_LOGGER)
    root_level = logging.getLogger().level
    saved = (engine.level, arena.level, logging.getLogger().handlers[:])
    yield
    for handler in logging.getLogger().handlers:
        if handler not in saved[2]:
            handler.close()
    engine.setLevel(saved[0])
    arena.setLevel(saved[1])
    logging.getLogger().handlers[:] = saved[2]
    logging.getLogger().setLevel(root_level)


def test_engine_level_applied():
    setup_logging(logging.DEBUG, arena_level=logging.DEBUG)
    assert logging.getLogger("arena_mcts.mcts.search").isEnabledFor(logging.DEBUG)
    assert logging.getLogger(ARENA_LOGGER).isEnabledFor(logging.DEBUG)


def test_arena_debug_quiet_by_default():
    setup_logging(logging.DEBUG)
    assert logging.getLogger("arena_mcts.mcts.search").isEnabledFor(logging.DEBUG)
    assert not logging.getLogger(ARENA_LOGGER).isEnabledFor(logging.DEBUG)


def test_arena_never_louder_than_engine():
    setup_logging(logging.WARNING, arena_level=logging.DEBUG)
    assert not logging.getLogger(ARENA_LOGGER).isEnabledFor(logging.INFO)


def test_log_file(tmp_path):
    path = tmp_path / "search.log"
    setup_logging(logging.INFO, log_file=str(path))
    logging.getLogger("arena_mcts.mcts.search").info("move logged")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "move logged" in path.read_text()
