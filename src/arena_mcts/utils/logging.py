"""Logging setup for search runs."""

import logging
import sys
from typing import Optional

ENGINE_LOGGER = "arena_mcts"
ARENA_LOGGER = "arena_mcts.core.arena"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    arena_level: int = logging.INFO
):
    """Route engine logs to stdout and optionally a file.

    Per-move driver logs follow ``level``. Arena block allocation is logged
    at DEBUG and stays hidden unless ``arena_level`` is lowered too.

    Args:
        level: Level for the root and ``arena_mcts`` loggers
        log_file: Optional log file path
        arena_level: Level for the arena allocator logger
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )
    logging.getLogger(ENGINE_LOGGER).setLevel(level)
    logging.getLogger(ARENA_LOGGER).setLevel(max(level, arena_level))
