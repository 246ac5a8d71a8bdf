"""Search configuration."""

import logging
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..core.arena import DEFAULT_BLOCK_SIZE

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Configuration for MCTS search and self-play."""
    # UCB exploration: mean + ucb_c * sqrt(log(N + log_bias) / n)
    ucb_c: float = math.sqrt(2.0)
    log_bias: float = 1e-4
    arena_block_size: int = DEFAULT_BLOCK_SIZE
    n_rollouts: int = 100_000
    seed: Optional[int] = None
    # Log progress every this many decided moves
    log_every: int = 1

    def __post_init__(self):
        if self.ucb_c <= 0:
            raise ValueError("ucb_c must be positive")
        if self.log_bias <= 0:
            raise ValueError("log_bias must be positive")
        if self.arena_block_size <= 0:
            raise ValueError("arena_block_size must be positive")
        if self.n_rollouts < 0:
            raise ValueError("n_rollouts must be non-negative")
        if self.log_every <= 0:
            raise ValueError("log_every must be positive")

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "SearchConfig":
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            logger.warning(f"Ignoring unknown search config keys: {unknown}")
        return cls(**{k: v for k, v in config.items() if k in known})

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "SearchConfig":
        """Load a config file. Values may sit under a top-level ``search`` key."""
        with open(path, "r") as f:
            config = yaml.safe_load(f) or {}
        if not isinstance(config, dict):
            raise ValueError(f"Config {path} must contain a mapping")
        return cls.from_dict(config.get("search", config))


DEFAULT_CONFIG = SearchConfig()
