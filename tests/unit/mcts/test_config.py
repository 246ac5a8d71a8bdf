"""Test search configuration."""

import logging
import math
from pathlib import Path

import pytest

from arena_mcts.mcts.config import SearchConfig

CONFIG_DIR = Path(__file__).parents[3] / "configs" / "mcts"


def test_defaults():
    config = SearchConfig()
    assert config.ucb_c == pytest.approx(math.sqrt(2))
    assert config.log_bias == 1e-4
    assert config.arena_block_size == 4096
    assert config.n_rollouts == 100_000
    assert config.seed is None


@pytest.mark.parametrize("kwargs", [
    {"ucb_c": 0.0},
    {"log_bias": 0.0},
    {"arena_block_size": 0},
    {"n_rollouts": -1},
    {"log_every": 0},
])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        SearchConfig(**kwargs)


def test_from_dict_ignores_unknown_keys(caplog):
    with caplog.at_level(logging.WARNING):
        config = SearchConfig.from_dict({"n_rollouts": 10, "device": "cuda"})
    assert config.n_rollouts == 10
    assert "device" in caplog.text


def test_from_yaml_nested(tmp_path):
    path = tmp_path / "search.yaml"
    path.write_text("search:\n  n_rollouts: 250\n  ucb_c: 2.0\n  seed: 3\n")
    config = SearchConfig.from_yaml(path)
    assert config.n_rollouts == 250
    assert config.ucb_c == 2.0
    assert config.seed == 3


def test_from_yaml_flat(tmp_path):
    path = tmp_path / "search.yaml"
    path.write_text("arena_block_size: 64\n")
    assert SearchConfig.from_yaml(path).arena_block_size == 64


def test_from_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "search.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        SearchConfig.from_yaml(path)


def test_shipped_configs_load():
    base = SearchConfig.from_yaml(CONFIG_DIR / "base.yaml")
    assert base == SearchConfig()
    fast = SearchConfig.from_yaml(CONFIG_DIR / "fast.yaml")
    assert fast.n_rollouts == 5000
