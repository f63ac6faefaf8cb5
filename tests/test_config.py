"""
Tests for config module.
"""

from pathlib import Path

import pytest

from librecards.config import GameConfig, load_config

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


def test_defaults():
    config = GameConfig()

    assert config.hand_size == 10
    assert config.min_players == 3


def test_from_dict():
    config = GameConfig.from_dict({"hand_size": 7, "rounds": 5, "seed": 3})

    assert (config.hand_size, config.rounds, config.seed) == (7, 5, 3)


def test_unknown_keys_rejected():
    with pytest.raises(ValueError, match="hand_sise"):
        GameConfig.from_dict({"hand_sise": 7})


def test_hand_size_must_be_positive():
    with pytest.raises(ValueError):
        GameConfig.from_dict({"hand_size": 0})


def test_load_shipped_config():
    data = load_config(str(CONFIG_DIR / "game.yaml"))

    config = GameConfig.from_dict(data["game"])
    assert config.deck_path == "config/deck.yaml"
    assert len(data["players"]) >= config.min_players


def test_load_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))
