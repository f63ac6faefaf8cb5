"""Game configuration."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class GameConfig:
    """Configuration for a game."""
    hand_size: int = 10
    min_players: int = 3
    rounds: int = 3
    deck_path: str = "config/deck.yaml"
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "GameConfig":
        """Build a config from the ``game`` section of a config file.

        Unknown keys are rejected so typos don't silently fall back to defaults.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        config = cls(**data)
        if config.hand_size < 1:
            raise ValueError("hand_size must be positive")
        return config


def load_config(config_path: str = "config/game.yaml") -> dict:
    """Load the raw configuration from a YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        return yaml.safe_load(f) or {}
