"""LibreCards - round coordinator for a judge-based party card game."""

__version__ = "0.1.0"
