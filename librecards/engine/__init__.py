"""Game engine - round rules, status, judge rotation and sessions."""

from .game import Game
from .judge import RotatingJudgePicker
from .session import GameSession, SessionRegistry
from .status import InMemoryGameStatus

__all__ = ["Game", "RotatingJudgePicker", "GameSession", "SessionRegistry", "InMemoryGameStatus"]
