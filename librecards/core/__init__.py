"""Game entities, errors and collaborator contracts."""

from .entities import Card, GameState, Player, Template
from .errors import GameError, IllegalTransitionError, InputValidationError, StateConflictError
from .interfaces import CardState, GameStatus, JudgePicker, Lobby

__all__ = [
    "Card",
    "GameState",
    "Player",
    "Template",
    "GameError",
    "IllegalTransitionError",
    "InputValidationError",
    "StateConflictError",
    "CardState",
    "GameStatus",
    "JudgePicker",
    "Lobby",
]
