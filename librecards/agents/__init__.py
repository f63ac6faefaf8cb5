"""Bot players and prompt management."""

from .bot import BotPlayer

__all__ = ["BotPlayer"]
