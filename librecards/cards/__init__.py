"""Decks and the in-memory card state."""

from .card_state import InMemoryCardState
from .deck import Deck, DeckDefinition, DeckExhaustedError

__all__ = ["InMemoryCardState", "Deck", "DeckDefinition", "DeckExhaustedError"]
