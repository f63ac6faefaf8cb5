"""Card decks and their YAML definitions."""

import random
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, field_validator

from ..core.entities import Card, Template
from ..core.errors import StateConflictError


class DeckExhaustedError(StateConflictError):
    """No cards are left to draw, even after reshuffling the discards."""


class DeckDefinition(BaseModel):
    """A deck as written in a YAML file."""
    name: str = "default"
    templates: list[str]
    cards: list[str]

    @field_validator("templates", "cards")
    @classmethod
    def not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("must contain at least one entry")
        return value


class Deck:
    """Draw and discard piles for response cards and templates.

    Response cards get ids by their position in the definition, starting
    at 1. When a draw pile runs out, its discard pile is shuffled back in.
    """

    def __init__(self, definition: DeckDefinition, rng: Optional[random.Random] = None):
        self.name = definition.name
        self.rng = rng or random.Random()

        self._cards = [Card(id=i, content=text) for i, text in enumerate(definition.cards, start=1)]
        self._templates = [Template(content=text) for text in definition.templates]
        self._card_discards: list[Card] = []
        self._template_discards: list[Template] = []

        self.rng.shuffle(self._cards)
        self.rng.shuffle(self._templates)

    @classmethod
    def from_yaml(cls, path: str, rng: Optional[random.Random] = None) -> "Deck":
        with open(Path(path)) as f:
            data = yaml.safe_load(f)
        return cls(DeckDefinition.model_validate(data), rng=rng)

    @property
    def cards_left(self) -> int:
        return len(self._cards) + len(self._card_discards)

    def draw_cards(self, count: int) -> list[Card]:
        if count > self.cards_left:
            raise DeckExhaustedError(f"Cannot draw {count} cards, {self.cards_left} left")

        drawn = []
        for _ in range(count):
            if not self._cards:
                self._reshuffle(self._cards, self._card_discards)
            drawn.append(self._cards.pop())
        return drawn

    def draw_template(self) -> Template:
        if not self._templates:
            if not self._template_discards:
                raise DeckExhaustedError("No templates left to draw")
            self._reshuffle(self._templates, self._template_discards)
        return self._templates.pop()

    def discard_cards(self, cards: list[Card]) -> None:
        self._card_discards.extend(cards)

    def discard_template(self, template: Template) -> None:
        self._template_discards.append(template)

    def _reshuffle(self, pile: list, discards: list) -> None:
        pile.extend(discards)
        discards.clear()
        self.rng.shuffle(pile)
