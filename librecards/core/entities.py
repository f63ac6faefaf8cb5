"""Cards, templates, players and the coarse game state."""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence
from uuid import UUID


class GameState(Enum):
    """Coarse state of a round."""
    WAITING = "waiting"    # Between rounds, owner may start
    PLAYING = "playing"    # Players submit cards
    JUDGING = "judging"    # Judge reviews submissions


@dataclass(frozen=True)
class Card:
    """A response card dealt to a player."""

    id: int
    content: str = ""

    def __str__(self) -> str:
        return self.content


@dataclass(frozen=True)
class Template:
    """The prompt card for the current round."""

    content: str

    @property
    def blanks(self) -> int:
        """Number of blanks to fill, at least one."""
        return max(1, self.content.count("<BLANK>"))

    def __str__(self) -> str:
        return self.content


class Player:
    """A participant and the hand they hold.

    The hand is read-only from the outside. A card state deals and takes
    cards through ``give_cards`` and ``take_cards``.
    """

    def __init__(self, id: UUID, name: str = "", cards: Iterable[Card] = ()):
        self.id = id
        self.name = name or str(id)[:8]
        self._cards: list[Card] = list(cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Player(id={self.id!r}, name={self.name!r}, cards={len(self._cards)})"

    @property
    def cards(self) -> tuple[Card, ...]:
        """Cards currently held."""
        return tuple(self._cards)

    def holds(self, card_ids: Sequence[int]) -> bool:
        """Check the hand contains every id, respecting repeats."""
        in_hand = Counter(card.id for card in self._cards)
        wanted = Counter(card_ids)
        return all(in_hand[card_id] >= count for card_id, count in wanted.items())

    def give_cards(self, cards: Iterable[Card]) -> None:
        self._cards.extend(cards)

    def take_cards(self, card_ids: Sequence[int]) -> list[Card]:
        """Remove one card per requested id, in request order."""
        if not self.holds(card_ids):
            raise ValueError(f"{self.name} does not hold cards {list(card_ids)}")

        taken = []
        for card_id in card_ids:
            index = next(i for i, card in enumerate(self._cards) if card.id == card_id)
            taken.append(self._cards.pop(index))
        return taken
