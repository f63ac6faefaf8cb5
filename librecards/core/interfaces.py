"""Collaborator contracts consumed by the game orchestrator.

Each collaborator owns one slice of the game and is only mutated through
its commands. The orchestrator reads, validates, then commands.
"""

from abc import ABC, abstractmethod
from typing import Collection, Mapping, Optional, Sequence
from uuid import UUID

from .entities import Card, GameState, Player, Template


class GameStatus(ABC):
    """Owns the coarse game state and its transitions."""

    @property
    @abstractmethod
    def current_state(self) -> GameState:
        ...

    @abstractmethod
    def switch_to_playing(self) -> None:
        ...

    @abstractmethod
    def switch_to_judging(self) -> None:
        ...

    @abstractmethod
    def switch_to_waiting(self) -> None:
        ...


class CardState(ABC):
    """Owns the hands, the active template and the round's submissions."""

    @property
    @abstractmethod
    def current_template_card(self) -> Optional[Template]:
        """The active template, None before the first draw."""

    @property
    @abstractmethod
    def submissions(self) -> Mapping[UUID, tuple[Card, ...]]:
        ...

    @abstractmethod
    def refill_player_cards(self, players: Collection[Player]) -> None:
        """Top up every hand in the roster to the hand size."""

    @abstractmethod
    def draw_template_card(self) -> None:
        """Activate a new template, replacing the previous one."""

    @abstractmethod
    def submit_cards(self, player: Player, card_ids: Sequence[int]) -> None:
        """Move the named cards from the hand into the player's submission."""

    @abstractmethod
    def clear_submissions(self) -> None:
        ...


class Lobby(ABC):
    """Owns the roster and its owner."""

    @property
    @abstractmethod
    def owner_id(self) -> UUID:
        ...

    @property
    @abstractmethod
    def has_enough_players(self) -> bool:
        ...

    @property
    @abstractmethod
    def players(self) -> Collection[Player]:
        ...


class JudgePicker(ABC):
    """Owns the judge rotation."""

    @property
    @abstractmethod
    def current_judge_id(self) -> Optional[UUID]:
        """The current judge, None before the first round."""

    @abstractmethod
    def pick_new_judge(self, players: Collection[Player]) -> None:
        """Select the next judge from the given roster."""
