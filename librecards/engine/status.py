"""Game status and its transitions."""

import logging

from ..core.entities import GameState
from ..core.errors import IllegalTransitionError
from ..core.interfaces import GameStatus

logger = logging.getLogger(__name__)


# Each state may only move to the one that follows it in a round
TRANSITIONS = {
    GameState.WAITING: GameState.PLAYING,
    GameState.PLAYING: GameState.JUDGING,
    GameState.JUDGING: GameState.WAITING,
}


class InMemoryGameStatus(GameStatus):
    """Tracks the coarse state of one game."""

    def __init__(self, initial: GameState = GameState.WAITING):
        """Initialize the status.

        Args:
            initial: State to start in. New games start waiting.
        """
        self._state = initial
        self.round_number = 0

    @property
    def current_state(self) -> GameState:
        return self._state

    def switch_to_playing(self) -> None:
        self._switch(GameState.PLAYING)
        self.round_number += 1

    def switch_to_judging(self) -> None:
        self._switch(GameState.JUDGING)

    def switch_to_waiting(self) -> None:
        self._switch(GameState.WAITING)

    def _switch(self, target: GameState) -> None:
        if TRANSITIONS[self._state] != target:
            raise IllegalTransitionError(self._state, target)

        logger.info("Game state %s -> %s", self._state.name, target.name)
        self._state = target
