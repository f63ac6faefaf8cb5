"""In-memory lobby."""

import logging
from uuid import UUID

from .core.entities import Player
from .core.errors import StateConflictError
from .core.interfaces import Lobby

logger = logging.getLogger(__name__)


class InMemoryLobby(Lobby):
    """Roster of players in join order, with a fixed owner.

    The owner joins on creation and cannot leave.
    """

    def __init__(self, owner: Player, min_players: int = 3):
        if min_players < 2:
            raise ValueError("A round needs at least a judge and one player")

        self._owner_id = owner.id
        self.min_players = min_players
        self._players: list[Player] = [owner]

    @property
    def owner_id(self) -> UUID:
        return self._owner_id

    @property
    def has_enough_players(self) -> bool:
        return len(self._players) >= self.min_players

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    def join(self, player: Player) -> None:
        if player in self._players:
            raise StateConflictError(f"{player.name} is already in the lobby")
        self._players.append(player)
        logger.info("%s joined (%d players)", player.name, len(self._players))

    def leave(self, player_id: UUID) -> None:
        if player_id == self._owner_id:
            raise StateConflictError("The owner cannot leave the lobby")
        player = self.get_player(player_id)
        self._players.remove(player)
        logger.info("%s left (%d players)", player.name, len(self._players))

    def get_player(self, player_id: UUID) -> Player:
        for player in self._players:
            if player.id == player_id:
                return player
        raise KeyError(player_id)
