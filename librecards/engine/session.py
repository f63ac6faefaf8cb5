"""Game sessions: one exclusive owner per game."""

import logging
import random
import threading
import uuid
from typing import Optional, Sequence
from uuid import UUID

from ..cards.card_state import InMemoryCardState
from ..cards.deck import Deck
from ..communication.markdown_logger import MarkdownLogger
from ..config import GameConfig
from ..core.entities import Card, GameState, Player, Template
from ..core.errors import StateConflictError
from ..lobby import InMemoryLobby
from .game import Game
from .judge import RotatingJudgePicker
from .status import InMemoryGameStatus

logger = logging.getLogger(__name__)


class GameSession:
    """Serializes every call against one game.

    The game checks preconditions and then mutates its collaborators. The
    session lock makes that check-then-mutate atomic for concurrent callers.
    """

    def __init__(self, session_id: UUID, game: Game, lobby: InMemoryLobby):
        self.session_id = session_id
        self.lobby = lobby
        self._game = game
        self._lock = threading.Lock()

    @classmethod
    def create(
        cls,
        config: GameConfig,
        owner: Player,
        deck: Deck,
        journal: Optional[MarkdownLogger] = None,
    ) -> "GameSession":
        """Build a session around a fresh set of collaborators.

        Args:
            config: Game configuration.
            owner: Player who owns the lobby.
            deck: Deck for this session only. Decks must not be shared.
            journal: Optional markdown journal.
        """
        lobby = InMemoryLobby(owner, min_players=config.min_players)
        game = Game(
            game_status=InMemoryGameStatus(),
            card_state=InMemoryCardState(deck, hand_size=config.hand_size),
            lobby=lobby,
            judge_picker=RotatingJudgePicker(),
            journal=journal,
        )
        return cls(uuid.uuid4(), game, lobby)

    def join(self, player: Player) -> None:
        with self._lock:
            self._require_waiting("join")
            self.lobby.join(player)

    def leave(self, player_id: UUID) -> None:
        with self._lock:
            self._require_waiting("leave")
            self.lobby.leave(player_id)

    def _require_waiting(self, action: str) -> None:
        # The roster is fixed from the deal until the round is closed
        state = self._game.game_state
        if state != GameState.WAITING:
            raise StateConflictError(f"Players cannot {action} while {state.name.lower()}")

    def start_game(self, requester_id: UUID) -> None:
        with self._lock:
            self._game.start_game(requester_id)

    def play_cards(self, player_id: UUID, card_ids: Sequence[int]) -> None:
        with self._lock:
            self._game.play_cards(player_id, card_ids)

    def finish_round(self, requester_id: UUID) -> None:
        with self._lock:
            self._game.finish_round(requester_id)

    @property
    def judge_player_id(self) -> Optional[UUID]:
        with self._lock:
            return self._game.judge_player_id

    @property
    def template_card(self) -> Optional[Template]:
        with self._lock:
            return self._game.template_card

    @property
    def game_state(self) -> GameState:
        with self._lock:
            return self._game.game_state

    @property
    def submissions(self) -> dict[UUID, tuple[Card, ...]]:
        with self._lock:
            return dict(self._game.submissions)

    def hand_of(self, player_id: UUID) -> tuple[Card, ...]:
        """Snapshot of a player's hand."""
        with self._lock:
            return self.lobby.get_player(player_id).cards


class SessionRegistry:
    """Keeps the open sessions, each with its own collaborators."""

    def __init__(self, config: GameConfig, deck_factory=None):
        """Initialize the registry.

        Args:
            config: Configuration applied to every new session.
            deck_factory: Callable returning a new Deck per session. Defaults
                to loading ``config.deck_path``.
        """
        self.config = config
        self._deck_factory = deck_factory or self._load_deck
        self._sessions: dict[UUID, GameSession] = {}
        self._lock = threading.Lock()
        self._decks_loaded = 0

    def _load_deck(self) -> Deck:
        # Each session gets its own shuffle; a configured seed stays reproducible
        if self.config.seed is None:
            rng = random.Random()
        else:
            rng = random.Random(f"{self.config.seed}:{self._decks_loaded}")
        self._decks_loaded += 1
        return Deck.from_yaml(self.config.deck_path, rng=rng)

    def create(self, owner: Player, journal: Optional[MarkdownLogger] = None) -> GameSession:
        with self._lock:
            deck = self._deck_factory()
        session = GameSession.create(self.config, owner, deck, journal=journal)
        with self._lock:
            self._sessions[session.session_id] = session
        logger.info("Opened session %s for %s", session.session_id, owner.name)
        return session

    def get(self, session_id: UUID) -> GameSession:
        with self._lock:
            return self._sessions[session_id]

    def close(self, session_id: UUID) -> None:
        with self._lock:
            del self._sessions[session_id]
        logger.info("Closed session %s", session_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
