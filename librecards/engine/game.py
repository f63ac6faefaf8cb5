"""Main round coordinator for LibreCards."""

import logging
from typing import Mapping, Optional, Sequence
from uuid import UUID

from ..communication.markdown_logger import MarkdownLogger
from ..core.entities import Card, GameState, Player, Template
from ..core.errors import InputValidationError, StateConflictError
from ..core.interfaces import CardState, GameStatus, JudgePicker, Lobby

logger = logging.getLogger(__name__)


class Game:
    """The LibreCards round coordinator.

    This class only enforces rules. Hands, the roster, the judge rotation
    and the coarse state all live in collaborators; every action reads them
    to validate, and only then issues commands. A rejected action issues no
    command at all.
    """

    def __init__(
        self,
        game_status: GameStatus,
        card_state: CardState,
        lobby: Lobby,
        judge_picker: JudgePicker,
        journal: Optional[MarkdownLogger] = None,
    ):
        """Initialize the game.

        Args:
            game_status: Owner of the coarse game state.
            card_state: Owner of hands, the template and submissions.
            lobby: Owner of the roster.
            judge_picker: Owner of the judge rotation.
            journal: Optional markdown journal of the rounds played.
        """
        self.game_status = game_status
        self.card_state = card_state
        self.lobby = lobby
        self.judge_picker = judge_picker
        self.journal = journal

    @property
    def judge_player_id(self) -> Optional[UUID]:
        return self.judge_picker.current_judge_id

    @property
    def template_card(self) -> Optional[Template]:
        return self.card_state.current_template_card

    @property
    def game_state(self) -> GameState:
        return self.game_status.current_state

    @property
    def submissions(self) -> Mapping[UUID, tuple[Card, ...]]:
        """Cards submitted so far this round, by player id."""
        return self.card_state.submissions

    def start_game(self, requester_id: UUID) -> None:
        """Start a new round.

        Checks run in a fixed order: state, ownership, then headcount.

        Args:
            requester_id: Player asking to start. Must own the lobby.

        Raises:
            StateConflictError: A round is in progress, the requester is not
                the owner, or there are not enough players.
        """
        state = self.game_status.current_state
        if state != GameState.WAITING:
            self._reject(f"Cannot start a round while {state.name.lower()}")

        if requester_id != self.lobby.owner_id:
            self._reject("Only the lobby owner can start a round")

        if not self.lobby.has_enough_players:
            self._reject("Not enough players to start a round")

        players = self.lobby.players
        self.card_state.refill_player_cards(players)
        self.card_state.draw_template_card()
        self.judge_picker.pick_new_judge(players)
        self.game_status.switch_to_playing()

        logger.info("Round started by %s", requester_id)
        if self.journal is not None:
            self.journal.log_round_start(
                template=self.card_state.current_template_card.content,
                judge=self._name_of(self.judge_picker.current_judge_id),
                players=[p.name for p in players],
            )

    def play_cards(self, player_id: UUID, card_ids: Sequence[int]) -> None:
        """Submit cards for the current round.

        The cards leave the player's hand immediately. Once every player
        except the judge has submitted, the game moves to judging.

        Args:
            player_id: Player submitting.
            card_ids: Ids of the cards to play, in order. Repeats must be
                backed by repeated cards in the hand.

        Raises:
            InputValidationError: No card ids were given.
            StateConflictError: The game is not playing, the player is the
                judge or unknown, already submitted, or lacks the cards.
        """
        card_ids = list(card_ids)
        if not card_ids:
            raise InputValidationError("At least one card must be played")

        if self.game_status.current_state != GameState.PLAYING:
            self._reject("Cards can only be played while playing")

        judge_id = self.judge_picker.current_judge_id
        if player_id == judge_id:
            self._reject("The judge cannot play cards")

        player = self._find_player(player_id)
        if player is None:
            self._reject(f"Player {player_id} is not in the lobby")

        if not player.holds(card_ids):
            self._reject(f"{player.name} does not hold cards {card_ids}")

        if player_id in self.card_state.submissions:
            self._reject(f"{player.name} already played this round")

        self.card_state.submit_cards(player, card_ids)
        logger.debug("%s played %s", player.name, card_ids)

        if self.journal is not None:
            self.journal.log_play(player.name, [c.content for c in self.card_state.submissions[player_id]])

        expected = {p.id for p in self.lobby.players if p.id != judge_id}
        if expected <= set(self.card_state.submissions):
            self.game_status.switch_to_judging()

    def finish_round(self, requester_id: UUID) -> None:
        """Close the judging phase and return to waiting.

        Picking a winner is left to the caller; this only ends the round.

        Raises:
            StateConflictError: The game is not judging, or the requester is
                not the judge.
        """
        if self.game_status.current_state != GameState.JUDGING:
            self._reject("A round can only be finished while judging")

        if requester_id != self.judge_picker.current_judge_id:
            self._reject("Only the judge can finish the round")

        self.card_state.clear_submissions()
        self.game_status.switch_to_waiting()

        if self.journal is not None:
            self.journal.log_round_end()

    def _find_player(self, player_id: UUID) -> Optional[Player]:
        return next((p for p in self.lobby.players if p.id == player_id), None)

    def _name_of(self, player_id: Optional[UUID]) -> str:
        player = self._find_player(player_id) if player_id else None
        return player.name if player else str(player_id)

    @staticmethod
    def _reject(message: str) -> None:
        logger.warning("Rejected: %s", message)
        raise StateConflictError(message)
