"""In-memory card state: hands, template and submissions."""

import logging
from typing import Collection, Mapping, Optional, Sequence
from uuid import UUID

from ..core.entities import Card, Player, Template
from ..core.errors import StateConflictError
from ..core.interfaces import CardState
from .deck import Deck

logger = logging.getLogger(__name__)


class InMemoryCardState(CardState):
    """Deals from a deck and keeps the round's submissions."""

    def __init__(self, deck: Deck, hand_size: int = 10):
        """Initialize the card state.

        Args:
            deck: Deck to deal from. Owned by this card state.
            hand_size: Number of cards a hand is topped up to.
        """
        self.deck = deck
        self.hand_size = hand_size
        self._template: Optional[Template] = None
        self._submissions: dict[UUID, tuple[Card, ...]] = {}

    @property
    def current_template_card(self) -> Optional[Template]:
        return self._template

    @property
    def submissions(self) -> Mapping[UUID, tuple[Card, ...]]:
        return dict(self._submissions)

    def refill_player_cards(self, players: Collection[Player]) -> None:
        missing = {p.id: max(0, self.hand_size - len(p.cards)) for p in players}
        if sum(missing.values()) > self.deck.cards_left:
            raise StateConflictError("Not enough cards left to refill every hand")

        for player in players:
            if missing[player.id]:
                player.give_cards(self.deck.draw_cards(missing[player.id]))
                logger.debug("Dealt %d cards to %s", missing[player.id], player.name)

    def draw_template_card(self) -> None:
        if self._template is not None:
            self.deck.discard_template(self._template)
        self._template = self.deck.draw_template()
        logger.debug("Template: %s", self._template.content)

    def submit_cards(self, player: Player, card_ids: Sequence[int]) -> None:
        if player.id in self._submissions:
            raise StateConflictError(f"{player.name} already played this round")
        self._submissions[player.id] = tuple(player.take_cards(card_ids))

    def clear_submissions(self) -> None:
        for cards in self._submissions.values():
            self.deck.discard_cards(list(cards))
        self._submissions.clear()
