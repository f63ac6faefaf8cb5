"""Judge rotation."""

import logging
from typing import Collection, Optional
from uuid import UUID

from ..core.entities import Player
from ..core.interfaces import JudgePicker

logger = logging.getLogger(__name__)


class RotatingJudgePicker(JudgePicker):
    """Hands the judge role round robin through the roster.

    The roster order is the order players are given in, which for the
    in-memory lobby is join order. If the previous judge has left, the
    rotation restarts from the front of the roster.
    """

    def __init__(self):
        self._current: Optional[UUID] = None

    @property
    def current_judge_id(self) -> Optional[UUID]:
        return self._current

    def pick_new_judge(self, players: Collection[Player]) -> None:
        roster = [p.id for p in players]
        if not roster:
            raise ValueError("Cannot pick a judge from an empty roster")

        if self._current in roster:
            next_index = (roster.index(self._current) + 1) % len(roster)
        else:
            next_index = 0

        self._current = roster[next_index]
        logger.info("New judge: %s", self._current)
