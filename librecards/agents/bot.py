"""Bot player for LibreCards."""

import random
import re
from dataclasses import dataclass, field
from typing import Optional

from ..core.entities import Player, Template
from ..llm.openrouter import OpenRouterClient
from .prompts import PLAY_PROMPT, build_system_prompt, generate_personality


@dataclass
class BotPlayer:
    """A bot that picks cards from its player's hand.

    Without an LLM client the bot plays random cards.
    """

    player: Player
    model: str = "anthropic/claude-sonnet-4"
    llm_client: Optional[OpenRouterClient] = None
    personality_traits: list[str] = field(default_factory=list)
    system_prompt: str = ""
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self):
        if not self.personality_traits:
            self.personality_traits = generate_personality()
        self.system_prompt = build_system_prompt(self.player.name, self.personality_traits)

    @property
    def name(self) -> str:
        return self.player.name

    async def choose_cards(self, template: Template, judge_name: str) -> list[int]:
        """Choose card ids to play for a template.

        Args:
            template: The round's template card.
            judge_name: Name of this round's judge.

        Returns:
            Ids of the cards to play, one per blank, all from the hand.
        """
        hand = self.player.cards
        count = min(template.blanks, len(hand))
        if self.llm_client is None:
            return [card.id for card in self.rng.sample(hand, count)]

        prompt = PLAY_PROMPT.format(
            judge=judge_name,
            template=template.content,
            hand="\n".join(f"{i}. {card.content}" for i, card in enumerate(hand, start=1)),
            count=count,
        )
        response = await self.llm_client.generate(
            system_prompt=self.system_prompt,
            user_prompt=prompt,
            model=self.model,
            temperature=0.9,
            max_tokens=30,
        )
        positions = self._extract_positions(response, len(hand), count)
        return [hand[i].id for i in positions]

    def _extract_positions(self, response: str, hand_size: int, count: int) -> list[int]:
        """Extract zero-based hand positions from an LLM response.

        Invalid and repeated numbers are skipped; missing picks are filled
        at random from the rest of the hand.
        """
        positions: list[int] = []
        for match in re.findall(r"\d+", response):
            index = int(match) - 1
            if 0 <= index < hand_size and index not in positions:
                positions.append(index)
            if len(positions) == count:
                return positions

        remaining = [i for i in range(hand_size) if i not in positions]
        positions.extend(self.rng.sample(remaining, count - len(positions)))
        return positions
