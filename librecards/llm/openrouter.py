"""OpenRouter API client used by bot players."""

import logging
import os
from typing import Optional

from openai import AsyncOpenAI
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ChatMessage(BaseModel):
    """One turn of a card-picking conversation."""
    role: str
    content: str


class OpenRouterClient:
    """Asks an OpenRouter-hosted model which cards a bot should play."""

    BASE_URL = "https://openrouter.ai/api/v1"

    def __init__(self, api_key: Optional[str] = None, timeout: float = 30.0):
        """Initialize the OpenRouter client.

        Args:
            api_key: Key for OpenRouter. Falls back to $OPENROUTER_API_KEY.
            timeout: Request timeout in seconds.
        """
        self.api_key = api_key or os.getenv("OPENROUTER_API_KEY")
        if not self.api_key:
            raise ValueError("Bots need an OpenRouter key to call a model")

        self.client = AsyncOpenAI(
            base_url=self.BASE_URL,
            api_key=self.api_key,
            timeout=timeout,
        )

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        model: str = "anthropic/claude-sonnet-4",
        temperature: float = 0.7,
        max_tokens: int = 256,
    ) -> str:
        """Ask the model once, with the bot persona as system prompt.

        Returns:
            The assistant's response text, empty if the model returned none.
        """
        messages = [
            ChatMessage(role="system", content=system_prompt),
            ChatMessage(role="user", content=user_prompt),
        ]
        response = await self.client.chat.completions.create(
            model=model,
            messages=[m.model_dump() for m in messages],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        logger.debug("%s answered with %d choices", model, len(response.choices))
        return response.choices[0].message.content or ""
