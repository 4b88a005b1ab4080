from __future__ import annotations

import logging

import anthropic

from llm.base import LLMProvider
from llm.types import ChatMessage

logger = logging.getLogger(__name__)


class AnthropicProvider(LLMProvider):
    DEFAULT_MODEL = "claude-sonnet-4-5-20250929"

    def __init__(self, api_key: str, model: str | None = None):
        self.client = anthropic.AsyncAnthropic(api_key=api_key)
        self.model = model or self.DEFAULT_MODEL

    async def complete(
        self,
        messages: list[ChatMessage],
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> str:
        system_prompt, rest = self.split_system(messages)

        kwargs: dict = {
            "model": self.model,
            "messages": [{"role": m.role, "content": m.content} for m in rest],
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if system_prompt:
            kwargs["system"] = system_prompt

        response = await self.client.messages.create(**kwargs)
        return self._parse_response(response)

    @staticmethod
    def _parse_response(response) -> str:
        text_parts = [
            block.text
            for block in response.content or []
            if getattr(block, "type", None) == "text" and block.text
        ]
        return "\n".join(text_parts)
