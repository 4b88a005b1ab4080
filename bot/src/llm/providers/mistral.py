from __future__ import annotations

import logging

from mistralai import Mistral

from llm.base import LLMProvider
from llm.types import ChatMessage

logger = logging.getLogger(__name__)


class MistralProvider(LLMProvider):
    DEFAULT_MODEL = "mistral-small-latest"

    def __init__(self, api_key: str, model: str | None = None):
        self.client = Mistral(api_key=api_key)
        self.model = model or self.DEFAULT_MODEL

    async def complete(
        self,
        messages: list[ChatMessage],
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> str:
        response = await self.client.chat.complete_async(
            model=self.model,
            messages=[{"role": m.role, "content": m.content} for m in messages],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return self._parse_response(response)

    @staticmethod
    def _parse_response(response) -> str:
        if response is None or not response.choices:
            return ""
        content = response.choices[0].message.content
        if isinstance(content, str):
            return content
        # Chunked content: keep the text chunks only
        return "".join(getattr(chunk, "text", "") or "" for chunk in content or [])
