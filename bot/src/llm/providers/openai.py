from __future__ import annotations

import logging
from typing import Any

from openai import AsyncOpenAI

from llm.base import LLMProvider
from llm.types import ChatMessage

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """Stateless single-shot calls to the OpenAI Responses API.

    Also works with OpenAI-compatible servers via base_url.
    """

    DEFAULT_MODEL = "gpt-4o-mini"

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        base_url: str | None = None,
    ):
        kwargs: dict = {"api_key": api_key}
        if base_url:
            kwargs["base_url"] = base_url
        self.client = AsyncOpenAI(**kwargs)
        self.model = model or self.DEFAULT_MODEL

    async def complete(
        self,
        messages: list[ChatMessage],
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> str:
        response = await self.client.responses.create(
            model=self.model,
            input=[{"role": m.role, "content": m.content} for m in messages],
            temperature=temperature,
            max_output_tokens=max_tokens,
        )
        return extract_output_text(response)


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _first(seq: Any) -> Any:
    if isinstance(seq, (list, tuple)) and seq:
        return seq[0]
    return None


def extract_output_text(response: Any) -> str:
    """Read the reply text from either response shape.

    The SDK exposes an aggregated ``output_text``; raw payloads may only carry
    ``output[0].content[0].text``. Anything else yields "".
    """
    text = _field(response, "output_text")
    if text:
        return text
    item = _first(_field(response, "output"))
    part = _first(_field(item, "content")) if item is not None else None
    text = _field(part, "text") if part is not None else None
    return text if isinstance(text, str) else ""
