from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import types

from llm.base import LLMProvider
from llm.types import ChatMessage

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    DEFAULT_MODEL = "gemini-2.5-flash-lite"

    def __init__(self, api_key: str, model: str | None = None):
        self.client = genai.Client(api_key=api_key)
        self.model = model or self.DEFAULT_MODEL

    async def complete(
        self,
        messages: list[ChatMessage],
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> str:
        system_instruction, contents = self._build_contents(messages)

        config_kwargs: dict[str, Any] = {
            "temperature": temperature,
            "max_output_tokens": max_tokens,
        }
        if system_instruction:
            config_kwargs["system_instruction"] = system_instruction

        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=contents,
            config=types.GenerateContentConfig(**config_kwargs),
        )
        return self._parse_response(response)

    def _build_contents(
        self, messages: list[ChatMessage]
    ) -> tuple[str | None, list[types.Content]]:
        system_instruction, rest = self.split_system(messages)
        contents = [
            types.Content(
                role="model" if msg.role == "assistant" else "user",
                parts=[types.Part.from_text(text=msg.content or "")],
            )
            for msg in rest
        ]
        # Gemini requires strict user/model alternation
        return system_instruction, self._consolidate_contents(contents)

    @staticmethod
    def _parse_response(response: Any) -> str:
        if not response.candidates or not response.candidates[0].content.parts:
            return ""
        return "\n".join(
            part.text for part in response.candidates[0].content.parts if part.text
        )

    @staticmethod
    def _consolidate_contents(
        contents: list[types.Content],
    ) -> list[types.Content]:
        """Merge consecutive same-role entries for Gemini's strict alternation."""
        if not contents:
            return contents

        consolidated: list[types.Content] = [contents[0]]
        for entry in contents[1:]:
            if entry.role == consolidated[-1].role:
                consolidated[-1].parts.extend(entry.parts)
            else:
                consolidated.append(entry)
        return consolidated
