from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from llm.base import LLMProvider
from llm.types import ChatMessage

if TYPE_CHECKING:
    from config import Settings

logger = logging.getLogger(__name__)


def create_llm_provider(config: Settings | None = None) -> LLMProvider:
    """Factory: create the LLM provider named in the given settings.

    Only the selected provider's SDK needs to be installed.
    """
    if config is None:
        from config import settings as config

    provider = config.LLM_PROVIDER.lower()
    api_key = config.LLM_API_KEY
    model = config.LLM_MODEL or None
    base_url = config.LLM_BASE_URL

    if provider == "openai":
        from llm.providers.openai import OpenAIProvider

        instance = OpenAIProvider(api_key=api_key, model=model, base_url=base_url)

    elif provider == "anthropic":
        from llm.providers.anthropic import AnthropicProvider

        instance = AnthropicProvider(api_key=api_key, model=model)

    elif provider == "gemini":
        from llm.providers.gemini import GeminiProvider

        instance = GeminiProvider(api_key=api_key, model=model)

    elif provider == "mistral":
        from llm.providers.mistral import MistralProvider

        instance = MistralProvider(api_key=api_key, model=model)

    else:
        raise ValueError(
            f"Unknown LLM provider: {provider!r}. "
            "Supported: openai, anthropic, gemini, mistral"
        )

    extra = f" via {base_url}" if base_url else ""
    logger.info("LLM provider: %s | model: %s%s", provider, instance.model, extra)
    return instance


__all__ = [
    "ChatMessage",
    "LLMProvider",
    "create_llm_provider",
]
