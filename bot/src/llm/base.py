from __future__ import annotations

from abc import ABC, abstractmethod

from llm.types import ChatMessage


class LLMProvider(ABC):
    model: str

    @abstractmethod
    async def complete(
        self,
        messages: list[ChatMessage],
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> str:
        """Return the reply text for a role-tagged transcript.

        Missing text in an otherwise valid response comes back as "".
        Transport and status failures propagate as the SDK's exceptions.
        """
        ...

    @staticmethod
    def split_system(messages: list[ChatMessage]) -> tuple[str | None, list[ChatMessage]]:
        """Separate the leading instructions for APIs that take them apart.

        Later system entries (join/leave notices) stay in place as user turns,
        since these APIs only accept user and assistant roles in the transcript.
        """
        system_prompt: str | None = None
        if messages and messages[0].role == "system":
            system_prompt = messages[0].content
            messages = messages[1:]
        rest = [
            ChatMessage(role="user", content=m.content) if m.role == "system" else m
            for m in messages
        ]
        return system_prompt, rest
