from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "system" | "user" | "assistant"
    content: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
