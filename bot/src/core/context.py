from collections.abc import Iterable, Sequence

from llm.types import ChatMessage
from prompts.group_chat import build_system_prompt


def participant_names(history: Iterable) -> list[str]:
    """Distinct sender names of user messages, in order of first appearance."""
    names: list[str] = []
    for msg in history:
        if getattr(msg, "role", None) != "user":
            continue
        name = getattr(msg, "user_name", None)
        if name and name not in names:
            names.append(name)
    return names


def format_history_entry(msg) -> ChatMessage:
    # The model sees one flattened transcript, so user turns carry the speaker
    if msg.role == "user":
        return ChatMessage(role="user", content=f"{msg.user_name}: {msg.content}")
    return ChatMessage(role=msg.role, content=msg.content)


def build_prompt(
    history: Sequence,
    participant_names: Sequence[str],
    sender_name: str,
    *,
    assistant_name: str = "ChatGPT",
) -> list[ChatMessage]:
    system = ChatMessage(
        role="system",
        content=build_system_prompt(list(participant_names), sender_name, assistant_name),
    )
    return [system, *(format_history_entry(msg) for msg in history)]
