"""One chat turn: store the user's message, then maybe answer it.

Flow per inbound message::

    store user message -> read recent window -> gate
        suppressed      -> done, nothing else stored
        otherwise       -> build prompt -> completion -> store assistant message

A failed completion still produces exactly one assistant message that
carries the error, so the room always shows the attempt. Only failures to
write a message are raised to the caller.
"""
import asyncio
import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from core import gate
from core.context import build_prompt, participant_names
from llm.base import LLMProvider
from models.message import Message
from services.conversation import ConversationService

logger = logging.getLogger(__name__)

ERROR_PREFIX = "⚠️ Assistant error"


@dataclass
class TurnResult:
    skipped: bool
    reason: str | None = None
    reply: Message | None = None
    failed: bool = False


def format_completion_error(error: BaseException) -> str:
    if isinstance(error, asyncio.TimeoutError):
        detail = "request timed out"
    else:
        detail = str(error) or type(error).__name__
    return f"{ERROR_PREFIX}: {detail}"


class AssistantService:
    def __init__(
        self,
        conversations: ConversationService,
        provider: LLMProvider,
        *,
        assistant_name: str = "ChatGPT",
        timeout: float = 30.0,
        temperature: float = 0.7,
        max_tokens: int = 1024,
        min_message_length: int = gate.MIN_MESSAGE_LENGTH,
    ):
        self.conversations = conversations
        self.provider = provider
        self.assistant_name = assistant_name
        self.timeout = timeout
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.min_message_length = min_message_length

    async def handle_message(
        self,
        room_id: str,
        content: str,
        user_name: str,
        user_id: str | None = None,
    ) -> TurnResult:
        await self.conversations.store_message(
            room_id=room_id,
            role="user",
            content=content,
            user_name=user_name,
            user_id=user_id,
        )
        # The user's turn stands even if the assistant side fails later
        await self.conversations.commit()

        history = await self._load_history(room_id)
        names = participant_names(history)

        verdict = gate.evaluate(
            content, names, user_name, min_length=self.min_message_length
        )
        if verdict.skip:
            logger.info("Assistant skipped in room %s: %s", room_id, verdict.reason)
            return TurnResult(skipped=True, reason=verdict.reason)

        prompt = build_prompt(
            history, names, user_name, assistant_name=self.assistant_name
        )

        failed = False
        try:
            reply_text = await asyncio.wait_for(
                self.provider.complete(
                    prompt,
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                ),
                timeout=self.timeout,
            )
        except Exception as e:
            logger.error("Completion failed in room %s: %r", room_id, e)
            reply_text = format_completion_error(e)
            failed = True

        reply = await self.conversations.store_message(
            room_id=room_id,
            role="assistant",
            content=reply_text or "",
            user_name=self.assistant_name,
        )
        await self.conversations.commit()
        return TurnResult(skipped=False, reply=reply, failed=failed)

    async def _load_history(self, room_id: str) -> list[Message]:
        try:
            return await self.conversations.get_recent_history(room_id)
        except SQLAlchemyError as e:
            logger.warning("History unavailable for room %s, continuing without: %s", room_id, e)
            await self.conversations.rollback()
            return []
