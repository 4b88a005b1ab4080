import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.dependencies import verify_api_secret
from config import settings
from core.database import get_db
from llm import create_llm_provider
from services.assistant import AssistantService
from services.conversation import ConversationService, MessagePersistError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rooms", dependencies=[Depends(verify_api_secret)])

MEMBERSHIP_NOTICES = {
    "join": "{user_name} joined the chat",
    "leave": "{user_name} left the chat",
}


class SendMessageRequest(BaseModel):
    content: str
    user_name: str
    user_id: str | None = None


class SystemMessageRequest(BaseModel):
    action: str | None = None
    user_name: str | None = None
    user_id: str | None = None


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@router.post("/{room_id}/send")
async def send_message(room_id: str, message: SendMessageRequest):
    async with get_db() as db:
        service = AssistantService(
            ConversationService(db, window_size=settings.HISTORY_WINDOW_SIZE),
            create_llm_provider(settings),
            assistant_name=settings.ASSISTANT_NAME,
            timeout=settings.LLM_TIMEOUT_SECONDS,
            temperature=settings.LLM_TEMPERATURE,
            max_tokens=settings.LLM_MAX_TOKENS,
            min_message_length=settings.MIN_MESSAGE_LENGTH,
        )
        try:
            result = await service.handle_message(
                room_id=room_id,
                content=message.content,
                user_name=message.user_name,
                user_id=message.user_id,
            )
        except MessagePersistError as e:
            logger.error("send in room %s failed: %s", room_id, e)
            return _error(str(e), 400)

    if result.skipped:
        return {"ok": True, "skipped": True}
    return {"ok": True}


@router.post("/{room_id}/system-message")
async def system_message(room_id: str, event: SystemMessageRequest):
    if not event.action or not event.user_name or not event.user_id:
        return _error("Missing required fields", 400)

    template = MEMBERSHIP_NOTICES.get(event.action)
    if template is None:
        return _error("Invalid action", 400)

    async with get_db() as db:
        conv_service = ConversationService(db)
        try:
            msg = await conv_service.store_message(
                room_id=room_id,
                role="system",
                content=template.format(user_name=event.user_name),
                user_name=event.user_name,
                user_id=event.user_id,
            )
            await conv_service.commit()
        except MessagePersistError as e:
            logger.error("system-message in room %s failed: %s", room_id, e)
            return _error("Failed to create system message", 500)

    logger.info("Membership event in room %s: %s %s", room_id, event.user_name, event.action)
    return {"message": msg.to_dict()}


@router.get("/{room_id}/messages")
async def list_messages(room_id: str, limit: int | None = Query(default=None, ge=1)):
    window = settings.HISTORY_WINDOW_SIZE
    limit = min(limit, window) if limit else window

    async with get_db() as db:
        history = await ConversationService(db).get_recent_history(room_id, limit=limit)
        return {"messages": [m.to_dict() for m in history]}
