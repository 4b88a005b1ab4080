from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from models.message import ROLES, Message


class MessagePersistError(Exception):
    """A message could not be written to the room's log."""


class ConversationService:
    def __init__(self, db: AsyncSession, window_size: int | None = None):
        self.db = db
        self.window_size = window_size or settings.HISTORY_WINDOW_SIZE

    async def store_message(
        self,
        room_id: str,
        role: str,
        content: str,
        user_name: str,
        user_id: str | None = None,
    ) -> Message:
        if role not in ROLES:
            raise ValueError(f"Unknown message role: {role!r}")

        msg = Message(
            room_id=room_id,
            role=role,
            content=content,
            user_name=user_name,
            user_id=user_id,
        )
        self.db.add(msg)
        try:
            await self.db.flush()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise MessagePersistError(str(e)) from e
        return msg

    async def commit(self) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise MessagePersistError(str(e)) from e

    async def rollback(self) -> None:
        await self.db.rollback()

    async def get_recent_history(
        self,
        room_id: str,
        limit: int | None = None,
    ) -> list[Message]:
        """Return the newest ``limit`` messages of a room, oldest first."""
        if limit is None:
            limit = self.window_size

        stmt = (
            select(Message)
            .where(Message.room_id == room_id)
            .order_by(Message.created_at.desc(), Message.id.desc())
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        rows = list(result.scalars().all())
        rows.reverse()
        return rows
