from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from models.message import Message
from services.conversation import ConversationService, MessagePersistError


@pytest.fixture
def mock_db():
    db = AsyncMock()
    db.add = MagicMock()
    db.flush = AsyncMock()
    return db


@pytest.fixture
def service(mock_db):
    return ConversationService(mock_db)


async def test_store_adds_and_flushes(service, mock_db):
    msg = await service.store_message(
        room_id="r1",
        role="user",
        content="hello",
        user_name="Alice",
    )
    mock_db.add.assert_called_once_with(msg)
    mock_db.flush.assert_awaited_once()
    assert msg.room_id == "r1"
    assert msg.user_name == "Alice"


async def test_store_rejects_unknown_role(service, mock_db):
    with pytest.raises(ValueError):
        await service.store_message(room_id="r1", role="bot", content="x", user_name="A")
    mock_db.add.assert_not_called()


async def test_store_failure_rolls_back(service, mock_db):
    mock_db.flush.side_effect = OperationalError("INSERT", {}, Exception("db down"))
    with pytest.raises(MessagePersistError):
        await service.store_message(room_id="r1", role="user", content="hello", user_name="A")
    mock_db.rollback.assert_awaited_once()


async def test_get_recent_history_reverses(service, mock_db):
    msg1 = MagicMock()
    msg2 = MagicMock()

    # Simulate DB returning newest-first
    scalars_mock = MagicMock()
    scalars_mock.all.return_value = [msg2, msg1]
    result_mock = MagicMock()
    result_mock.scalars.return_value = scalars_mock
    mock_db.execute = AsyncMock(return_value=result_mock)

    result = await service.get_recent_history("r1")
    assert result == [msg1, msg2]  # should be reversed to oldest-first


# --- against a real database ---


async def _seed(db, room_id: str, count: int) -> None:
    base = datetime(2020, 1, 1, tzinfo=timezone.utc)
    for i in range(count):
        db.add(
            Message(
                room_id=room_id,
                role="user",
                user_name="Alice",
                content=f"msg {i}",
                created_at=base + timedelta(seconds=i),
            )
        )
    await db.commit()


async def test_window_is_bounded_and_chronological(db_session):
    await _seed(db_session, "r1", 200)
    service = ConversationService(db_session, window_size=50)

    history = await service.get_recent_history("r1")

    assert len(history) == 50
    assert [m.content for m in history] == [f"msg {i}" for i in range(150, 200)]


async def test_window_is_scoped_to_room(db_session):
    await _seed(db_session, "r1", 3)
    await _seed(db_session, "r2", 2)
    service = ConversationService(db_session)

    history = await service.get_recent_history("r2")
    assert [m.room_id for m in history] == ["r2", "r2"]


async def test_same_timestamp_keeps_insertion_order(db_session):
    stamp = datetime(2020, 1, 1, tzinfo=timezone.utc)
    for content in ("first", "second", "third"):
        db_session.add(
            Message(room_id="r1", role="user", user_name="A", content=content, created_at=stamp)
        )
        await db_session.flush()
    await db_session.commit()

    history = await ConversationService(db_session).get_recent_history("r1", limit=2)
    assert [m.content for m in history] == ["second", "third"]
