"""MongoDB Client Manager — lifecycle without a real server.

Tests:
    - collection() before connect() raises
    - connect() tolerates an unreachable server (logs, does not raise)
    - health_check() reflects ping outcome, close() is idempotent
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError

import todo_api.infrastructure.database as db_module
from todo_api.infrastructure.database import MongoClientManager


def _fake_client(ping: AsyncMock) -> MagicMock:
    client = MagicMock()
    client.admin.command = ping
    client.close = AsyncMock()
    return client


def test_collection_before_connect_raises():
    manager = MongoClientManager("mongodb://localhost:27017", "todo-app")
    with pytest.raises(RuntimeError):
        manager.collection("todos")


async def test_health_check_before_connect_is_false():
    manager = MongoClientManager("mongodb://localhost:27017", "todo-app")
    assert await manager.health_check() is False


async def test_connect_pings_and_exposes_collection(monkeypatch):
    ping = AsyncMock(return_value={"ok": 1})
    client = _fake_client(ping)
    factory = MagicMock(return_value=client)
    monkeypatch.setattr(db_module, "AsyncMongoClient", factory)

    manager = MongoClientManager("mongodb://db:27017", "todo-app", 1500)
    await manager.connect()

    factory.assert_called_once_with(
        "mongodb://db:27017", serverSelectionTimeoutMS=1500,
    )
    ping.assert_awaited_once_with("ping")
    manager.collection("todos")
    client.__getitem__.assert_called_with("todo-app")


async def test_connect_survives_unreachable_server(monkeypatch):
    ping = AsyncMock(side_effect=ServerSelectionTimeoutError("down"))
    monkeypatch.setattr(
        db_module, "AsyncMongoClient", MagicMock(return_value=_fake_client(ping)),
    )

    manager = MongoClientManager("mongodb://db:27017", "todo-app")
    await manager.connect()

    assert manager.client is not None
    assert await manager.health_check() is False


async def test_close_is_idempotent(monkeypatch):
    client = _fake_client(AsyncMock(return_value={"ok": 1}))
    monkeypatch.setattr(
        db_module, "AsyncMongoClient", MagicMock(return_value=client),
    )

    manager = MongoClientManager("mongodb://db:27017", "todo-app")
    await manager.connect()
    await manager.close()
    await manager.close()

    client.close.assert_awaited_once()
    assert manager.client is None
