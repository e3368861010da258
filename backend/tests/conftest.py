"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Tests never reach a real MongoDB: the repository wraps a FakeCollection
    - Every test gets a fresh collection and a fresh app
"""

import os

# Settings read at import of todo_api.main; keep them local and quiet
os.environ.setdefault("MONGO_URL", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DATABASE", "todo-app-test")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.api.dependencies import get_todo_repository
from todo_api.config import Settings
from todo_api.infrastructure.todo_repository import MongoTodoRepository
from todo_api.main import create_app
from tests.fake_mongo import FakeCollection, FailingCollection


@pytest.fixture
def fake_collection():
    return FakeCollection()


@pytest.fixture
def repository(fake_collection):
    return MongoTodoRepository(fake_collection)


@pytest.fixture
def failing_repository():
    return MongoTodoRepository(FailingCollection())


@pytest.fixture
def settings():
    return Settings(max_body_bytes=1024)


@pytest.fixture
def app(settings, repository):
    """App with the repository dependency bound to the fake collection."""
    application = create_app(settings)
    application.dependency_overrides[get_todo_repository] = lambda: repository
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def failing_client(app, failing_repository):
    """Client whose store fails every call."""
    app.dependency_overrides[get_todo_repository] = lambda: failing_repository
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
