"""Request Dependencies — hand the lifespan-built objects to route handlers.

Invariants:
    - Handlers get the repository only through get_todo_repository
    - Nothing here constructs clients; the lifespan does (main.py)
"""

from fastapi import Request

from todo_api.core.repository_protocols import TodoRepository
from todo_api.infrastructure.database import MongoClientManager


def get_todo_repository(request: Request) -> TodoRepository:
    """FastAPI dependency for the todo repository."""
    repository = getattr(request.app.state, "todo_repository", None)
    if repository is None:
        raise RuntimeError("Todo repository not initialized")
    return repository


def get_db_manager(request: Request) -> MongoClientManager | None:
    """Client manager for health probes; None before the lifespan has run."""
    return getattr(request.app.state, "db_manager", None)
