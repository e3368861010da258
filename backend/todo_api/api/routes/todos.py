"""Todo Routes — the five CRUD handlers over the todo repository.

Invariants:
    - Every id-taking handler checks identifier format first (400 "Invalid todo ID")
    - Read of a missing todo answers 200 with a null body
    - Delete and Update of a missing todo answer 404 "Todo not found"
    - Create always stores completed=False
    - Store failures surface as 500 via DatabaseError; detail only in logs

Design Decisions:
    - Repository injected per request (Depends), so tests swap it without patching
    - Update merges only fields present in the body (TodoUpdate.to_fields)
"""

import logging

from fastapi import APIRouter, Depends

from todo_api.api.dependencies import get_todo_repository
from todo_api.core.domain_types import TodoId, is_valid_todo_id
from todo_api.core.errors import InvalidTodoIdError, TodoNotFoundError
from todo_api.core.repository_protocols import TodoRepository
from todo_api.schemas.todo import (
    MessageResponse, TodoCreate, TodoResponse, TodoUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/todos", tags=["todos"])


def require_valid_todo_id(todo_id: str) -> TodoId:
    """Identifier-format check shared by all id-taking handlers."""
    if not is_valid_todo_id(todo_id):
        raise InvalidTodoIdError(todo_id)
    return TodoId(todo_id)


@router.get("", response_model=list[TodoResponse])
async def list_todos(repo: TodoRepository = Depends(get_todo_repository)):
    """Fetch every todo."""
    logger.info("Received request to list todos")
    todos = await repo.list_all()
    logger.info(f"Listed {len(todos)} todos")
    return todos


@router.post("", response_model=TodoResponse)
async def create_todo(
    body: TodoCreate | None = None,
    repo: TodoRepository = Depends(get_todo_repository),
):
    """Create a todo from the body's title; completed starts False."""
    title = body.title if body else None
    logger.info("Received request to create todo")
    todo = await repo.create(title)
    logger.info("Created todo", extra={"todo_id": todo["id"]})
    return todo


@router.get("/{todo_id}", response_model=TodoResponse | None)
async def get_todo(
    todo_id: str, repo: TodoRepository = Depends(get_todo_repository),
):
    """Fetch one todo; null body when it does not exist."""
    logger.info("Received request to fetch todo by ID", extra={"todo_id": todo_id})
    todo = await repo.get_by_id(require_valid_todo_id(todo_id))
    logger.info(
        f"Fetched todo by ID (found={todo is not None})",
        extra={"todo_id": todo_id},
    )
    return todo


@router.delete("/{todo_id}", response_model=MessageResponse)
async def delete_todo(
    todo_id: str, repo: TodoRepository = Depends(get_todo_repository),
):
    """Delete one todo."""
    logger.info("Received request to delete todo by ID", extra={"todo_id": todo_id})
    deleted = await repo.delete_by_id(require_valid_todo_id(todo_id))
    if deleted is None:
        raise TodoNotFoundError(todo_id)
    logger.info("Deleted todo by ID", extra={"todo_id": todo_id})
    return {"message": "Todo deleted successfully"}


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_id: str,
    body: TodoUpdate | None = None,
    repo: TodoRepository = Depends(get_todo_repository),
):
    """Merge the supplied fields into one todo."""
    logger.info("Received request to update todo by ID", extra={"todo_id": todo_id})
    valid_id = require_valid_todo_id(todo_id)
    fields = body.to_fields() if body else {}
    todo = await repo.update_by_id(valid_id, fields)
    if todo is None:
        raise TodoNotFoundError(todo_id)
    logger.info(
        f"Updated todo by ID (fields={sorted(fields)})",
        extra={"todo_id": todo_id},
    )
    return todo
