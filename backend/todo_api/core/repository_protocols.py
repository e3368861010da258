"""Boundary Protocols — contract between route handlers and persistence.

Invariants:
    - Handlers depend on TodoRepository, never on the driver
    - Absent records come back as None, not as exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Any, Protocol

from todo_api.core.domain_types import TodoId


class TodoRepository(Protocol):
    """Contract for todo persistence — implemented by infrastructure."""
    async def list_all(self) -> list[dict]: ...
    async def get_by_id(self, todo_id: TodoId) -> dict | None: ...
    async def create(self, title: str | None) -> dict: ...
    async def update_by_id(
        self, todo_id: TodoId, fields: dict[str, Any],
    ) -> dict | None: ...
    async def delete_by_id(self, todo_id: TodoId) -> dict | None: ...
