"""Mongo Todo Repository — typed accessor over the todos collection.

Invariants:
    - Returns public todos ({id, title, completed}); raw documents never leave this module
    - All pymongo exceptions mapped to DatabaseError (core/errors.py)
    - Identifier format is NOT checked here: a malformed id raises bson InvalidId

Design Decisions:
    - Collection injected at construction (from MongoClientManager): no global client
    - find_one_and_update / find_one_and_delete: one round trip, returns the record
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import (
    ConnectionFailure, OperationFailure, PyMongoError,
)

from todo_api.core.domain_types import TodoId
from todo_api.core.errors import DatabaseError, ErrorContext
from todo_api.core.todo_documents import (
    build_update_document, new_todo_document, to_public_todo,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _store_call(
    operation: str, todo_id: str | None = None,
) -> AsyncGenerator[None, None]:
    """Translate driver failures into DatabaseError."""
    try:
        yield
    except ConnectionFailure as e:
        logger.error(f"DB connection error during {operation}: {e}")
        raise DatabaseError(
            "Connection or operational error", operation,
            ErrorContext(todo_id=todo_id),
        ) from e
    except OperationFailure as e:
        logger.error(f"DB operation rejected during {operation}: {e}")
        raise DatabaseError(
            "Operation rejected by server", operation,
            ErrorContext(todo_id=todo_id),
        ) from e
    except PyMongoError as e:
        logger.error(f"DB driver error during {operation}: {e}")
        raise DatabaseError(
            "Database operation failed", operation,
            ErrorContext(todo_id=todo_id),
        ) from e


class MongoTodoRepository:
    """CRUD over one collection of todo documents."""

    def __init__(self, collection: AsyncCollection):
        self._collection = collection

    async def list_all(self) -> list[dict]:
        async with _store_call("find"):
            docs = await self._collection.find().to_list(length=None)
        return [to_public_todo(doc) for doc in docs]

    async def get_by_id(self, todo_id: TodoId) -> dict | None:
        oid = ObjectId(todo_id)
        async with _store_call("find_one", todo_id):
            doc = await self._collection.find_one({"_id": oid})
        return to_public_todo(doc)

    async def create(self, title: str | None) -> dict:
        doc = new_todo_document(title)
        async with _store_call("insert"):
            result = await self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return to_public_todo(doc)

    async def update_by_id(
        self, todo_id: TodoId, fields: dict[str, Any],
    ) -> dict | None:
        oid = ObjectId(todo_id)
        update = build_update_document(fields)
        async with _store_call("update", todo_id):
            if update is None:
                doc = await self._collection.find_one({"_id": oid})
            else:
                doc = await self._collection.find_one_and_update(
                    {"_id": oid}, update,
                    return_document=ReturnDocument.AFTER,
                )
        return to_public_todo(doc)

    async def delete_by_id(self, todo_id: TodoId) -> dict | None:
        oid = ObjectId(todo_id)
        async with _store_call("delete", todo_id):
            doc = await self._collection.find_one_and_delete({"_id": oid})
        return to_public_todo(doc)
