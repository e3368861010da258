"""Todo Documents — pure builders between stored documents and the public shape.

Invariants:
    - New documents always start with completed=False
    - Update documents carry only supplied fields (partial merge)
    - Public todos expose "id" as a string, never the raw "_id"
"""

from typing import Any


def new_todo_document(title: str | None) -> dict:
    """Document for a freshly created todo; completed is never taken from input."""
    return {"title": title, "completed": False}


def build_update_document(fields: dict[str, Any]) -> dict | None:
    """Mongo $set update for the supplied fields, or None when nothing to merge."""
    if not fields:
        return None
    return {"$set": dict(fields)}


def to_public_todo(doc: dict | None) -> dict | None:
    """Map a stored document to {id, title, completed}."""
    if doc is None:
        return None
    return {
        "id": str(doc["_id"]),
        "title": doc.get("title"),
        "completed": bool(doc.get("completed", False)),
    }
