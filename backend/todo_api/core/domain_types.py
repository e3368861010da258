"""Domain Types — identifier type and the identifier-format check.

Invariants:
    - TodoId is the string form of a Mongo ObjectId (24 hex chars)
    - is_valid_todo_id checks shape only, never existence

Design Decisions:
    - NewType over a wrapper class: zero runtime cost, full type-checker support
    - bson.ObjectId.is_valid is the store's own rule, so no hand-written regex drifts from it
"""

from typing import NewType

from bson import ObjectId

TodoId = NewType("TodoId", str)


def is_valid_todo_id(value: object) -> bool:
    """True when value has the store's identifier shape."""
    return ObjectId.is_valid(value)
