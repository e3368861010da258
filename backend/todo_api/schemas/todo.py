"""Todo Schemas — Pydantic models for the todo endpoints.

Invariants:
    - TodoCreate ignores any client-supplied completed value
    - TodoUpdate is a partial record: only fields present in the request merge
    - title is text or null everywhere: scalars are stored as their text,
      arrays and objects are rejected (same rule for create and update)
    - completed is never null in storage, so an explicit null is rejected

Design Decisions:
    - Scalar titles coerced rather than rejected: 42 is stored as "42", true as "true"
    - Unknown fields ignored (pydantic default) rather than rejected
"""

from typing import Any

from pydantic import BaseModel, field_validator


def coerce_title(v: Any) -> str | None:
    """Text form of a scalar title; None stays None."""
    if v is None or isinstance(v, str):
        return v
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, (int, float)):
        return str(v)
    raise ValueError("title must be a string, number, boolean or null")


class TodoCreate(BaseModel):
    """Todo creation body."""
    title: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def title_as_text(cls, v: Any) -> str | None:
        return coerce_title(v)


class TodoUpdate(BaseModel):
    """Fields to merge into an existing todo."""
    title: str | None = None
    completed: bool | None = None

    @field_validator("title", mode="before")
    @classmethod
    def title_as_text(cls, v: Any) -> str | None:
        return coerce_title(v)

    @field_validator("completed")
    @classmethod
    def completed_not_null(cls, v: bool | None) -> bool:
        if v is None:
            raise ValueError("completed cannot be null")
        return v

    def to_fields(self) -> dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class TodoResponse(BaseModel):
    """Public todo shape."""
    id: str
    title: str | None = None
    completed: bool


class MessageResponse(BaseModel):
    message: str
