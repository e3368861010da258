"""Todo Schemas — create ignores completed, update is a partial record."""

import pytest
from pydantic import ValidationError

from todo_api.schemas.todo import TodoCreate, TodoUpdate


def test_create_drops_completed():
    body = TodoCreate.model_validate({"title": "a", "completed": True})
    assert body.title == "a"
    assert not hasattr(body, "completed")


def test_create_title_defaults_to_none():
    assert TodoCreate().title is None


def test_update_to_fields_only_includes_sent_fields():
    assert TodoUpdate.model_validate({"completed": True}).to_fields() == {
        "completed": True,
    }


def test_update_explicit_null_title_is_kept():
    assert TodoUpdate.model_validate({"title": None}).to_fields() == {
        "title": None,
    }


def test_update_rejects_null_completed():
    with pytest.raises(ValidationError):
        TodoUpdate.model_validate({"completed": None})


def test_update_empty_body_has_no_fields():
    assert TodoUpdate.model_validate({}).to_fields() == {}


@pytest.mark.parametrize("model", [TodoCreate, TodoUpdate])
def test_scalar_titles_become_text(model):
    assert model.model_validate({"title": 7}).title == "7"
    assert model.model_validate({"title": True}).title == "true"


@pytest.mark.parametrize("model", [TodoCreate, TodoUpdate])
def test_structured_titles_rejected(model):
    with pytest.raises(ValidationError):
        model.model_validate({"title": {"nested": [1]}})
