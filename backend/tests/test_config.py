"""Settings — defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from todo_api.config import Settings


def test_defaults(monkeypatch):
    for var in ("PORT", "MONGO_URL", "MONGO_DATABASE", "CORS_ORIGINS"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 5000
    assert settings.mongo_url == "mongodb://localhost:27017"
    assert settings.mongo_database == "todo-app"
    assert settings.mongo_collection == "todos"
    assert settings.cors_origins == ["*"]


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings(_env_file=None).port == 8080


def test_mongo_url_from_environment(monkeypatch):
    monkeypatch.setenv("MONGO_URL", "mongodb+srv://cluster.example/")
    assert Settings(_env_file=None).mongo_url == "mongodb+srv://cluster.example/"


def test_rejects_non_mongo_url(monkeypatch):
    monkeypatch.setenv("MONGO_URL", "postgresql://localhost/todo")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
