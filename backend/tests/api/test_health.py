"""Health & Readiness — liveness always up, readiness follows MongoDB ping."""

from todo_api import __version__


class _StubDbManager:
    def __init__(self, healthy: bool):
        self.healthy = healthy

    async def health_check(self) -> bool:
        return self.healthy


async def test_liveness_returns_healthy(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy", "service": "todo-api", "version": __version__,
    }


async def test_readiness_without_db_manager_returns_503(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_with_unreachable_db_returns_503(app, client):
    app.state.db_manager = _StubDbManager(healthy=False)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503


async def test_readiness_with_healthy_db_returns_200(app, client):
    app.state.db_manager = _StubDbManager(healthy=True)
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}
