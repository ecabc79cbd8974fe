"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from collabgate.interfaces.api.resources.health import HealthResource


class _Lifespan:
    def __init__(self, ready: bool) -> None:
        self.ready = ready


def _client(health: HealthResource) -> TestClient:
    app = App()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints."""
    return _client(HealthResource())


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_before_pool_opens() -> None:
    """GET /v1/health/ready returns 503 until the pool is open."""
    result = _client(HealthResource(_Lifespan(ready=False))).simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "starting"


def test_health_ready_after_pool_opens() -> None:
    result = _client(HealthResource(_Lifespan(ready=True))).simulate_get("/v1/health/ready")
    assert result.status_code == 200
