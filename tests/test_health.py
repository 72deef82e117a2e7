"""Tests for the health-check HTTP service."""

import pytest
from fastapi.testclient import TestClient

from cmsadmin.health import HEALTH_MESSAGE, create_health_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_health_app())


class TestHealth:
    def test_get_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Health Check OK"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.parametrize("method", ["post", "put", "patch", "delete"])
    def test_any_method(self, client, method):
        response = getattr(client, method)("/")
        assert response.status_code == 200
        assert response.text == HEALTH_MESSAGE

    def test_body_ignored(self, client):
        response = client.post("/", json={"ping": True})
        assert response.text == HEALTH_MESSAGE

    def test_no_other_routes(self, client):
        assert client.get("/health").status_code == 404
        assert client.get("/docs").status_code == 404
