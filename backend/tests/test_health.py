import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


def test_health_reports_database(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {
        "status": "healthy",
        "app": "Jobly Test",
        "checks": {"database": {"ok": True}},
    }
