"""End-to-end tests for health endpoints."""

from tests.harness import create_client_fixture

client = create_client_fixture()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"]
    assert body["environment"]


def test_db_health(client):
    response = client.get("/db-health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
