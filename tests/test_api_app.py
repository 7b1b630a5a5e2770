"""
Smoke tests for the FastAPI application lifecycle
"""

from unittest.mock import patch

from fastapi.testclient import TestClient

from users_api.api.app import create_app


def test_lifespan_probes_database_and_serves_health():
    with patch("users_api.api.app.check_database_connection", return_value=(True, None)) as probe:
        with TestClient(create_app()) as client:
            response = client.get("/health")

    probe.assert_called_once()
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": "0.1.0"}


def test_database_failure_does_not_block_startup():
    with patch(
        "users_api.api.app.check_database_connection",
        return_value=(False, "Cannot connect to database server"),
    ):
        with TestClient(create_app()) as client:
            response = client.post("/graphql", json={"query": "{ users { id } }"})

    assert response.status_code == 200
    assert [u["id"] for u in response.json()["data"]["users"]] == ["1", "2"]


def test_graphiql_served_to_browsers():
    client = TestClient(create_app())

    response = client.get("/graphql", headers={"Accept": "text/html"})

    assert response.status_code == 200
    assert "graphiql" in response.text.lower()
