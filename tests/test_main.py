"""Tests for main API endpoints."""

from fastapi.testclient import TestClient

from libcat.main import create_app


def test_root_endpoint(client: TestClient) -> None:
    """Test root endpoint returns service info."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "libcat API"
    assert data["api"] == "/api/v1"


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_api_root_endpoint(client: TestClient) -> None:
    """Test API v1 root endpoint."""
    response = client.get("/api/v1/")
    assert response.status_code == 200
    data = response.json()
    assert data["version"] == "0.1.0"
    assert data["endpoints"]["books"] == "/api/v1/books"


def test_unknown_book_returns_error_envelope(client: TestClient) -> None:
    response = client.get("/api/v1/books/does-not-exist")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["data"] is None
    assert body["error"]["code"] == "NOT_FOUND"
    assert body["error"]["details"] == "Book not found with ISBN: does-not-exist"


def test_unexpected_error_returns_error_envelope() -> None:
    app = create_app()

    @app.get("/boom")
    def boom() -> None:
        raise RuntimeError("boom")

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "UPSTREAM_ERROR"
    assert body["error"]["details"] == "Unexpected server error"
