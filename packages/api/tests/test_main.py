# This project was developed with assistance from AI tools.
"""Tests for the application wiring and RFC 7807 error handlers."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from src.main import app
from src.services.progress import DocumentValidationError

client = TestClient(app, raise_server_exceptions=False)


def test_health():
    resp = client.get("/health/")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_not_found_is_problem_details():
    resp = client.get("/api/nope", headers={"x-request-id": "req-123"})

    assert resp.status_code == 404
    body = resp.json()
    assert body["title"] == "Not Found"
    assert body["status"] == 404
    assert body["request_id"] == "req-123"


def test_request_validation_is_problem_details():
    body = {"documents": [{"id": 1, "category": "site_plan", "status": "archived"}]}
    resp = client.post("/api/projects/progress", json=body)

    assert resp.status_code == 422
    assert resp.json()["title"] == "Unprocessable Entity"
    assert resp.json()["request_id"]


def test_domain_validation_error_maps_to_422():
    with patch(
        "src.routes.projects.compute_category_progress",
        side_effect=DocumentValidationError("status", "archived"),
    ):
        resp = client.post("/api/projects/progress", json={"documents": []})

    assert resp.status_code == 422
    assert resp.json()["field"] == "status"
    assert "archived" in resp.json()["detail"]


def test_unhandled_exception_is_500():
    with patch(
        "src.routes.projects.summarize_project",
        side_effect=RuntimeError("boom"),
    ):
        resp = client.post(
            "/api/projects/summary",
            json={"project": {"id": 1, "name": "X"}},
        )

    assert resp.status_code == 500
    assert resp.json()["detail"] == "An unexpected error occurred."
