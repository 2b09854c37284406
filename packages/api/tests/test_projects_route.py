# This project was developed with assistance from AI tools.
"""Tests for project progress, deadline and category endpoints."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.routes.categories import router as categories_router
from src.routes.projects import router as projects_router

NOW = "2026-03-01T12:00:00+00:00"


def _client() -> TestClient:
    app = FastAPI()
    app.include_router(categories_router, prefix="/api/categories")
    app.include_router(projects_router, prefix="/api")
    return TestClient(app)


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


def test_list_categories():
    resp = _client().get("/api/categories")

    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == 8
    assert data[0]["category"] == "site_plan"
    assert data[0]["label"] == "Site Plan"
    assert data[0]["checklist"]["title"] == "Site Plan Checklist"


def test_known_category_checklist():
    resp = _client().get("/api/categories/fire_protection/checklist")

    assert resp.status_code == 200
    assert resp.json()["title"] == "Fire Protection Checklist"
    assert len(resp.json()["items"]) == 8


def test_unknown_category_checklist_falls_back():
    resp = _client().get("/api/categories/roof_plan/checklist")

    assert resp.status_code == 200
    assert resp.json()["title"] == "Roof Plan Checklist"
    assert len(resp.json()["items"]) == 3


# ---------------------------------------------------------------------------
# Progress
# ---------------------------------------------------------------------------


def test_progress_two_categories():
    body = {
        "documents": [
            {"id": 1, "category": "site_plan", "status": "approved"},
            {"id": 2, "category": "site_plan", "status": "pending_review"},
        ],
        "categories": ["site_plan", "fire_protection"],
    }
    resp = _client().post("/api/projects/progress", json=body)

    assert resp.status_code == 200
    data = resp.json()
    assert data["categories"]["site_plan"] == {"complete": True, "progress": 100}
    assert data["categories"]["fire_protection"] == {"complete": False, "progress": 0}
    assert data["overall_progress"] == 50
    assert data["suggested_status"] == "in_progress"
    assert data["can_submit"] is False


def test_progress_default_categories_empty():
    resp = _client().post("/api/projects/progress", json={"documents": []})

    data = resp.json()
    assert len(data["categories"]) == 7
    assert data["overall_progress"] == 0
    assert data["suggested_status"] == "not_started"


def test_progress_all_approved_can_submit():
    categories = [
        "site_plan",
        "facility_plan",
        "egress_plan",
        "structural_plans",
        "commodities",
        "fire_protection",
        "special_inspection",
    ]
    docs = [{"id": i, "category": c, "status": "approved"} for i, c in enumerate(categories)]
    resp = _client().post("/api/projects/progress", json={"documents": docs})

    data = resp.json()
    assert data["overall_progress"] == 100
    assert data["suggested_status"] == "ready_for_submission"
    assert data["can_submit"] is True


def test_progress_rejects_unknown_status():
    body = {"documents": [{"id": 1, "category": "site_plan", "status": "archived"}]}
    resp = _client().post("/api/projects/progress", json=body)

    assert resp.status_code == 422


# ---------------------------------------------------------------------------
# Summary and deadlines
# ---------------------------------------------------------------------------


def test_project_summary():
    body = {
        "project": {
            "id": 11,
            "name": "Distribution Center",
            "status": "in_progress",
            "deadline": "2026-03-31T12:00:00+00:00",
        },
        "documents": [{"id": 1, "category": "egress_plan", "status": "pending_review"}],
        "now": NOW,
    }
    resp = _client().post("/api/projects/summary", json=body)

    assert resp.status_code == 200
    data = resp.json()
    assert data["stored_status"] == "in_progress"
    assert data["suggested_status"] == "in_progress"
    # 50 / 7 = 7.14
    assert data["overall_progress"] == 7
    assert data["deadline"] == {
        "text": "Mar 31, 2026 (30 days)",
        "is_urgent": False,
        "days_left": 30,
    }
    assert data["urgency"] == "normal"


def test_project_deadlines():
    body = {
        "projects": [
            {"id": 1, "name": "A", "deadline": "2026-03-10T12:00:00+00:00"},
            {"id": 2, "name": "B"},
            {"id": 3, "name": "C", "deadline": "2026-03-02T12:00:00+00:00"},
        ],
        "now": NOW,
    }
    resp = _client().post("/api/projects/deadlines", json=body)

    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 2
    assert [e["project_id"] for e in data["data"]] == [3, 1]
    assert data["data"][0]["evaluation"]["text"] == "Due tomorrow"
    assert data["data"][0]["urgency"] == "high"


def test_evaluate_deadline_endpoint():
    body = {"deadline": "2026-02-27T12:00:00+00:00", "now": NOW}
    resp = _client().post("/api/deadlines/evaluate", json=body)

    assert resp.status_code == 200
    data = resp.json()
    assert data["text"] == "Overdue by 2 days"
    assert data["is_urgent"] is True
    assert data["days_left"] == -2
    assert data["urgency"] == "high"


def test_evaluate_null_deadline_endpoint():
    resp = _client().post("/api/deadlines/evaluate", json={"deadline": None})

    assert resp.json() == {
        "text": "No deadline",
        "is_urgent": False,
        "days_left": None,
        "urgency": "normal",
    }
