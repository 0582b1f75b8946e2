"""
Test the agent suggestion HTTP endpoint.
"""

import pytest
from fastapi.testclient import TestClient

from main import app
from agent_suggestions.logic import InMemoryActivityStore, PointerNo, SuggestionEngine
from agent_suggestions.routes import get_engine


class BrokenStore:
    async def find_by_pointer(self, pointer_no):
        raise ConnectionError("connection refused")


@pytest.fixture
def client_for():
    def _client(store):
        app.dependency_overrides[get_engine] = lambda: SuggestionEngine(store)
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()


@pytest.fixture
def catalog(make_activity):
    return [
        make_activity("Hospital volunteering", "Support nurses on the ward", id="h1"),
        make_activity("Found a medical research club", "Original research with an international award", id="m1"),
        make_activity("Robotics club", "Build robots", id="r1"),
        make_activity("Medical camp", "Research camp", pointer_no=PointerNo.SPIKE_IN_ONE_AREA, id="s1"),
    ]


def test_simple_format_returns_ranked_array(client_for, catalog):
    client = client_for(InMemoryActivityStore(catalog))

    response = client.get("/api/agent-suggestions", params={"careerRole": "Doctor", "pointerNo": "4"})

    assert response.status_code == 200
    body = response.json()
    assert [item["_id"] for item in body] == ["m1", "h1"]
    assert set(body[0]) == {"_id", "title", "description", "tags", "pointerNo"}
    assert body[0]["pointerNo"] == 4


def test_full_format_includes_scores(client_for, catalog):
    client = client_for(InMemoryActivityStore(catalog))

    response = client.get(
        "/api/agent-suggestions",
        params={"careerRole": "Doctor", "pointerNo": 4, "format": "full"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["summary"]["total_activities"] == 3
    assert body["summary"]["total_candidates"] == 2
    assert [s["rank"] for s in body["suggestions"]] == [1, 2]
    first = body["suggestions"][0]
    assert first["_id"] == "m1"
    assert first["pointerNo"] == 4
    assert first["composite_score"] == sum(first["dimension_scores"].values())
    assert first["why_this_fits"]
    assert first["admissions_justification"]


def test_empty_catalog_is_success(client_for):
    client = client_for(InMemoryActivityStore())

    response = client.get("/api/agent-suggestions", params={"careerRole": "Doctor", "pointerNo": 2})

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.parametrize("params", [
    {"pointerNo": "2"},
    {"careerRole": "   ", "pointerNo": "2"},
    {"careerRole": "Doctor"},
    {"careerRole": "Doctor", "pointerNo": "99"},
    {"careerRole": "Doctor", "pointerNo": "2", "format": "xml"},
])
def test_invalid_requests_are_client_errors(client_for, params):
    client = client_for(InMemoryActivityStore())

    response = client.get("/api/agent-suggestions", params=params)

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["type"] == "InvalidArgument"
    assert body["message"]


def test_store_failure_is_service_unavailable(client_for):
    client = client_for(BrokenStore())

    response = client.get("/api/agent-suggestions", params={"careerRole": "Doctor", "pointerNo": 3})

    assert response.status_code == 503
    assert response.json()["type"] == "StoreUnavailable"


def test_health_check():
    client = TestClient(app)

    response = client.get("/api/agent-suggestions/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
