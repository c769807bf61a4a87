"""
HTTP API tests.

The app runs against in-memory repositories (see conftest.client), so these
tests cover routing, camelCase serialization and the error shape.
"""
from fastapi import status

from domain.config import reload_config
from factories import decision_body, make_decision, utc

MISSING_ID = "6f1e3b0a-5c4d-4e2f-8a9b-0c1d2e3f4a5b"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "ok"


def test_metrics_endpoint_is_prometheus_text(client):
    client.post("/api/decisions", json=decision_body())
    response = client.get("/metrics")
    assert response.status_code == status.HTTP_200_OK
    assert "decision_operations_total" in response.text


def test_create_decision(client, decision_repo):
    response = client.post("/api/decisions", json=decision_body(title="  Switch teams "))

    assert response.status_code == status.HTTP_201_CREATED
    decision = response.json()["decision"]
    assert decision["title"] == "Switch teams"
    assert decision["impactScore"] == 7
    assert decision["status"] == "active"
    assert decision["affectedAreas"] == ["career", "productivity"]
    assert decision["stakeholders"]["keyStakeholders"] == "Manager, new lead"
    assert decision["outcomes"]["actual"] == ""
    assert decision["createdAt"] == decision["updatedAt"]
    assert decision["id"] in decision_repo.decisions


def test_create_invalid_decision_reports_every_error(client, decision_repo):
    response = client.post("/api/decisions", json=decision_body(title="", impactScore=11, category="hobbies"))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = response.json()
    assert body["message"] == "Validation failed"
    assert sorted(body["errors"]) == ["Impact Score cannot exceed 10", "Invalid category: 'hobbies'", "Title is required"]
    assert decision_repo.decisions == {}


def test_malformed_body_uses_the_same_error_shape(client):
    response = client.post("/api/decisions", json=decision_body(impactScore="lots"))
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = response.json()
    assert body["message"] == "Validation failed"
    assert body["errors"]


def test_get_decision(client, decision_repo):
    stored = make_decision()
    decision_repo.seed(stored)

    response = client.get(f"/api/decisions/{stored.id}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["decision"]["id"] == stored.id


def test_get_missing_and_malformed_ids(client):
    missing = client.get(f"/api/decisions/{MISSING_ID}")
    assert missing.status_code == status.HTTP_404_NOT_FOUND
    assert missing.json() == {"message": "Decision not found", "errors": []}

    malformed = client.get("/api/decisions/not-an-id")
    assert malformed.status_code == status.HTTP_400_BAD_REQUEST
    assert malformed.json()["message"] == "Invalid decision id: 'not-an-id'"


def test_list_decisions_paging(client, decision_repo):
    decision_repo.seed(*[make_decision(created_at=utc(2024, 1, day), title=f"D{day}") for day in range(1, 13)])

    response = client.get("/api/decisions", params={"page": 2, "limit": 5})
    body = response.json()
    assert response.status_code == status.HTTP_200_OK
    assert (body["total"], body["pages"], body["currentPage"]) == (12, 3, 2)
    assert [d["title"] for d in body["decisions"]] == ["D7", "D6", "D5", "D4", "D3"]

    past_end = client.get("/api/decisions", params={"page": 9, "limit": 5}).json()
    assert past_end["decisions"] == []
    assert past_end["total"] == 12


def test_list_decisions_default_page_size(client, decision_repo):
    decision_repo.seed(*[make_decision() for _ in range(11)])
    body = client.get("/api/decisions").json()
    assert len(body["decisions"]) == 10
    assert body["pages"] == 2


def test_list_decisions_bad_paging(client):
    response = client.get("/api/decisions", params={"page": 0, "limit": 5000})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == ["Page must be at least 1", "Limit must be between 1 and 1000"]


def test_list_decisions_search(client, decision_repo):
    decision_repo.seed(make_decision(title="Move to Lisbon"), make_decision(title="Buy a bike"))
    body = client.get("/api/decisions", params={"search": "lisbon"}).json()
    assert [d["title"] for d in body["decisions"]] == ["Move to Lisbon"]


def test_patch_decision(client, decision_repo):
    stored = make_decision(created_at=utc(2024, 1, 1))
    decision_repo.seed(stored)

    response = client.patch(
        f"/api/decisions/{stored.id}",
        json={"status": "completed", "outcomes": {"actual": "Shipped the pipeline"}},
    )

    assert response.status_code == status.HTTP_200_OK
    decision = response.json()["decision"]
    assert decision["status"] == "completed"
    assert decision["outcomes"]["actual"] == "Shipped the pipeline"
    assert decision["outcomes"]["expected"] == stored.outcomes.expected
    assert decision["title"] == stored.title
    assert decision["updatedAt"] > decision["createdAt"]


def test_patch_decision_invalid(client, decision_repo):
    stored = make_decision()
    decision_repo.seed(stored)

    response = client.patch(f"/api/decisions/{stored.id}", json={"affectedAreas": []})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == ["At least one affected area is required"]
    assert decision_repo.decisions[stored.id] == stored


def test_patch_null_status_keeps_stored_status(client, decision_repo):
    stored = make_decision(status="completed")
    decision_repo.seed(stored)

    response = client.patch(f"/api/decisions/{stored.id}", json={"status": None, "title": "Renamed"})

    assert response.status_code == status.HTTP_200_OK
    decision = response.json()["decision"]
    assert decision["status"] == "completed"
    assert decision["title"] == "Renamed"
    assert decision_repo.decisions[stored.id].status == "completed"


def test_patch_missing_decision(client):
    response = client.patch(f"/api/decisions/{MISSING_ID}", json={"title": "x"})
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_decision(client, decision_repo):
    stored = make_decision()
    decision_repo.seed(stored)

    response = client.delete(f"/api/decisions/{stored.id}")
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert response.content == b""

    assert client.get(f"/api/decisions/{stored.id}").status_code == status.HTTP_404_NOT_FOUND
    assert client.delete(f"/api/decisions/{stored.id}").status_code == status.HTTP_404_NOT_FOUND


def test_similar_decisions(client, decision_repo):
    reference = make_decision(category="career", impact_score=7)
    twin = make_decision(category="career", impact_score=8)
    far = make_decision(category="financial", impact_score=1, affected_areas=["financial"])
    decision_repo.seed(reference, twin, far)

    response = client.get(f"/api/decisions/{reference.id}/similar")
    assert response.status_code == status.HTTP_200_OK
    decisions = response.json()["decisions"]
    assert [d["id"] for d in decisions] == [twin.id]
    assert round(decisions[0]["similarity"], 2) == 0.97


def test_goals(client):
    created = client.post("/api/goals", json={"title": "Emergency fund", "progress": 25})
    assert created.status_code == status.HTTP_201_CREATED
    goal = created.json()["goal"]
    assert goal["progress"] == 25
    assert goal["decisions"] == []

    listed = client.get("/api/goals").json()["goals"]
    assert [g["id"] for g in listed] == [goal["id"]]

    patched = client.patch(f"/api/goals/{goal['id']}", json={"progress": 60})
    assert patched.json()["goal"]["progress"] == 60

    assert client.post("/api/goals", json={"progress": 10}).status_code == status.HTTP_400_BAD_REQUEST
    assert client.delete(f"/api/goals/{goal['id']}").status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/api/goals/{goal['id']}").status_code == status.HTTP_404_NOT_FOUND


def test_projects(client):
    created = client.post("/api/projects", json={"name": "Kitchen remodel", "team": 2, "deadline": "2024-12-01T00:00:00Z"})
    assert created.status_code == status.HTTP_201_CREATED
    project = created.json()["project"]
    assert project["team"] == 2
    assert project["deadline"].startswith("2024-12-01T00:00:00")

    invalid = client.post("/api/projects", json={"name": "", "team": 1})
    assert invalid.status_code == status.HTTP_400_BAD_REQUEST
    assert invalid.json()["errors"] == ["Name is required"]

    assert len(client.get("/api/projects").json()["projects"]) == 1


def test_analytics_dashboard_and_timeline(client, decision_repo, goal_repo):
    decision_repo.seed(
        make_decision(impact_score=9, title="Big one"),
        make_decision(impact_score=2, title="Small one"),
    )
    client.post("/api/goals", json={"title": "Emergency fund"})

    analytics = client.get("/api/analytics").json()
    assert analytics["totalDecisions"] == 2
    assert analytics["averageImpactScore"] == 5.5
    assert analytics["riskAnalysis"] == {"highRisk": 1, "mediumRisk": 0, "lowRisk": 1}
    assert len(analytics["monthlyTrends"]) == 6
    assert analytics["monthlyTrends"][-1]["count"] == 2

    dashboard = client.get("/api/dashboard").json()
    assert (dashboard["decisions"], dashboard["goals"], dashboard["projects"]) == (2, 1, 0)
    assert dashboard["highImpactDecisions"] == 1
    assert len(dashboard["recentDecisions"]) == 2

    events = client.get("/api/timeline").json()["events"]
    assert {e["title"] for e in events} == {"Big one", "Small one"}


def test_trend_window_setting_applies_to_analytics_and_dashboard(client, decision_repo, monkeypatch):
    monkeypatch.setenv("ANALYTICS_TREND_MONTHS", "3")
    reload_config()
    decision_repo.seed(make_decision(impact_score=6))

    analytics = client.get("/api/analytics").json()
    dashboard = client.get("/api/dashboard").json()

    assert len(analytics["monthlyTrends"]) == 3
    assert len(dashboard["monthlyTrends"]) == 3
    assert analytics["monthlyTrends"] == dashboard["monthlyTrends"]
