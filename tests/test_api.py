"""API tests with the rule store swapped for an in-memory one."""

import pytest
from fastapi.testclient import TestClient

from fra_dss.api.deps import get_rule_store
from fra_dss.main import app
from fra_dss.storage.base import RuleStoreUnavailableError
from fra_dss.storage.memory import InMemoryRuleStore

HIGH_RISK = {
    "name": "High Risk Area Alert",
    "conditions": {
        "all": [
            {"field": "forest_type", "operator": "equals", "value": "protected"},
            {"field": "area_hectares", "operator": "greater_than", "value": 5},
        ]
    },
    "action": "URGENT: Review claim in protected forest area",
    "priority": 10,
}

WITNESSES = {
    "name": "Community Claim Validation",
    "conditions": {"any": [{"field": "witnesses_count", "operator": "less_than", "value": 3}]},
    "action": "Request additional witnesses",
    "priority": 20,
}


@pytest.fixture
def store():
    return InMemoryRuleStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_rule_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    """Health endpoint responds."""
    assert client.get("/health").json()["status"] == "ok"


def test_create_get_list(client):
    """Created rules can be fetched and listed."""
    resp = client.post("/api/decision-rules", json=HIGH_RISK)
    assert resp.status_code == 201
    rule = resp.json()["rule"]
    assert rule["id"] == 1
    assert rule["active"] is True

    assert client.get("/api/decision-rules/1").json()["rule"]["name"] == "High Risk Area Alert"
    assert [r["id"] for r in client.get("/api/decision-rules").json()["rules"]] == [1]


def test_create_rejects_non_canonical_operator(client):
    """Operators outside the canonical set are a 422 at write time."""
    body = {**HIGH_RISK, "conditions": {"field": "area_ha", "operator": "lte", "value": 4}}
    resp = client.post("/api/decision-rules", json=body)
    assert resp.status_code == 422
    assert "invalid operator" in resp.json()["detail"]


def test_create_requires_fields(client):
    """Missing action is rejected by request validation."""
    resp = client.post("/api/decision-rules", json={"name": "x", "conditions": {}})
    assert resp.status_code == 422


def test_update_and_delete(client):
    """PUT changes supplied fields; DELETE removes; unknown ids are 404."""
    client.post("/api/decision-rules", json=HIGH_RISK)

    resp = client.put("/api/decision-rules/1", json={"active": False})
    assert resp.status_code == 200
    assert resp.json()["rule"]["active"] is False
    assert resp.json()["rule"]["priority"] == 10

    assert client.put("/api/decision-rules/9", json={"active": False}).status_code == 404
    assert client.put("/api/decision-rules/1", json={"conditions": {"all": []}}).status_code == 422

    assert client.get("/api/decision-rules", params={"active_only": True}).json()["rules"] == []
    assert client.delete("/api/decision-rules/1").status_code == 200
    assert client.delete("/api/decision-rules/1").status_code == 404
    assert client.get("/api/decision-rules/1").status_code == 404


def test_evaluate(client):
    """Evaluate returns id-ordered results and bucketed recommendations."""
    client.post("/api/decision-rules", json=WITNESSES)
    client.post("/api/decision-rules", json=HIGH_RISK)

    resp = client.post(
        "/api/decision-rules/evaluate",
        json={"forest_type": "protected", "area_hectares": 7, "witnesses_count": 5},
    )
    assert resp.status_code == 200
    body = resp.json()
    results = body["evaluation_results"]
    assert [r["rule_id"] for r in results] == [1, 2]
    assert results[0]["matched"] is False
    assert results[1]["conditions_met"] == [
        "forest_type equals protected",
        "area_hectares greater_than 5",
    ]
    assert body["recommendations"] == {
        "actions": [],
        "high_priority_actions": ["URGENT: Review claim in protected forest area"],
        "warnings": [
            'Rule "Community Claim Validation" conditions not met: witnesses_count less_than 3'
        ],
    }


def test_evaluate_rejects_non_object(client):
    """The record must be a JSON object."""
    assert client.post("/api/decision-rules/evaluate", json=[1, 2]).status_code == 422


def test_sample_rules(client):
    """Sample install is idempotent."""
    first = client.post("/api/decision-rules/sample").json()
    assert first["created"] == 5
    assert client.post("/api/decision-rules/sample").json()["created"] == 0
    assert len(client.get("/api/decision-rules").json()["rules"]) == 5


def test_store_unavailable_is_503():
    """Store failures map to 503."""

    class DownStore(InMemoryRuleStore):
        async def get_active_rules(self):
            raise RuleStoreUnavailableError("Failed to fetch decision rules")

    app.dependency_overrides[get_rule_store] = lambda: DownStore()
    try:
        resp = TestClient(app).post("/api/decision-rules/evaluate", json={"a": 1})
    finally:
        app.dependency_overrides.clear()
    assert resp.status_code == 503
    assert resp.json()["error"] == "Rule store unavailable"
