"""End-to-end tests for the flow-diagram and reduction routes."""

from __future__ import annotations

import json
from urllib.parse import quote

import pytest

import budget_app.state as state
from budget_app.services.notifications import (
    register_totals_listener,
    unregister_totals_listener,
)
from budget_app.services.scenario import recompute
from budget_engine.budget_config.schema import CATEGORY_ORDER, POLICY_PHASE_REDUCTION


def _url(category: str) -> str:
    return f"/api/reductions/{quote(category, safe='')}"


class TestMeta:
    def test_health(self, test_client):
        resp = test_client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_datasets(self, test_client):
        body = test_client.get("/api/datasets").json()
        assert body["default"] == "fall-2025"
        assert body["active"] in body["datasets"]


class TestSankey:
    def test_payload_matches_engine(self, test_client):
        resp = test_client.get("/api/sankey")
        assert resp.status_code == 200

        expected = json.loads(json.dumps(recompute().to_dict()))
        assert resp.json() == expected

    def test_deficit_is_spending_minus_revenue(self, test_client):
        body = test_client.get("/api/sankey").json()
        assert body["deficit"] == pytest.approx(body["spending"] - body["revenue"])
        assert body["total"] == max(body["spending"], body["revenue"])

    def test_totals_after_sankey(self, test_client):
        sankey = test_client.get("/api/sankey").json()
        assert state._latest_totals is not None

        totals = test_client.get("/api/totals").json()
        assert totals["spending"] == sankey["spending"]
        assert totals["opex2025"] == sankey["opex2025"]

    def test_totals_without_prior_computation(self, test_client):
        resp = test_client.get("/api/totals")
        assert resp.status_code == 200
        assert resp.json()["spending"] == pytest.approx(recompute().spending)


class TestReductions:
    def test_default_table(self, test_client):
        body = test_client.get("/api/reductions").json()

        assert body["live"] is False
        assert (body["min"], body["max"], body["step"]) == (0.0, 15.0, 0.5)
        assert [c["id"] for c in body["categories"]] == CATEGORY_ORDER
        health = body["categories"][0]
        assert health["reduction"] == POLICY_PHASE_REDUCTION
        assert health["pinned"] is False
        pinned = [c["id"] for c in body["categories"] if c["pinned"]]
        assert pinned == ["Other Federal Programs"]

    def test_update_changes_totals(self, test_client):
        before = test_client.get("/api/sankey").json()

        resp = test_client.put(_url("Health"), json={"reduction": 15})
        assert resp.status_code == 200
        body = resp.json()
        assert body["category"] == "Health"
        assert body["reduction"] == 15.0
        assert body["totals"]["spending"] < before["spending"]
        assert body["totals"]["revenue"] == before["revenue"]

        after = test_client.get("/api/sankey").json()
        assert after["spending"] == body["totals"]["spending"]

    def test_update_category_with_reserved_characters(self, test_client):
        category = "Economy + Innovation & Research"
        resp = test_client.put(_url(category), json={"reduction": 0})
        assert resp.status_code == 200
        assert resp.json()["category"] == category

        table = test_client.get("/api/reductions").json()
        item = next(c for c in table["categories"] if c["id"] == category)
        assert item["reduction"] == 0.0

    def test_reset_restores_defaults(self, test_client):
        test_client.put(_url("Health"), json={"reduction": 2.5})

        resp = test_client.post("/api/reductions/reset")
        assert resp.status_code == 200
        health = resp.json()["categories"][0]
        assert health["reduction"] == POLICY_PHASE_REDUCTION

    def test_breakdown(self, test_client):
        body = test_client.get("/api/reductions/breakdown").json()

        assert [r["category"] for r in body["rows"]][: len(CATEGORY_ORDER)] == CATEGORY_ORDER
        assert body["total_savings"] == pytest.approx(sum(r["savings"] for r in body["rows"]))
        assert body["total_savings"] > 0
        other = next(r for r in body["rows"] if r["category"] == "Other Federal Programs")
        assert other["savings"] == 0.0


class TestListeners:
    def test_listener_called_once_per_update(self, test_client):
        received = []
        register_totals_listener(received.append)
        try:
            resp = test_client.put(_url("Health"), json={"reduction": 10})
        finally:
            unregister_totals_listener(received.append)

        assert resp.status_code == 200
        assert len(received) == 1
        assert received[0].spending == resp.json()["totals"]["spending"]

    def test_failing_listener_does_not_break_request(self, test_client):
        def boom(totals):
            raise RuntimeError("listener down")

        register_totals_listener(boom)
        try:
            resp = test_client.get("/api/sankey")
        finally:
            unregister_totals_listener(boom)

        assert resp.status_code == 200
        assert state._latest_totals is not None
