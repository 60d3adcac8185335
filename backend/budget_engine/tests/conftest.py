"""Shared pytest fixtures and tree builders for engine and API tests.

Provides:
- test_client: session-scoped FastAPI TestClient with lifespan handling
- _reset_app_state: autouse, restores default reductions between tests
- leaf / branch: compact BudgetNode builders
- SIMPLE_CATEGORY_MAP / make_simple_budget(): a small synthetic budget
"""

from __future__ import annotations

from typing import Any

import pytest
from starlette.testclient import TestClient

import budget_app.state as state
from budget_app.main import app
from budget_engine.core.tree import BudgetNode
from budget_engine.scenarios.reductions import default_reductions


# ── TestClient ─────────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def test_client():
    """Session-scoped TestClient; triggers app lifespan (dataset load)."""
    with TestClient(app) as client:
        yield client


@pytest.fixture(autouse=True)
def _reset_app_state(monkeypatch: pytest.MonkeyPatch):
    """Every test starts from the non-live default reduction table."""
    monkeypatch.setattr(state, "IS_BUDGET_LIVE", False)
    state._reductions = default_reductions(live=False)
    state._latest_totals = None
    yield
    state._reductions = default_reductions(live=False)
    state._latest_totals = None


# ── Tree builders ──────────────────────────────────────────────────────────

def leaf(
    name: str,
    amount_2024: float,
    amount_2025: float,
    **kwargs: Any,
) -> BudgetNode:
    return BudgetNode(name=name, amount_2024=amount_2024, amount_2025=amount_2025, **kwargs)


def branch(name: str, *children: BudgetNode) -> BudgetNode:
    return BudgetNode(name=name, children=tuple(children))


# ── Synthetic budget ───────────────────────────────────────────────────────
#
# Amounts are multiples of 1/4 so every split and sum is exact in binary
# floating point.

SIMPLE_CATEGORY_MAP: dict[str, str] = {
    "Hospitals": "Health",
    "Police": "Public Safety",
    "Bridges": "Economy + Innovation & Research",
}


def make_simple_budget() -> tuple[BudgetNode, BudgetNode]:
    spending = branch(
        "Spending",
        branch(
            "Services",
            leaf("Hospitals", 40.0, 40.0),
            leaf("Police", 20.0, 24.0, capital_share=0.25),
            leaf("Veterans", 8.0, 8.0),
        ),
        leaf("Bridges", 10.0, 12.0, capital_share=1.0),
        branch(
            "Transfers",
            leaf("Pensions", 50.0, 60.0, kind="transfer"),
            leaf("Rebate", 4.0, 0.0, kind="other"),
        ),
        leaf("Interest", 30.0, 32.0, kind="debt"),
    )
    revenue = branch(
        "Revenue",
        leaf("Income Tax", 100.0, 110.0),
        branch(
            "Excise",
            leaf("Fuel", 6.0, 6.5),
            leaf("Alcohol", 2.0, 2.5),
        ),
    )
    return spending, revenue
