"""Reduction snapshot updates issued from several request threads."""

from __future__ import annotations

import threading
import time

import budget_app.state as state
from budget_app.services import scenario
from budget_engine.budget_config.schema import POLICY_PHASE_REDUCTION


def _slow_reads(monkeypatch, delay: float = 0.2) -> None:
    """Widen the window between reading and replacing the table."""
    original = scenario.current_reductions

    def slow():
        table = original()
        time.sleep(delay)
        return table

    monkeypatch.setattr(scenario, "current_reductions", slow)


def _run_parallel(*calls) -> None:
    threads = [threading.Thread(target=fn, args=args) for fn, *args in calls]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)


class TestConcurrentReductionUpdates:
    def test_updates_to_different_categories_are_both_kept(self, monkeypatch):
        _slow_reads(monkeypatch)

        _run_parallel(
            (scenario.set_category_reduction, "Health", 15.0),
            (scenario.set_category_reduction, "Public Safety", 12.5),
        )

        table = state._reductions
        assert table.percentage_for("Health") == 15.0
        assert table.percentage_for("Public Safety") == 12.5
        assert table.percentage_for("Government Operations") == POLICY_PHASE_REDUCTION

    def test_many_threads_each_land_their_update(self, monkeypatch):
        _slow_reads(monkeypatch, delay=0.02)
        categories = ["Health", "Public Safety", "Government Operations", "International Affairs"]

        _run_parallel(*[(scenario.set_category_reduction, c, 1.0) for c in categories])

        assert all(state._reductions.percentage_for(c) == 1.0 for c in categories)

    def test_reset_restores_defaults(self):
        scenario.set_category_reduction("Health", 3.0)
        table = scenario.reset_reductions()

        assert table is state._reductions
        assert table.percentage_for("Health") == POLICY_PHASE_REDUCTION
