"""Totals change notifications.

Listeners are plain callables receiving a ``BudgetTotals``.  Routes schedule
``notify_totals_listeners`` as a background task so it runs after the
response is built, never inside the computation.  Delivering the same
totals twice is harmless: listeners only observe snapshots.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import budget_app.state as state
from budget_engine.services.sankey import BudgetTotals

_log = logging.getLogger(__name__)

TotalsListener = Callable[[BudgetTotals], None]


def register_totals_listener(listener: TotalsListener) -> None:
    if listener not in state._totals_listeners:
        state._totals_listeners.append(listener)


def unregister_totals_listener(listener: TotalsListener) -> None:
    if listener in state._totals_listeners:
        state._totals_listeners.remove(listener)


def record_latest_totals(totals: BudgetTotals) -> None:
    """Built-in listener: keep the last snapshot for GET /api/totals."""
    state._latest_totals = totals


def notify_totals_listeners(totals: BudgetTotals) -> None:
    for listener in list(state._totals_listeners):
        try:
            listener(totals)
        except Exception:
            _log.exception("Totals listener %r failed", listener)
