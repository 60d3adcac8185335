"""
Global mutable state shared across the application.

All modules access these via ``import budget_app.state as state`` and then
``state._reductions``, ``state._dataset``, etc. so that rebinding in the
lifespan function (or in tests) is visible everywhere.

The reduction table is only ever *replaced*, never mutated: a request that
read ``state._reductions`` keeps a complete snapshot even if another request
rebinds it meanwhile.
"""

from __future__ import annotations

import os
from collections.abc import Callable

from budget_app.config import (
    DEFAULT_CORS_ORIGINS,
    ENV_CORS_ORIGINS,
    ENV_DATASET,
    ENV_DATASET_PATH,
    ENV_LIVE_FLAG,
    is_truthy,
)
from budget_engine.budget_config.datasets import BudgetDataset, default_dataset
from budget_engine.scenarios.reductions import ReductionTable
from budget_engine.services.sankey import BudgetTotals

# When the official budget is live every default reduction is 0 and the
# sliders are locked.
IS_BUDGET_LIVE: bool = is_truthy(os.environ.get(ENV_LIVE_FLAG))

DATASET_ID: str = os.environ.get(ENV_DATASET) or default_dataset()

# Optional JSON file that replaces the registered dataset.
DATASET_PATH: str | None = os.environ.get(ENV_DATASET_PATH) or None

CORS_ORIGINS: list[str] = DEFAULT_CORS_ORIGINS + [
    o.strip() for o in os.environ.get(ENV_CORS_ORIGINS, "").split(",") if o.strip()
]

# Reference data – loaded once at startup in main._lifespan().
_dataset: BudgetDataset | None = None
_config_warnings: list[str] = []

# Current reduction snapshot (copy-on-write).
_reductions: ReductionTable | None = None

# Last totals delivered to listeners.
_latest_totals: BudgetTotals | None = None

# Callbacks invoked after each recomputation, outside the computation itself.
_totals_listeners: list[Callable[[BudgetTotals], None]] = []
