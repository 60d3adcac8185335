"""Dataset loading and reduction-table snapshots (read-through state)."""

from __future__ import annotations

import logging
import threading

import budget_app.state as state
from budget_engine.budget_config.datasets import BudgetDataset, resolve_dataset
from budget_engine.io.tree_reader import read_budget_json
from budget_engine.scenarios.reductions import (
    ReductionTable,
    default_reductions,
    validate_category_map,
)
from budget_engine.services.sankey import SankeyResult, build_sankey_data

_log = logging.getLogger(__name__)

# Serializes read-modify-write of state._reductions across request threads.
_reductions_lock = threading.Lock()


def load_dataset() -> BudgetDataset:
    """Load the configured dataset, validate its category map, reset reductions."""
    if state.DATASET_PATH:
        dataset = read_budget_json(state.DATASET_PATH, dataset_id=state.DATASET_ID)
    else:
        dataset = resolve_dataset(state.DATASET_ID)
    _log.info("Using dataset %r (%s)", dataset.dataset_id, dataset.label)

    reductions = default_reductions(live=state.IS_BUDGET_LIVE)
    state._config_warnings = validate_category_map(dataset.category_map, reductions)
    state._dataset = dataset
    state._reductions = reductions
    state._latest_totals = None
    return dataset


def current_dataset() -> BudgetDataset:
    if state._dataset is None:
        return load_dataset()
    return state._dataset


def current_reductions() -> ReductionTable:
    if state._reductions is None:
        state._reductions = default_reductions(live=state.IS_BUDGET_LIVE)
    return state._reductions


def set_category_reduction(category: str, pct: float) -> ReductionTable:
    """Change one category on the current snapshot without losing concurrent updates."""
    with _reductions_lock:
        table = current_reductions().with_reduction(category, pct)
        state._reductions = table
    _log.info("Reduction for %r set to %.1f%%", category, pct)
    return table


def reset_reductions() -> ReductionTable:
    with _reductions_lock:
        table = default_reductions(live=state.IS_BUDGET_LIVE)
        state._reductions = table
    _log.info("Reductions reset to defaults (live=%s)", state.IS_BUDGET_LIVE)
    return table


def recompute(reductions: ReductionTable | None = None) -> SankeyResult:
    """Run the whole pipeline from scratch for one reduction snapshot."""
    dataset = current_dataset()
    table = reductions if reductions is not None else current_reductions()
    return build_sankey_data(
        dataset.spending,
        dataset.revenue,
        table,
        dataset.category_map,
    )
