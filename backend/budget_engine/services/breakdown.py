"""Per-category view of where the 2025 operating reductions come from."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pandas as pd

from budget_engine.budget_config.classifier import classify_leaf, split_capital
from budget_engine.budget_config.schema import CATEGORY_ORDER
from budget_engine.core.tree import KIND_PROGRAM, BudgetNode, iter_leaves
from budget_engine.scenarios.reductions import ReductionTable

BREAKDOWN_COLUMNS = [
    "category",
    "reduction_pct",
    "leaves",
    "opex2025_before",
    "opex2025_after",
    "savings",
]


def _category_sort_key(category: str) -> tuple[int, int | str]:
    """Schema order first, unknown categories after, alphabetically."""
    if category in CATEGORY_ORDER:
        return (0, CATEGORY_ORDER.index(category))
    return (1, category)


def _program_leaf_rows(
    spending: BudgetNode,
    reductions: ReductionTable,
    category_map: Mapping[str, str],
) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for leaf in iter_leaves(spending):
        if leaf.resolved_kind != KIND_PROGRAM:
            continue
        result = classify_leaf(leaf, reductions, category_map)
        share = leaf.capital_share if leaf.capital_share is not None else 0.0
        op25_before, _ = split_capital(float(leaf.amount_2025), share)
        rows.append({
            "category": result.category,
            "leaf": leaf.name,
            "opex2025_before": op25_before,
            "opex2025_after": result.sums.opex2025,
        })
    return rows


def build_reduction_breakdown(
    spending: BudgetNode,
    reductions: ReductionTable,
    category_map: Mapping[str, str],
) -> pd.DataFrame:
    """
    One row per reduction category with operating spend before/after the cut.

    Every schema category appears, even with no program leaves (zeros), so
    the frame lines up with the slider list.
    """
    work = pd.DataFrame(
        _program_leaf_rows(spending, reductions, category_map),
        columns=["category", "leaf", "opex2025_before", "opex2025_after"],
    )

    grouped = work.groupby("category", sort=False).agg(
        leaves=("leaf", "count"),
        opex2025_before=("opex2025_before", "sum"),
        opex2025_after=("opex2025_after", "sum"),
    )

    categories = sorted(set(CATEGORY_ORDER) | set(grouped.index), key=_category_sort_key)
    out = grouped.reindex(categories).fillna(0.0)
    out["leaves"] = out["leaves"].astype(int)
    out["savings"] = out["opex2025_before"] - out["opex2025_after"]
    out["reduction_pct"] = [reductions.percentage_for(c) for c in categories]

    out = out.rename_axis("category").reset_index()
    return out[BREAKDOWN_COLUMNS]
