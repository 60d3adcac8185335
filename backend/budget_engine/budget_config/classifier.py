"""
Spending leaf classifier.

Decides how one leaf's 2024/2025 amounts feed the partial sums and which
single amount the flow diagram should draw for it.

Classification logic:
  1. ``transfer`` / ``debt`` / ``other`` leaves: routed whole into their own
     accumulators, never split, never reduced.  Chart amount = 2025 amount.
  2. ``program`` leaves (or no kind): split by ``capital_share`` into
     operating and capital, for both years.
  3. The 2025 operating portion is scaled by the reduction percentage of the
     leaf's category (looked up through the dataset's category map).
     Capital and 2024 figures are never reduced.

Each dataset provides its category map via budget_config/datasets/<dataset>.py.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from budget_engine.budget_config.schema import DEFAULT_CATEGORY
from budget_engine.core.sums import PartialSums
from budget_engine.core.tree import (
    KIND_DEBT,
    KIND_OTHER,
    KIND_TRANSFER,
    BudgetNode,
)

if TYPE_CHECKING:
    from budget_engine.scenarios.reductions import ReductionTable


@dataclass(frozen=True)
class LeafClassification:
    """Output of classify_leaf()."""
    node: BudgetNode        # copy of the leaf with ``amount`` set
    sums: PartialSums
    category: str | None    # reduction category (program leaves only)
    reduction_pct: float    # percentage actually applied


# ── Category lookup ───────────────────────────────────────────────────────

def resolve_category(name: str, category_map: Mapping[str, str]) -> str:
    """Map a leaf name to its reduction category; unknown names fall to the catch-all."""
    return category_map.get(name) or DEFAULT_CATEGORY


# ── Capital split ─────────────────────────────────────────────────────────

def split_capital(amount: float, capital_share: float) -> tuple[float, float]:
    """Return ``(operating, capital)`` for one amount."""
    capital = amount * capital_share
    return amount - capital, capital


# ── Public API ────────────────────────────────────────────────────────────

_ROUTED_KINDS = {
    KIND_TRANSFER: ("transfers2024", "transfers2025"),
    KIND_DEBT: ("debt2024", "debt2025"),
    KIND_OTHER: ("other2024", "other2025"),
}


def classify_leaf(
    leaf: BudgetNode,
    reductions: ReductionTable,
    category_map: Mapping[str, str],
) -> LeafClassification:
    """
    Classify a single spending leaf.

    Parameters
    ----------
    leaf : BudgetNode
        A node for which ``is_leaf`` holds.
    reductions : ReductionTable
        Snapshot of category reduction percentages.  Out-of-range values are
        applied as given.
    category_map : Mapping[str, str]
        Leaf name -> reduction category.

    Returns
    -------
    LeafClassification with the chartable leaf and its partial sums.
    """
    a24 = float(leaf.amount_2024)
    a25 = float(leaf.amount_2025)
    kind = leaf.resolved_kind

    routed = _ROUTED_KINDS.get(kind)
    if routed is not None:
        key24, key25 = routed
        return LeafClassification(
            node=replace(leaf, amount=a25),
            sums=PartialSums(**{key24: a24, key25: a25}),
            category=None,
            reduction_pct=0.0,
        )

    capital_share = leaf.capital_share if leaf.capital_share is not None else 0.0
    op24, cap24 = split_capital(a24, capital_share)
    op25, cap25 = split_capital(a25, capital_share)

    category = resolve_category(leaf.name, category_map)
    pct = reductions.percentage_for(category)
    op25_after = op25 * (1 - pct / 100)

    return LeafClassification(
        node=replace(leaf, amount=op25_after + cap25),
        sums=PartialSums(
            opex2024=op24,
            capex2024=cap24,
            opex2025=op25_after,
            capex2025=cap25,
        ),
        category=category,
        reduction_pct=pct,
    )
