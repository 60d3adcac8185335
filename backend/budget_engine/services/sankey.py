"""
Flow-diagram payload: spending + revenue trees with headline totals.

``build_sankey_data`` is the single entry point the application calls on
every change of the reduction table.  It recomputes everything from scratch
and returns plain values; ``SankeyResult.to_dict()`` builds brand-new
containers on each call so callers can mutate what they receive without
touching the engine's trees.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from budget_engine.core.sums import PartialSums
from budget_engine.core.tree import BudgetNode
from budget_engine.scenarios.reductions import ReductionTable
from budget_engine.services.aggregate import aggregate_tree
from budget_engine.services.revenue import normalize_revenue, total_of


@dataclass(frozen=True)
class BudgetTotals:
    """Payload delivered to totals listeners after each recomputation."""
    spending: float
    revenue: float
    deficit: float
    opex2024: float
    capex2024: float
    opex2025: float
    capex2025: float
    transfers2024: float
    transfers2025: float
    debt2024: float
    debt2025: float
    other2024: float
    other2025: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class SankeyResult:
    total: float                # max(spending, revenue), shared chart scale
    spending: float             # total 2025 spending after reductions
    revenue: float              # total 2025 revenue
    deficit: float
    baseline_spending: float    # total 2024 spending
    baseline_revenue: float     # total 2024 revenue
    spending_data: BudgetNode
    revenue_data: BudgetNode
    sums: PartialSums

    def totals(self) -> BudgetTotals:
        return BudgetTotals(
            spending=self.spending,
            revenue=self.revenue,
            deficit=self.deficit,
            **self.sums.to_dict(),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "spending": self.spending,
            "revenue": self.revenue,
            "deficit": self.deficit,
            "spending_data": self.spending_data.to_dict(),
            "revenue_data": self.revenue_data.to_dict(),
            "baseline_spending": self.baseline_spending,
            "baseline_revenue": self.baseline_revenue,
            **self.sums.to_dict(),
        }


def build_sankey_data(
    spending: BudgetNode,
    revenue: BudgetNode,
    reductions: ReductionTable,
    category_map: Mapping[str, str],
) -> SankeyResult:
    spending_out, sums = aggregate_tree(spending, reductions, category_map)
    revenue_out = normalize_revenue(revenue)

    total_spending_2025 = sums.total_2025
    revenue_2025 = total_of(revenue_out, use_projected=True)

    return SankeyResult(
        total=max(total_spending_2025, revenue_2025),
        spending=total_spending_2025,
        revenue=revenue_2025,
        deficit=total_spending_2025 - revenue_2025,
        baseline_spending=sums.total_2024,
        baseline_revenue=total_of(revenue_out, use_projected=False),
        spending_data=spending_out,
        revenue_data=revenue_out,
        sums=sums,
    )
