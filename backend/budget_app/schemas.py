"""Pydantic models defining the REST contract between frontend and backend."""

from __future__ import annotations

from pydantic import BaseModel, Field

from budget_app.config import REDUCTION_MAX, REDUCTION_MIN, REDUCTION_STEP


# ── Flow diagram ────────────────────────────────────────────────────────────

class BudgetTreeNode(BaseModel):
    name: str
    amount2024: float | None = None
    amount2025: float | None = None
    amount: float | None = None
    capitalShare: float | None = None
    kind: str | None = None
    link: str | None = None
    children: list[BudgetTreeNode] | None = None


BudgetTreeNode.model_rebuild()


class TotalsResponse(BaseModel):
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


class SankeyResponse(TotalsResponse):
    total: float
    baseline_spending: float
    baseline_revenue: float
    spending_data: BudgetTreeNode
    revenue_data: BudgetTreeNode


# ── Reductions ──────────────────────────────────────────────────────────────

class ReductionCategoryItem(BaseModel):
    id: str
    label: str
    reduction: float
    pinned: bool = False


class ReductionsResponse(BaseModel):
    dataset_id: str
    live: bool
    min: float = REDUCTION_MIN
    max: float = REDUCTION_MAX
    step: float = REDUCTION_STEP
    categories: list[ReductionCategoryItem] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ReductionUpdateRequest(BaseModel):
    reduction: float = Field(
        ..., ge=REDUCTION_MIN, le=REDUCTION_MAX, multiple_of=REDUCTION_STEP,
    )


class ReductionUpdateResponse(BaseModel):
    category: str
    reduction: float
    totals: TotalsResponse


class BreakdownRow(BaseModel):
    category: str
    reduction_pct: float
    leaves: int
    opex2025_before: float
    opex2025_after: float
    savings: float


class BreakdownResponse(BaseModel):
    dataset_id: str
    total_savings: float
    rows: list[BreakdownRow] = Field(default_factory=list)


# ── Datasets ────────────────────────────────────────────────────────────────

class DatasetsResponse(BaseModel):
    active: str
    default: str
    datasets: list[str] = Field(default_factory=list)
