"""Reduction slider routes: read, update one category, reset, breakdown."""

from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, HTTPException

import budget_app.state as state
from budget_app.config import CATEGORY_LABELS, CATEGORY_ORDER, PINNED_CATEGORIES
from budget_app.schemas import (
    BreakdownResponse,
    BreakdownRow,
    ReductionCategoryItem,
    ReductionsResponse,
    ReductionUpdateRequest,
    ReductionUpdateResponse,
    TotalsResponse,
)
from budget_app.services.notifications import notify_totals_listeners
from budget_app.services.scenario import (
    current_dataset,
    current_reductions,
    recompute,
    reset_reductions,
    set_category_reduction,
)
from budget_engine.scenarios.reductions import ReductionTable
from budget_engine.services.breakdown import build_reduction_breakdown

router = APIRouter()


# ── Helpers ────────────────────────────────────────────────────────────────

def _reductions_response(table: ReductionTable) -> ReductionsResponse:
    dataset = current_dataset()
    extra = sorted(set(table.percentages) - set(CATEGORY_ORDER))
    categories = [
        ReductionCategoryItem(
            id=cat,
            label=CATEGORY_LABELS.get(cat, cat),
            reduction=table.percentage_for(cat),
            pinned=cat in table.pinned,
        )
        for cat in CATEGORY_ORDER + extra
    ]
    return ReductionsResponse(
        dataset_id=dataset.dataset_id,
        live=state.IS_BUDGET_LIVE,
        categories=categories,
        warnings=list(state._config_warnings),
    )


# ── Routes ─────────────────────────────────────────────────────────────────

@router.get("/api/reductions", response_model=ReductionsResponse)
def get_reductions() -> ReductionsResponse:
    return _reductions_response(current_reductions())


@router.put("/api/reductions/{category}", response_model=ReductionUpdateResponse)
def update_reduction(
    category: str,
    body: ReductionUpdateRequest,
    background_tasks: BackgroundTasks,
) -> ReductionUpdateResponse:
    if state.IS_BUDGET_LIVE:
        raise HTTPException(
            status_code=409,
            detail="Reductions are locked while the official budget is live",
        )
    table = current_reductions()
    if category not in CATEGORY_LABELS and category not in table:
        raise HTTPException(status_code=404, detail=f"Unknown category: {category!r}")
    if category in PINNED_CATEGORIES:
        raise HTTPException(
            status_code=400,
            detail=f"Category {category!r} is pinned at 0% and cannot be changed",
        )

    table = set_category_reduction(category, body.reduction)

    totals = recompute(table).totals()
    background_tasks.add_task(notify_totals_listeners, totals)
    return ReductionUpdateResponse(
        category=category,
        reduction=table.percentage_for(category),
        totals=TotalsResponse.model_validate(totals.to_dict()),
    )


@router.post("/api/reductions/reset", response_model=ReductionsResponse)
def reset(background_tasks: BackgroundTasks) -> ReductionsResponse:
    table = reset_reductions()
    background_tasks.add_task(notify_totals_listeners, recompute(table).totals())
    return _reductions_response(table)


@router.get("/api/reductions/breakdown", response_model=BreakdownResponse)
def get_breakdown() -> BreakdownResponse:
    dataset = current_dataset()
    df = build_reduction_breakdown(
        dataset.spending, current_reductions(), dataset.category_map,
    )
    return BreakdownResponse(
        dataset_id=dataset.dataset_id,
        total_savings=float(df["savings"].sum()),
        rows=[
            BreakdownRow(
                category=str(row["category"]),
                reduction_pct=float(row["reduction_pct"]),
                leaves=int(row["leaves"]),
                opex2025_before=float(row["opex2025_before"]),
                opex2025_after=float(row["opex2025_after"]),
                savings=float(row["savings"]),
            )
            for row in df.to_dict("records")
        ],
    )
