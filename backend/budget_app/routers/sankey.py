"""Flow-diagram routes: full chart payload and headline totals."""

from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks

import budget_app.state as state
from budget_app.schemas import SankeyResponse, TotalsResponse
from budget_app.services.notifications import notify_totals_listeners
from budget_app.services.scenario import recompute

router = APIRouter()


@router.get(
    "/api/sankey",
    response_model=SankeyResponse,
    response_model_exclude_none=True,
)
def get_sankey(background_tasks: BackgroundTasks) -> SankeyResponse:
    result = recompute()
    # Listeners run once the response is built, never mid-computation.
    background_tasks.add_task(notify_totals_listeners, result.totals())
    return SankeyResponse.model_validate(result.to_dict())


@router.get("/api/totals", response_model=TotalsResponse)
def get_totals(background_tasks: BackgroundTasks) -> TotalsResponse:
    totals = state._latest_totals
    if totals is None:
        totals = recompute().totals()
        background_tasks.add_task(notify_totals_listeners, totals)
    return TotalsResponse.model_validate(totals.to_dict())
