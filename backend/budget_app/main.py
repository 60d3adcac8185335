"""
Budget flow backend – FastAPI app serving the spending/revenue flow diagram.

Endpoints:
  GET  /api/health                      → Liveness probe
  GET  /api/datasets                    → Registered dataset ids
  GET  /api/sankey                      → Full chart payload for current reductions
  GET  /api/totals                      → Last totals delivered to listeners
  GET  /api/reductions                  → Current reduction table + bounds
  PUT  /api/reductions/{category}       → Change one category's reduction
  POST /api/reductions/reset            → Restore default reductions
  GET  /api/reductions/breakdown        → Per-category savings

Every chart request recomputes from scratch; the only state kept between
requests is the dataset (static) and the reduction snapshot.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import budget_app.state as state
from budget_app.routers import reductions, sankey
from budget_app.schemas import DatasetsResponse
from budget_app.services.notifications import (
    record_latest_totals,
    register_totals_listener,
)
from budget_app.services.scenario import load_dataset
from budget_engine.budget_config.datasets import available_datasets, default_dataset


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Load reference data once and hook the built-in totals listener."""
    load_dataset()
    register_totals_listener(record_latest_totals)
    yield


app = FastAPI(lifespan=_lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=state.CORS_ORIGINS,
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(sankey.router)
app.include_router(reductions.router)


@app.get("/api/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/datasets", response_model=DatasetsResponse)
def get_datasets() -> DatasetsResponse:
    return DatasetsResponse(
        active=state.DATASET_ID,
        default=default_dataset(),
        datasets=available_datasets(),
    )
