"""Domain constants and budget_config re-exports."""

from __future__ import annotations

from budget_engine.budget_config.schema import (
    CATEGORY_LABELS,
    CATEGORY_ORDER,
    PINNED_CATEGORIES,
    REDUCTION_MAX,
    REDUCTION_MIN,
    REDUCTION_STEP,
)

# Environment variables read by app.state at import time.
ENV_LIVE_FLAG = "BUDGET_2025_LIVE"
ENV_DATASET = "BUDGET_DATASET"
ENV_DATASET_PATH = "BUDGET_DATASET_PATH"
ENV_CORS_ORIGINS = "BUDGET_CORS_ORIGINS"

_TRUTHY = {"1", "true", "yes", "on"}

# Local frontend dev servers (Next.js / Vite).
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def is_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUTHY
