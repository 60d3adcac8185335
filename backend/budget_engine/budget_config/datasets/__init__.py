"""Budget dataset registry.

To add a new dataset:
  1. Create ``budget_config/datasets/<dataset>.py`` (copy fall_2025.py as template).
  2. Define a module-level ``DATASET`` instance.
  3. Register the module path in ``_REGISTRY`` below.
"""

from __future__ import annotations

import importlib

from budget_engine.budget_config.datasets._base import BudgetDataset

__all__ = [
    "BudgetDataset",
    "resolve_dataset",
    "available_datasets",
    "default_dataset",
]

_REGISTRY: dict[str, str] = {
    "fall-2025": "budget_engine.budget_config.datasets.fall_2025",
}

_DEFAULT_DATASET = "fall-2025"


def resolve_dataset(dataset_id: str) -> BudgetDataset:
    """Load and return the dataset registered as *dataset_id*.

    Raises ``ValueError`` with list of available datasets on unknown id.
    """
    module_path = _REGISTRY.get(dataset_id.lower())
    if module_path is None:
        raise ValueError(
            f"Unknown dataset_id: '{dataset_id}'. "
            f"Available: {sorted(_REGISTRY.keys())}"
        )
    mod = importlib.import_module(module_path)
    return mod.DATASET  # type: ignore[attr-defined]


def available_datasets() -> list[str]:
    """Return registered dataset IDs."""
    return sorted(_REGISTRY.keys())


def default_dataset() -> str:
    """Return the default dataset ID."""
    return _DEFAULT_DATASET
