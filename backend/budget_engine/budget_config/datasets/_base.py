"""Budget dataset dataclass: bundles everything the engine needs per budget."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from budget_engine.core.tree import BudgetNode


@dataclass(frozen=True)
class BudgetDataset:
    """Static reference data for one budget.

    Each supported budget gets one instance (see per-dataset modules under
    ``budget_config/datasets/``).  Built once at start-up and shared by
    reference; nothing in the engine mutates it.
    """

    dataset_id: str                     # e.g. "fall-2025"
    label: str                          # e.g. "Fall 2025 Federal Budget"
    spending: BudgetNode                # spending tree root
    revenue: BudgetNode                 # revenue tree root
    category_map: Mapping[str, str]     # leaf name -> reduction category
