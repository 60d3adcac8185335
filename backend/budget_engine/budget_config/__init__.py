"""
budget_config – Reduction categories and leaf classification.

**Single source of truth** for:
  - Reduction categories (ids, display order, defaults, pinned catch-all)
  - Leaf name -> category maps (per dataset)
  - The per-leaf split/reduce policy

Quick start::

    from budget_engine.budget_config import classify_leaf, resolve_dataset
    from budget_engine.core import iter_leaves
    from budget_engine.scenarios import default_reductions

    dataset = resolve_dataset("fall-2025")
    leaf = next(iter_leaves(dataset.spending))
    result = classify_leaf(leaf, default_reductions(), dataset.category_map)
    # result.category  == "Health"
    # result.node.amount == leaf.amount_2025 * (1 - 7.5 / 100)

To add a new dataset:
  1. Create ``budget_config/datasets/<name>.py`` (copy fall_2025.py as template)
  2. Register in ``budget_config/datasets/__init__.py``
"""

from budget_engine.budget_config.classifier import (
    LeafClassification,
    classify_leaf,
    resolve_category,
    split_capital,
)
from budget_engine.budget_config.datasets import (
    BudgetDataset,
    available_datasets,
    default_dataset,
    resolve_dataset,
)
from budget_engine.budget_config.schema import (
    CATEGORY_LABELS,
    CATEGORY_ORDER,
    DEFAULT_CATEGORY,
    OTHER_FEDERAL_PROGRAMS,
    PINNED_CATEGORIES,
    REDUCTION_CATEGORIES,
    REDUCTION_MAX,
    REDUCTION_MIN,
    REDUCTION_STEP,
)

__all__ = [
    "LeafClassification",
    "classify_leaf",
    "resolve_category",
    "split_capital",
    "BudgetDataset",
    "available_datasets",
    "default_dataset",
    "resolve_dataset",
    "CATEGORY_LABELS",
    "CATEGORY_ORDER",
    "DEFAULT_CATEGORY",
    "OTHER_FEDERAL_PROGRAMS",
    "PINNED_CATEGORIES",
    "REDUCTION_CATEGORIES",
    "REDUCTION_MAX",
    "REDUCTION_MIN",
    "REDUCTION_STEP",
]
