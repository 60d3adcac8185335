"""
Reduction category schema.

SINGLE SOURCE OF TRUTH for the department categories that carry a spending
reduction slider: category ids, display order, policy-phase defaults, and
which category is pinned at zero.

To retarget a new budget: do NOT modify this file.
Instead, create a dataset module in budget_config/datasets/<dataset>.py
with a category map that sends leaf names to these categories.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryDef:
    """One reduction category (e.g. Health, Public Safety)."""
    id: str
    label: str
    default_reduction: float
    pinned: bool = False    # reduction permanently held at 0


# ═════════════════════════════════════════════════════════════════════════════
# POLICY PHASE
# ═════════════════════════════════════════════════════════════════════════════

# Departments were asked to cut 7.5% in 2026-27, 10% in 2027-28 and 15% in
# 2028-29.  The first phase seeds every slider.
POLICY_PHASE_REDUCTION = 7.5

# Slider bounds.  Enforced by the HTTP boundary only, never by the engine.
REDUCTION_MIN = 0.0
REDUCTION_MAX = 15.0
REDUCTION_STEP = 0.5

# ═════════════════════════════════════════════════════════════════════════════
# CANONICAL REDUCTION CATEGORIES
# ═════════════════════════════════════════════════════════════════════════════

OTHER_FEDERAL_PROGRAMS = "Other Federal Programs"

REDUCTION_CATEGORIES = (
    CategoryDef("Health",                          "Health",                          POLICY_PHASE_REDUCTION),
    CategoryDef("Public Safety",                   "Public Safety",                   POLICY_PHASE_REDUCTION),
    CategoryDef("Social Services & Employment",    "Social Services & Employment",    POLICY_PHASE_REDUCTION),
    CategoryDef("Economy + Innovation & Research", "Economy + Innovation & Research", POLICY_PHASE_REDUCTION),
    CategoryDef("Immigration & Border Services",   "Immigration & Border Services",   POLICY_PHASE_REDUCTION),
    CategoryDef("Government Operations",           "Government Operations",           POLICY_PHASE_REDUCTION),
    CategoryDef("Culture & Official Languages",    "Culture & Official Languages",    POLICY_PHASE_REDUCTION),
    CategoryDef("Revenue & Tax Administration",    "Revenue & Tax Administration",    POLICY_PHASE_REDUCTION),
    CategoryDef(OTHER_FEDERAL_PROGRAMS,            "Other Federal Programs",          0.0, pinned=True),
    CategoryDef("International Affairs",           "International Affairs",           POLICY_PHASE_REDUCTION),
)

# ═════════════════════════════════════════════════════════════════════════════
# DERIVED LOOKUPS
# ═════════════════════════════════════════════════════════════════════════════

# Ordered ids for UI display sorting
CATEGORY_ORDER: list[str] = [c.id for c in REDUCTION_CATEGORIES]

# category id → display label
CATEGORY_LABELS: dict[str, str] = {c.id: c.label for c in REDUCTION_CATEGORIES}

# Categories whose reduction can never move off zero
PINNED_CATEGORIES: frozenset[str] = frozenset(
    c.id for c in REDUCTION_CATEGORIES if c.pinned
)

# Fallback when a leaf name is absent from the category map
DEFAULT_CATEGORY = OTHER_FEDERAL_PROGRAMS
