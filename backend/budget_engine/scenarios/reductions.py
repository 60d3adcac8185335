from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from budget_engine.budget_config.schema import (
    PINNED_CATEGORIES,
    REDUCTION_CATEGORIES,
)

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReductionTable:
    """
    Category -> reduction percentage applied to 2025 operating spend.

    The table is never mutated: ``with_reduction`` returns a new table, so a
    reader always sees a complete snapshot.  Values are passed through as
    given (no clamping; range checks belong to whoever collects them) but
    must be finite, so NaN or infinity raises ``ValueError``.
    """

    percentages: Mapping[str, float] = field(default_factory=dict)
    pinned: frozenset[str] = PINNED_CATEGORIES

    def __post_init__(self) -> None:
        values = {str(k): float(v) for k, v in self.percentages.items()}
        bad = sorted(k for k, v in values.items() if not math.isfinite(v))
        if bad:
            raise ValueError(f"Reduction percentages must be finite numbers: {bad}")
        object.__setattr__(self, "percentages", MappingProxyType(values))

    def percentage_for(self, category: str) -> float:
        if category in self.pinned:
            return 0.0
        return self.percentages.get(category, 0.0)

    def with_reduction(self, category: str, pct: float) -> ReductionTable:
        updated = dict(self.percentages)
        updated[category] = pct
        return ReductionTable(percentages=updated, pinned=self.pinned)

    def __contains__(self, category: object) -> bool:
        return category in self.percentages

    def to_dict(self) -> dict[str, float]:
        return dict(self.percentages)


def default_reductions(live: bool = False) -> ReductionTable:
    """
    Policy-phase defaults for every category.

    - `live=False`: each category starts at its schema default.
    - `live=True`: every category is 0 so the official figures show through.
    """
    return ReductionTable(
        percentages={
            c.id: 0.0 if live else c.default_reduction
            for c in REDUCTION_CATEGORIES
        }
    )


def validate_category_map(
    category_map: Mapping[str, str],
    reductions: ReductionTable,
    extra_known: Iterable[str] = (),
) -> list[str]:
    """
    Report categories the map points at that the reduction table does not know.

    Such a category silently gets a 0% reduction, which usually means a
    category was renamed in one place only.  Findings are logged and returned;
    nothing is raised.
    """
    known = set(reductions.percentages) | set(reductions.pinned) | set(extra_known)
    warnings: list[str] = []
    for category in sorted(set(category_map.values()) - known):
        leaves = sorted(name for name, cat in category_map.items() if cat == category)
        msg = (
            f"Category {category!r} is referenced by the category map "
            f"({len(leaves)} leaves, e.g. {leaves[0]!r}) but has no reduction entry"
        )
        _log.warning(msg)
        warnings.append(msg)
    return warnings
