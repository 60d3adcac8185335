"""Build BudgetNode trees from nested mappings / JSON files.

The mapping shape is the one the flow diagram consumes::

    {"name": "...", "amount2024": 1.0, "amount2025": 1.2,
     "capitalShare": 0.2, "kind": "program", "link": "...",
     "children": [...]}

Validation lives here, at the input boundary, so that the aggregation engine
itself can stay total: every tree it receives has string names, finite
numbers and known spending kinds.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from budget_engine.budget_config.datasets._base import BudgetDataset
from budget_engine.core.tree import SPENDING_KINDS, BudgetNode

_log = logging.getLogger(__name__)


class TreeValidationError(ValueError):
    """Raised when a nested mapping cannot be turned into a BudgetNode."""


def _where(path: tuple[str, ...]) -> str:
    return " > ".join(path) if path else "<root>"


def _number(data: Mapping[str, Any], key: str, path: tuple[str, ...]) -> float | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TreeValidationError(
            f"{_where(path)}: '{key}' must be a number, got {type(value).__name__}"
        )
    if not math.isfinite(value):
        raise TreeValidationError(f"{_where(path)}: '{key}' must be finite, got {value!r}")
    return float(value)


def budget_node_from_mapping(
    data: Mapping[str, Any],
    *,
    strict: bool = False,
    _path: tuple[str, ...] = (),
) -> BudgetNode:
    """
    Convert a nested mapping into a BudgetNode tree.

    A node carrying both amounts and children is ambiguous.  Amounts are
    authoritative (children are kept but ignored for totals) and a warning is
    logged; with ``strict=True`` a ``TreeValidationError`` is raised instead.
    """
    if not isinstance(data, Mapping):
        raise TreeValidationError(
            f"{_where(_path)}: expected a mapping, got {type(data).__name__}"
        )

    name = data.get("name")
    if not isinstance(name, str):
        raise TreeValidationError(f"{_where(_path)}: 'name' must be a string")
    path = _path + (name,)

    kind = data.get("kind")
    if kind is not None and kind not in SPENDING_KINDS:
        raise TreeValidationError(
            f"{_where(path)}: unknown kind {kind!r}. Allowed: {sorted(SPENDING_KINDS)}"
        )

    link = data.get("link")
    if link is not None and not isinstance(link, str):
        raise TreeValidationError(f"{_where(path)}: 'link' must be a string")

    raw_children = data.get("children")
    children: tuple[BudgetNode, ...] | None = None
    if raw_children is not None:
        if not isinstance(raw_children, (list, tuple)):
            raise TreeValidationError(f"{_where(path)}: 'children' must be a list")
        children = tuple(
            budget_node_from_mapping(child, strict=strict, _path=path)
            for child in raw_children
        )

    node = BudgetNode(
        name=name,
        amount_2024=_number(data, "amount2024", path),
        amount_2025=_number(data, "amount2025", path),
        amount=_number(data, "amount", path),
        capital_share=_number(data, "capitalShare", path),
        kind=kind,
        link=link,
        children=children,
    )

    if node.is_leaf and node.has_children:
        msg = f"{_where(path)}: node has both amounts and children; children are ignored for totals"
        if strict:
            raise TreeValidationError(msg)
        _log.warning(msg)

    return node


def read_budget_json(
    path: str | Path,
    *,
    dataset_id: str | None = None,
    strict: bool = False,
) -> BudgetDataset:
    """
    Load a dataset from a JSON file.

    Expected top-level keys: ``spending`` and ``revenue`` (trees), optionally
    ``label`` and ``category_map`` (leaf name -> category).
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        payload = json.load(fh)

    if not isinstance(payload, Mapping):
        raise TreeValidationError(f"{path}: top-level JSON value must be an object")
    missing = [key for key in ("spending", "revenue") if key not in payload]
    if missing:
        raise TreeValidationError(f"{path}: missing required keys {missing}")

    category_map = payload.get("category_map") or {}
    if not isinstance(category_map, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in category_map.items()
    ):
        raise TreeValidationError(f"{path}: 'category_map' must map strings to strings")

    dataset = BudgetDataset(
        dataset_id=dataset_id or path.stem,
        label=str(payload.get("label") or path.stem),
        spending=budget_node_from_mapping(payload["spending"], strict=strict),
        revenue=budget_node_from_mapping(payload["revenue"], strict=strict),
        category_map=dict(category_map),
    )
    _log.info(
        "Loaded dataset %r from %s (%d category map entries)",
        dataset.dataset_id, path, len(dataset.category_map),
    )
    return dataset
