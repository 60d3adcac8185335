"""Spending tree aggregation: one pass that classifies leaves and folds sums upward."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace

from budget_engine.budget_config.classifier import classify_leaf
from budget_engine.core.sums import PartialSums
from budget_engine.core.tree import BudgetNode
from budget_engine.scenarios.reductions import ReductionTable


def aggregate_tree(
    node: BudgetNode,
    reductions: ReductionTable,
    category_map: Mapping[str, str],
) -> tuple[BudgetNode, PartialSums]:
    """
    Return ``(output_node, sums)`` for *node*.

    - Leaf: delegated to ``classify_leaf``.
    - Internal node: children aggregated in original order; their sums are
      added component-wise, so child order only affects the output tree.
    - Neither amounts nor children: returned as-is with a zero vector.

    Pure: the same (tree, reductions, category_map) always gives the same
    result and no argument is modified.
    """
    if node.is_leaf:
        result = classify_leaf(node, reductions, category_map)
        return result.node, result.sums

    if node.has_children:
        children: list[BudgetNode] = []
        agg = PartialSums.zero()
        for child in node.children:
            child_out, child_sums = aggregate_tree(child, reductions, category_map)
            children.append(child_out)
            agg = agg + child_sums
        return replace(node, children=tuple(children)), agg

    return node, PartialSums.zero()
