"""Revenue tree normalization and generic subtree totals."""

from __future__ import annotations

from dataclasses import replace

from budget_engine.core.tree import BudgetNode


def normalize_revenue(node: BudgetNode) -> BudgetNode:
    """Copy the tree, setting ``amount`` to the 2025 figure on every leaf."""
    if node.is_leaf:
        return replace(node, amount=float(node.amount_2025))
    if node.has_children:
        return replace(
            node,
            children=tuple(normalize_revenue(child) for child in node.children),
        )
    return node


def total_of(node: BudgetNode, use_projected: bool = True) -> float:
    """Sum a subtree's 2025 (``use_projected``) or 2024 leaf amounts."""
    if node.is_leaf:
        return float(node.amount_2025 if use_projected else node.amount_2024)
    if node.has_children:
        return sum(total_of(child, use_projected) for child in node.children)
    return 0.0
