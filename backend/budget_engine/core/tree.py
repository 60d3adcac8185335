"""Budget tree node model.

A node is either a *leaf* (two historical amounts, optional capital share and
spending kind) or an *internal node* (a name plus an ordered tuple of
children).  Both shapes share one frozen dataclass so that input and output
trees are the same type; the output tree only differs by ``amount`` being set
on leaves.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


# ── Spending kinds ────────────────────────────────────────────────────────

KIND_PROGRAM = "program"    # Normal program spend (split + reducible)
KIND_TRANSFER = "transfer"  # Major transfers to provinces, benefits, etc.
KIND_DEBT = "debt"          # Net interest on debt
KIND_OTHER = "other"        # One-off items, actuarial losses, settlements

SPENDING_KINDS: frozenset[str] = frozenset(
    {KIND_PROGRAM, KIND_TRANSFER, KIND_DEBT, KIND_OTHER}
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class BudgetNode:
    """One node of a spending or revenue tree."""

    name: str
    amount_2024: float | None = None
    amount_2025: float | None = None
    amount: float | None = None          # chartable value, output trees only
    capital_share: float | None = None
    kind: str | None = None
    link: str | None = None
    children: tuple[BudgetNode, ...] | None = None

    @property
    def is_leaf(self) -> bool:
        # Amounts win over children when both are present.
        return _is_number(self.amount_2024) and _is_number(self.amount_2025)

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def resolved_kind(self) -> str:
        return self.kind or KIND_PROGRAM

    def to_dict(self) -> dict[str, Any]:
        """JSON shape consumed by the flow diagram (fresh containers every call)."""
        out: dict[str, Any] = {"name": self.name}
        if self.amount_2024 is not None:
            out["amount2024"] = float(self.amount_2024)
        if self.amount_2025 is not None:
            out["amount2025"] = float(self.amount_2025)
        if self.amount is not None:
            out["amount"] = float(self.amount)
        if self.capital_share is not None:
            out["capitalShare"] = float(self.capital_share)
        if self.kind is not None:
            out["kind"] = self.kind
        if self.link is not None:
            out["link"] = self.link
        if self.children is not None:
            out["children"] = [child.to_dict() for child in self.children]
        return out


def iter_leaves(node: BudgetNode) -> Iterator[BudgetNode]:
    """Yield every leaf under *node*, depth-first, in original child order."""
    if node.is_leaf:
        yield node
        return
    for child in node.children or ():
        yield from iter_leaves(child)
