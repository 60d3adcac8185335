from .sums import PartialSums
from .tree import (
    KIND_DEBT,
    KIND_OTHER,
    KIND_PROGRAM,
    KIND_TRANSFER,
    SPENDING_KINDS,
    BudgetNode,
    iter_leaves,
)

__all__ = [
    "PartialSums",
    "BudgetNode",
    "iter_leaves",
    "KIND_PROGRAM",
    "KIND_TRANSFER",
    "KIND_DEBT",
    "KIND_OTHER",
    "SPENDING_KINDS",
]
