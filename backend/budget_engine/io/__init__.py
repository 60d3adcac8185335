from .tree_reader import (
    TreeValidationError,
    budget_node_from_mapping,
    read_budget_json,
)

__all__ = [
    "TreeValidationError",
    "budget_node_from_mapping",
    "read_budget_json",
]
