from .aggregate import aggregate_tree
from .breakdown import BREAKDOWN_COLUMNS, build_reduction_breakdown
from .revenue import normalize_revenue, total_of
from .sankey import BudgetTotals, SankeyResult, build_sankey_data

__all__ = [
    "aggregate_tree",
    "BREAKDOWN_COLUMNS",
    "build_reduction_breakdown",
    "normalize_revenue",
    "total_of",
    "BudgetTotals",
    "SankeyResult",
    "build_sankey_data",
]
