from .reductions import ReductionTable, default_reductions, validate_category_map
