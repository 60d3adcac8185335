"""Budget flow engine: spending/revenue tree aggregation under reduction scenarios."""
