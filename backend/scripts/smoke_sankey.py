from __future__ import annotations

import argparse
import json
import math
from pathlib import Path
import sys

_PROJECT_ROOT = Path(__file__).resolve().parents[1]   # backend/
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from budget_engine.budget_config.datasets import default_dataset, resolve_dataset
from budget_engine.io.tree_reader import read_budget_json
from budget_engine.scenarios.reductions import default_reductions
from budget_engine.services.breakdown import build_reduction_breakdown
from budget_engine.services.sankey import build_sankey_data


def _parse_override(value: str) -> tuple[str, float]:
    category, sep, pct = value.rpartition("=")
    if not sep or not category:
        raise argparse.ArgumentTypeError(f"Invalid override '{value}'. Use CATEGORY=PCT.")
    try:
        parsed = float(pct)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid percentage in '{value}'.") from exc
    if not math.isfinite(parsed):
        raise argparse.ArgumentTypeError(f"Percentage must be finite in '{value}'.")
    return category, parsed


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Smoke test for the spending/revenue flow payload."
    )
    parser.add_argument("--dataset", default=default_dataset(), help="Registered dataset id.")
    parser.add_argument("--path", default=None, help="JSON dataset file (overrides --dataset).")
    parser.add_argument("--live", action="store_true", help="Use live (all-zero) defaults.")
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        type=_parse_override,
        default=[],
        help="Reduction override CATEGORY=PCT. Repeatable.",
    )
    parser.add_argument("--json", action="store_true", help="Dump the full chart payload.")
    args = parser.parse_args()

    dataset = read_budget_json(args.path) if args.path else resolve_dataset(args.dataset)
    reductions = default_reductions(live=args.live)
    for category, pct in args.overrides:
        reductions = reductions.with_reduction(category, pct)

    result = build_sankey_data(
        dataset.spending, dataset.revenue, reductions, dataset.category_map,
    )

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    print(f"Dataset: {dataset.dataset_id} ({dataset.label})")
    print(f"Spending 2025:  {result.spending:10.3f}")
    print(f"Revenue 2025:   {result.revenue:10.3f}")
    print(f"Deficit:        {result.deficit:10.3f}")
    print(f"Spending 2024:  {result.baseline_spending:10.3f}")
    print()
    for key, value in result.sums.to_dict().items():
        print(f"  {key:<14} {value:10.3f}")
    print()
    breakdown = build_reduction_breakdown(
        dataset.spending, reductions, dataset.category_map,
    )
    print(breakdown.to_string(index=False, float_format=lambda v: f"{v:.3f}"))


if __name__ == "__main__":
    main()
