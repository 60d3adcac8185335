from __future__ import annotations

import unittest

from budget_engine.budget_config.datasets import (
    available_datasets,
    default_dataset,
    resolve_dataset,
)
from budget_engine.budget_config.schema import CATEGORY_ORDER
from budget_engine.core.tree import KIND_PROGRAM, iter_leaves
from budget_engine.scenarios.reductions import default_reductions, validate_category_map
from budget_engine.services.revenue import total_of
from budget_engine.services.sankey import build_sankey_data


class TestRegistry(unittest.TestCase):
    def test_default_dataset_is_registered(self) -> None:
        self.assertIn(default_dataset(), available_datasets())

    def test_lookup_is_case_insensitive(self) -> None:
        self.assertIs(resolve_dataset("FALL-2025"), resolve_dataset("fall-2025"))

    def test_unknown_dataset_lists_available(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            resolve_dataset("spring-1999")
        self.assertIn("fall-2025", str(ctx.exception))


class TestFall2025(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.dataset = resolve_dataset("fall-2025")

    def test_trees_have_content(self) -> None:
        self.assertTrue(self.dataset.spending.has_children)
        self.assertTrue(self.dataset.revenue.has_children)
        self.assertGreater(total_of(self.dataset.revenue), 0.0)

    def test_category_map_points_at_program_leaves(self) -> None:
        programs = {
            leaf.name for leaf in iter_leaves(self.dataset.spending)
            if leaf.resolved_kind == KIND_PROGRAM
        }
        for name, category in self.dataset.category_map.items():
            with self.subTest(name=name):
                self.assertIn(name, programs)
                self.assertIn(category, CATEGORY_ORDER)

    def test_category_map_is_consistent_with_defaults(self) -> None:
        self.assertEqual(
            validate_category_map(self.dataset.category_map, default_reductions()),
            [],
        )

    def test_live_totals_equal_raw_tree_sums(self) -> None:
        result = build_sankey_data(
            self.dataset.spending,
            self.dataset.revenue,
            default_reductions(live=True),
            self.dataset.category_map,
        )
        self.assertAlmostEqual(result.spending, total_of(self.dataset.spending), places=6)
        self.assertAlmostEqual(
            result.baseline_spending, total_of(self.dataset.spending, use_projected=False), places=6,
        )
        self.assertAlmostEqual(result.revenue, total_of(self.dataset.revenue), places=6)
        self.assertAlmostEqual(result.deficit, result.spending - result.revenue, places=9)

    def test_policy_defaults_lower_spending(self) -> None:
        live = build_sankey_data(
            self.dataset.spending, self.dataset.revenue,
            default_reductions(live=True), self.dataset.category_map,
        )
        policy = build_sankey_data(
            self.dataset.spending, self.dataset.revenue,
            default_reductions(live=False), self.dataset.category_map,
        )
        self.assertLess(policy.spending, live.spending)
        self.assertEqual(policy.revenue, live.revenue)
        self.assertEqual(policy.baseline_spending, live.baseline_spending)

    def test_unmapped_program_keeps_full_amount(self) -> None:
        result = build_sankey_data(
            self.dataset.spending, self.dataset.revenue,
            default_reductions(), self.dataset.category_map,
        )
        veterans = next(
            leaf for leaf in iter_leaves(result.spending_data)
            if leaf.name == "Support for Veterans"
        )
        self.assertNotIn("Support for Veterans", self.dataset.category_map)
        self.assertAlmostEqual(veterans.amount, 6.07)


if __name__ == "__main__":
    unittest.main()
