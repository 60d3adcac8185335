from __future__ import annotations

import unittest

from budget_engine.core.sums import PartialSums
from budget_engine.core.tree import BudgetNode, iter_leaves
from budget_engine.scenarios.reductions import ReductionTable
from budget_engine.services.aggregate import aggregate_tree
from budget_engine.tests.conftest import (
    SIMPLE_CATEGORY_MAP,
    branch,
    leaf,
    make_simple_budget,
)

_TABLE = ReductionTable({
    "Health": 25.0,
    "Public Safety": 50.0,
    "Economy + Innovation & Research": 50.0,
})


class TestPartialSums(unittest.TestCase):
    def test_zero_is_identity(self) -> None:
        a = PartialSums(opex2024=1.5, debt2025=2.0)
        self.assertEqual(a + PartialSums.zero(), a)
        self.assertEqual(PartialSums.zero() + a, a)

    def test_addition_is_component_wise(self) -> None:
        a = PartialSums(opex2024=1.0, transfers2025=3.0)
        b = PartialSums(opex2024=2.0, other2024=4.0)
        self.assertEqual(
            a + b,
            PartialSums(opex2024=3.0, transfers2025=3.0, other2024=4.0),
        )

    def test_sum_all_of_nothing_is_zero(self) -> None:
        self.assertEqual(PartialSums.sum_all([]), PartialSums.zero())

    def test_totals_add_every_kind(self) -> None:
        s = PartialSums(
            opex2024=1.0, capex2024=2.0, transfers2024=3.0, debt2024=4.0, other2024=5.0,
            opex2025=10.0, capex2025=20.0, transfers2025=30.0, debt2025=40.0, other2025=50.0,
        )
        self.assertEqual(s.total_2024, 15.0)
        self.assertEqual(s.total_2025, 150.0)


class TestAggregateTree(unittest.TestCase):
    def test_synthetic_budget_sums(self) -> None:
        spending, _ = make_simple_budget()
        _, sums = aggregate_tree(spending, _TABLE, SIMPLE_CATEGORY_MAP)

        self.assertEqual(
            sums,
            PartialSums(
                opex2024=63.0, capex2024=15.0, opex2025=47.0, capex2025=18.0,
                transfers2024=50.0, transfers2025=60.0,
                debt2024=30.0, debt2025=32.0,
                other2024=4.0, other2025=0.0,
            ),
        )
        self.assertEqual(sums.total_2024, 162.0)
        self.assertEqual(sums.total_2025, 157.0)

    def test_output_tree_mirrors_input_and_sets_leaf_amounts(self) -> None:
        spending, _ = make_simple_budget()
        out, _ = aggregate_tree(spending, _TABLE, SIMPLE_CATEGORY_MAP)

        self.assertEqual(out.name, "Spending")
        self.assertIsNone(out.amount)
        self.assertEqual(
            [c.name for c in out.children],
            ["Services", "Bridges", "Transfers", "Interest"],
        )
        amounts = {n.name: n.amount for n in iter_leaves(out)}
        self.assertEqual(amounts, {
            "Hospitals": 30.0,
            "Police": 15.0,
            "Veterans": 8.0,
            "Bridges": 12.0,
            "Pensions": 60.0,
            "Rebate": 0.0,
            "Interest": 32.0,
        })
        # Input tree is untouched.
        self.assertTrue(all(n.amount is None for n in iter_leaves(spending)))

    def test_parent_sum_is_sum_of_children_in_any_order(self) -> None:
        a = leaf("Hospitals", 40.0, 40.0)
        b = leaf("Pensions", 50.0, 60.0, kind="transfer")
        _, sums_a = aggregate_tree(a, _TABLE, SIMPLE_CATEGORY_MAP)
        _, sums_b = aggregate_tree(b, _TABLE, SIMPLE_CATEGORY_MAP)

        out_ab, sums_ab = aggregate_tree(branch("P", a, b), _TABLE, SIMPLE_CATEGORY_MAP)
        out_ba, sums_ba = aggregate_tree(branch("P", b, a), _TABLE, SIMPLE_CATEGORY_MAP)

        self.assertEqual(sums_ab, sums_a + sums_b)
        self.assertEqual(sums_ab, sums_ba)
        self.assertEqual([c.name for c in out_ab.children], ["Hospitals", "Pensions"])
        self.assertEqual([c.name for c in out_ba.children], ["Pensions", "Hospitals"])

    def test_degenerate_node_yields_zero_vector(self) -> None:
        empty = BudgetNode(name="Nothing")
        out, sums = aggregate_tree(empty, _TABLE, SIMPLE_CATEGORY_MAP)
        self.assertIs(out, empty)
        self.assertEqual(sums, PartialSums.zero())

        empty_children = BudgetNode(name="Empty", children=())
        out, sums = aggregate_tree(empty_children, _TABLE, SIMPLE_CATEGORY_MAP)
        self.assertEqual(out, empty_children)
        self.assertEqual(sums, PartialSums.zero())

    def test_single_amount_is_not_a_leaf(self) -> None:
        half = BudgetNode(name="Half", amount_2024=5.0)
        _, sums = aggregate_tree(branch("P", half), _TABLE, SIMPLE_CATEGORY_MAP)
        self.assertEqual(sums, PartialSums.zero())

    def test_node_with_amounts_and_children_is_a_leaf(self) -> None:
        ambiguous = BudgetNode(
            name="Hospitals",
            amount_2024=4.0,
            amount_2025=4.0,
            children=(leaf("Hidden", 1000.0, 1000.0),),
        )
        out, sums = aggregate_tree(ambiguous, _TABLE, SIMPLE_CATEGORY_MAP)
        self.assertEqual(sums, PartialSums(opex2024=4.0, opex2025=3.0))
        self.assertEqual(out.amount, 3.0)

    def test_is_deterministic(self) -> None:
        spending, _ = make_simple_budget()
        first = aggregate_tree(spending, _TABLE, SIMPLE_CATEGORY_MAP)
        second = aggregate_tree(spending, _TABLE, SIMPLE_CATEGORY_MAP)
        self.assertEqual(first, second)

    def test_raising_a_reduction_only_lowers_opex2025(self) -> None:
        spending, _ = make_simple_budget()
        previous = None
        for pct in (0.0, 5.0, 10.0, 15.0):
            table = ReductionTable({"Health": pct})
            _, sums = aggregate_tree(spending, table, SIMPLE_CATEGORY_MAP)
            if previous is not None:
                self.assertLess(sums.opex2025, previous.opex2025)
                self.assertEqual(sums.opex2024, previous.opex2024)
                self.assertEqual(sums.capex2024, previous.capex2024)
                self.assertEqual(sums.capex2025, previous.capex2025)
                self.assertEqual(sums.transfers2025, previous.transfers2025)
                self.assertEqual(sums.debt2025, previous.debt2025)
                self.assertEqual(sums.other2025, previous.other2025)
            previous = sums

    def test_reduction_on_capital_only_category_changes_nothing(self) -> None:
        spending, _ = make_simple_budget()
        _, low = aggregate_tree(
            spending, ReductionTable({"Economy + Innovation & Research": 0.0}), SIMPLE_CATEGORY_MAP,
        )
        _, high = aggregate_tree(
            spending, ReductionTable({"Economy + Innovation & Research": 15.0}), SIMPLE_CATEGORY_MAP,
        )
        self.assertEqual(low, high)


if __name__ == "__main__":
    unittest.main()
