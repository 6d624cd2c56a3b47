"""Tests for monthly cost and cart summaries."""

from collections.abc import Callable

import pytest

from invest_finder.models import ExpenseCategory, FilterSpec, IncludedExpenses, Listing
from invest_finder.selection import Cart
from invest_finder.utils.cost_calculator import monthly_cost_breakdown, summarize_cart


@pytest.fixture
def charged_listing(make_listing: Callable[..., Listing]) -> Listing:
    return make_listing("1", price=200000, monthly_charges=120, property_tax=80, insurance=15)


class TestMonthlyCostBreakdown:
    def test_all_included(self, charged_listing: Listing) -> None:
        result = monthly_cost_breakdown(
            charged_listing, IncludedExpenses.from_categories(ExpenseCategory)
        )
        assert result["total"] == 215
        assert [item["label"] for item in result["line_items"]] == [
            "Monthly charges",
            "Property tax",
            "Insurance",
        ]

    def test_none_included(self, charged_listing: Listing) -> None:
        result = monthly_cost_breakdown(charged_listing, IncludedExpenses())
        assert result == {"line_items": [], "total": 0}

    def test_only_property_tax(self, charged_listing: Listing) -> None:
        result = monthly_cost_breakdown(charged_listing, IncludedExpenses(property_tax=True))
        assert result["total"] == 80
        assert result["line_items"][0]["category"] == "property_tax"


class TestSummarizeCart:
    def test_empty_cart(self) -> None:
        summary = summarize_cart(Cart(), FilterSpec())
        assert summary["count"] == 0
        assert summary["total_exposure"] == 0
        assert summary["remaining_budget"] is None
        assert summary["listings"] == []

    def test_exposure_and_budget(self, make_listing: Callable[..., Listing]) -> None:
        cart = Cart()
        cart.add(make_listing("1", price=150000, insurance=10))
        cart.add(make_listing("2", price=100000, insurance=20))
        spec = FilterSpec(loan_amount=200000, down_payment=20000)

        summary = summarize_cart(cart, spec)
        assert summary["total_exposure"] == 250000
        assert summary["budget"] == 220000
        assert summary["remaining_budget"] == -30000
        assert summary["monthly_cost"] == 30
        assert [entry["id"] for entry in summary["listings"]] == ["1", "2"]

    def test_respects_included_expenses(self, charged_listing: Listing) -> None:
        cart = Cart()
        cart.add(charged_listing)
        spec = FilterSpec(included_expenses=frozenset({ExpenseCategory.MONTHLY_CHARGES}))
        assert summarize_cart(cart, spec)["monthly_cost"] == 120
