"""Monthly cost and cart financing summaries."""

from __future__ import annotations

from typing import Any

from invest_finder.models import (
    ExpenseCategory,
    FilterSpec,
    IncludedExpenses,
    Listing,
)
from invest_finder.selection import Cart

_EXPENSE_LABELS: dict[ExpenseCategory, str] = {
    ExpenseCategory.MONTHLY_CHARGES: "Monthly charges",
    ExpenseCategory.PROPERTY_TAX: "Property tax",
    ExpenseCategory.INSURANCE: "Insurance",
}


def monthly_cost_breakdown(listing: Listing, included: IncludedExpenses) -> dict[str, Any]:
    """Break down the recurring monthly cost shown for a listing.

    Only the categories switched on in ``included`` are listed and summed.
    All amounts are monthly.
    """
    items: list[dict[str, Any]] = []
    total = 0.0
    for category in ExpenseCategory:
        if not included.includes(category):
            continue
        amount = listing.charges.amount_for(category)
        items.append(
            {
                "label": _EXPENSE_LABELS[category],
                "category": category.value,
                "amount": amount,
            }
        )
        total += amount

    return {
        "line_items": items,
        "total": total,
    }


def summarize_cart(cart: Cart, spec: FilterSpec) -> dict[str, Any]:
    """Summarize the cart for the financing panel.

    ``total_exposure`` is the summed purchase price of every listing in the
    cart. ``remaining_budget`` is None when no financing figures are set.
    """
    included = IncludedExpenses.from_categories(spec.included_expenses)
    total_exposure = cart.total_price
    budget = spec.budget

    entries = [
        {
            "id": listing.id,
            "title": listing.title,
            "price": listing.price,
            "monthly_cost": monthly_cost_breakdown(listing, included)["total"],
        }
        for listing in cart
    ]

    return {
        "count": len(cart),
        "listings": entries,
        "total_exposure": total_exposure,
        "budget": budget,
        "remaining_budget": (budget - total_exposure) if budget > 0 else None,
        "monthly_cost": sum(entry["monthly_cost"] for entry in entries),
    }
