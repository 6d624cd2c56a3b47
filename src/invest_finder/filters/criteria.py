"""Listing criteria filtering."""

from collections.abc import Iterable
from typing import Final

from invest_finder.logging import get_logger
from invest_finder.models import FilterSpec, Listing

logger = get_logger(__name__)

# A listing priced up to 10% above loan + down payment still counts as affordable.
AFFORDABILITY_TOLERANCE: Final = 1.1


def _within_band(value: float, lower: float, upper: float) -> bool:
    """Check ``value`` against a band where a bound of 0 (or less) is unset."""
    if lower > 0 and value < lower:
        return False
    if upper > 0 and value > upper:
        return False
    return True


def _matches_city(listing: Listing, city: str) -> bool:
    if not city:
        return True
    return city.lower() in listing.location.city.lower()


def is_affordable(listing: Listing, spec: FilterSpec) -> bool:
    """Check the listing price against the financing budget.

    Without any financing figures (budget of 0) every listing is affordable.
    """
    budget = spec.budget
    if budget <= 0:
        return True
    return listing.price <= budget * AFFORDABILITY_TOLERANCE


def matches(listing: Listing, spec: FilterSpec) -> bool:
    """Check whether a listing satisfies every constraint of a filter spec.

    Gross yield bounds and the minimum score are carried by the spec for
    downstream consumers and are not evaluated here.
    """
    return (
        _matches_city(listing, spec.city)
        and _within_band(listing.price, spec.min_price, spec.max_price)
        and _within_band(listing.area, spec.min_area, spec.max_area)
        and _within_band(listing.rooms, spec.min_rooms, 0)
        and _within_band(listing.metrics.cashflow, spec.min_cashflow, spec.max_cashflow)
        and (not spec.property_type or listing.property_type in spec.property_type)
        and is_affordable(listing, spec)
    )


class CriteriaFilter:
    """Filter listings by a filter specification."""

    def __init__(self, spec: FilterSpec) -> None:
        """Initialize the criteria filter.

        Args:
            spec: Filter specification to filter by.
        """
        self.spec = spec

    def filter_listings(self, listings: Iterable[Listing]) -> list[Listing]:
        """Filter listings by the spec, keeping catalog order.

        Args:
            listings: Listings to filter.

        Returns:
            Listings matching every constraint.
        """
        candidates = list(listings)
        matching = [listing for listing in candidates if matches(listing, self.spec)]

        logger.info(
            "criteria_filter_complete",
            total_listings=len(candidates),
            matching=len(matching),
            city=self.spec.city or None,
            min_price=self.spec.min_price,
            max_price=self.spec.max_price,
            budget=self.spec.budget,
        )

        return matching
