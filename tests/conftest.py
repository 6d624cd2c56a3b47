"""Shared pytest fixtures."""

import os
from collections.abc import Callable
from typing import Any

import pytest
from hypothesis import HealthCheck, settings

from invest_finder.config import Settings
from invest_finder.models import (
    FilterSpec,
    Listing,
    ListingCharges,
    ListingMetrics,
    Location,
    PropertyType,
)

# Hypothesis settings profiles for different environments
settings.register_profile("fast", max_examples=25)
settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "fast"))


@pytest.fixture(autouse=True)
def _isolate_settings_from_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent a local .env file from leaking into test Settings instances."""
    monkeypatch.setattr(
        Settings,
        "model_config",
        {**Settings.model_config, "env_file": None},
    )


def build_listing(
    listing_id: str = "1",
    *,
    city: str = "Paris",
    price: float = 200000,
    area: float = 40,
    rooms: int = 2,
    property_type: PropertyType = PropertyType.APARTMENT,
    cashflow: float = 50,
    gross_yield: float = 5.0,
    **charges: Any,
) -> Listing:
    """Build a listing with sensible defaults for tests."""
    return Listing(
        id=listing_id,
        title=f"Listing {listing_id}",
        location=Location(city=city),
        price=price,
        area=area,
        rooms=rooms,
        property_type=property_type,
        metrics=ListingMetrics(cashflow=cashflow, gross_yield=gross_yield),
        charges=ListingCharges(**charges),
    )


@pytest.fixture
def make_listing() -> Callable[..., Listing]:
    return build_listing


@pytest.fixture
def sample_listing() -> Listing:
    """The Paris apartment used throughout the tests."""
    return build_listing()


@pytest.fixture
def sample_catalog() -> tuple[Listing, ...]:
    return (
        build_listing("1", city="Paris", price=200000, area=40, rooms=2, cashflow=50),
        build_listing(
            "2",
            city="Lyon",
            price=350000,
            area=90,
            rooms=4,
            property_type=PropertyType.HOUSE,
            cashflow=-120,
        ),
        build_listing(
            "3",
            city="Saint-Denis (Paris)",
            price=95000,
            area=18,
            rooms=1,
            property_type=PropertyType.STUDIO,
            cashflow=180,
        ),
        build_listing(
            "4",
            city="Bordeaux",
            price=510000,
            area=140,
            rooms=6,
            property_type=PropertyType.BUILDING,
            cashflow=900,
        ),
    )


@pytest.fixture
def default_spec() -> FilterSpec:
    return FilterSpec()
