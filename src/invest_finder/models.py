"""Pydantic models for listings, filter specifications and view state."""

import re
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Final, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class PropertyType(str, Enum):
    """Closed set of property types a listing can carry."""

    APARTMENT = "apartment"
    HOUSE = "house"
    STUDIO = "studio"
    LOFT = "loft"
    BUILDING = "building"


class ExpenseCategory(str, Enum):
    """Recurring expense categories that can be folded into a displayed cost."""

    MONTHLY_CHARGES = "monthly_charges"
    PROPERTY_TAX = "property_tax"
    INSURANCE = "insurance"


class ScoreGrade(str, Enum):
    """Letter grade for a listing's investment score (A is best)."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"


class ViewMode(str, Enum):
    """How the displayed listings are rendered."""

    LIST = "list"
    MAP = "map"


class CurrentView(str, Enum):
    """Which collection is on screen."""

    SEARCH = "search"
    FAVORITES = "favorites"


_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake(value: str) -> str:
    """Convert a camelCase name (``monthlyCharges``) to snake_case."""
    return _CAMEL_BOUNDARY.sub("_", value.strip()).lower()


class Location(BaseModel):
    """Where a listing is."""

    model_config = ConfigDict(frozen=True)

    city: str
    address: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    @model_validator(mode="after")
    def check_coordinates(self) -> Self:
        """Ensure both lat and lon are present or both are absent."""
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("Both latitude and longitude must be provided, or neither")
        return self


class ListingMetrics(BaseModel):
    """Computed financial metrics of a listing."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    cashflow: float = 0
    gross_yield: float = 0
    score: ScoreGrade | None = None


class ListingCharges(BaseModel):
    """Recurring monthly charges attached to a listing."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    monthly_charges: float = Field(default=0, ge=0)
    property_tax: float = Field(default=0, ge=0)
    insurance: float = Field(default=0, ge=0)

    def amount_for(self, category: ExpenseCategory) -> float:
        """Monthly amount charged for one expense category."""
        amount: float = getattr(self, category.value)
        return amount


class Listing(BaseModel):
    """A real-estate investment listing."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(min_length=1, description="Stable identifier within a catalog")
    title: str | None = None
    location: Location
    price: float = Field(ge=0)
    area: float = Field(ge=0, description="Living area in square metres")
    rooms: int = Field(ge=0)
    property_type: PropertyType = Field(alias="type")
    metrics: ListingMetrics = Field(default_factory=ListingMetrics)
    charges: ListingCharges = Field(default_factory=ListingCharges)


ALL_EXPENSE_CATEGORIES: Final[frozenset[ExpenseCategory]] = frozenset(ExpenseCategory)


class FilterSpec(BaseModel):
    """The user's current search constraints.

    Zero (or an empty string/set) means "no constraint" for every field.
    Bounds are deliberately not range-checked: an inverted or negative
    band is kept as given and evaluated literally.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    city: str = ""
    min_price: float = 0
    max_price: float = 0
    min_area: float = 0
    max_area: float = 0
    min_cashflow: float = 0
    max_cashflow: float = 0
    property_type: frozenset[PropertyType] = frozenset()
    min_gross_yield: float = 0
    max_gross_yield: float = 0
    min_rooms: int = 0
    loan_amount: float = 0
    down_payment: float = 0
    included_expenses: frozenset[ExpenseCategory] = ALL_EXPENSE_CATEGORIES
    min_score: ScoreGrade = ScoreGrade.D

    @field_validator("included_expenses", mode="before")
    @classmethod
    def normalize_expense_names(cls, v: Any) -> Any:
        """Accept camelCase category names (``monthlyCharges``)."""
        if isinstance(v, str):
            v = [v]
        if isinstance(v, Iterable):
            return [to_snake(item) if isinstance(item, str) else item for item in v]
        return v

    @property
    def budget(self) -> float:
        """Financing capacity: loan plus down payment."""
        return self.loan_amount + self.down_payment


# Field name -> wire alias, so patches may use either spelling.
_FILTER_ALIASES: Final[dict[str, str]] = {
    name: field.alias or name for name, field in FilterSpec.model_fields.items()
}


def apply_partial_update(current: FilterSpec, patch: Mapping[str, Any]) -> FilterSpec:
    """Shallow-merge ``patch`` over ``current`` and return a new FilterSpec.

    Keys may be field names (``min_price``) or aliases (``minPrice``).
    Absent fields keep their current value. The merged result is validated
    as a whole, so an invalid patch raises ``ValidationError`` and
    ``current`` is left as it was.
    """
    merged = current.model_dump(by_alias=True)
    for key, value in patch.items():
        merged[_FILTER_ALIASES.get(key, key)] = value
    return FilterSpec.model_validate(merged)


class IncludedExpenses(BaseModel):
    """Which expense categories the displayed monthly cost includes."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    monthly_charges: bool = False
    property_tax: bool = False
    insurance: bool = False

    @classmethod
    def from_categories(cls, categories: Iterable[ExpenseCategory]) -> "IncludedExpenses":
        """Build the record from a set of included categories."""
        chosen = set(categories)
        return cls(
            monthly_charges=ExpenseCategory.MONTHLY_CHARGES in chosen,
            property_tax=ExpenseCategory.PROPERTY_TAX in chosen,
            insurance=ExpenseCategory.INSURANCE in chosen,
        )

    def includes(self, category: ExpenseCategory) -> bool:
        included: bool = getattr(self, category.value)
        return included


class ViewState(BaseModel):
    """UI state owned by the session."""

    model_config = ConfigDict(frozen=True)

    view_mode: ViewMode = ViewMode.LIST
    current_view: CurrentView = CurrentView.SEARCH
    selected_listing_id: str | None = None
