"""Application configuration using pydantic-settings."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from invest_finder.models import (
    ExpenseCategory,
    FilterSpec,
    ScoreGrade,
    ViewMode,
    to_snake,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INVEST_FINDER_",
        extra="ignore",
    )

    # Catalog
    catalog_path: str = Field(
        default="data/listings.json",
        description="JSON file holding the listing catalog",
    )

    # Logging
    json_logs: bool = Field(default=False, description="Emit JSON log lines")
    log_level: str = Field(default="INFO", description="Minimum log level name")

    # Session defaults
    default_view_mode: ViewMode = Field(default=ViewMode.LIST)
    default_included_expenses: str = Field(
        default="monthly_charges,property_tax,insurance",
        description="Comma-separated: monthly_charges, property_tax, insurance",
    )
    default_min_score: ScoreGrade = Field(default=ScoreGrade.D)

    @property
    def log_level_number(self) -> int:
        """Numeric logging level, falling back to INFO for unknown names."""
        level = logging.getLevelName(self.log_level.strip().upper())
        return level if isinstance(level, int) else logging.INFO

    def get_included_expenses(self) -> frozenset[ExpenseCategory]:
        """Parse default_included_expenses into ExpenseCategory values.

        Accepts snake_case or camelCase names (``property_tax``, ``propertyTax``).
        """
        return frozenset(
            ExpenseCategory(to_snake(c))
            for c in self.default_included_expenses.split(",")
            if c.strip()
        )

    def get_default_filters(self) -> FilterSpec:
        """Build the FilterSpec a new session starts with."""
        return FilterSpec(
            included_expenses=self.get_included_expenses(),
            min_score=self.default_min_score,
        )
