"""Session state: catalog, filters, selections and view state.

A ``Session`` is the single owner of everything the user changes while
browsing. Collaborators (filter editor, loan calculator, list and map
renderers, the chat assistant) read from it and change it only through
its methods, one event at a time.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from invest_finder.config import Settings
from invest_finder.filters.criteria import CriteriaFilter
from invest_finder.logging import get_logger
from invest_finder.models import (
    CurrentView,
    FilterSpec,
    IncludedExpenses,
    Listing,
    ViewMode,
    ViewState,
    apply_partial_update,
)
from invest_finder.selection import Cart, Favorites
from invest_finder.utils.cost_calculator import summarize_cart
from invest_finder.view import displayed_listings

logger = get_logger(__name__)


class Session:
    """One user's browsing session over a fixed catalog."""

    def __init__(
        self,
        catalog: Iterable[Listing],
        filters: FilterSpec | None = None,
        view_state: ViewState | None = None,
    ) -> None:
        self.catalog: tuple[Listing, ...] = tuple(catalog)
        self.filters = filters if filters is not None else FilterSpec()
        self.view_state = view_state if view_state is not None else ViewState()
        self.cart = Cart()
        self.favorites = Favorites()
        self._highlighted_ids: tuple[str, ...] = ()

    # --- filters ---

    def update_filters(self, patch: Mapping[str, Any]) -> FilterSpec:
        """Merge a partial update into the current filters.

        Direct edits and assistant proposals both go through here. On a
        validation error the current filters are kept and the error is
        raised to the caller.
        """
        self.filters = apply_partial_update(self.filters, patch)
        logger.debug("filters_updated", fields=sorted(patch))
        return self.filters

    def filtered_listings(self) -> list[Listing]:
        """Catalog listings matching the current filters, in catalog order.

        Recomputed on every call.
        """
        return CriteriaFilter(self.filters).filter_listings(self.catalog)

    def included_expenses(self) -> IncludedExpenses:
        return IncludedExpenses.from_categories(self.filters.included_expenses)

    # --- view ---

    def displayed_listings(self) -> list[Listing]:
        """Listings for the current view (filtered catalog or favorites)."""
        current = self.view_state.current_view
        filtered = self.filtered_listings() if current is CurrentView.SEARCH else []
        return displayed_listings(current, filtered, self.favorites)

    def set_view_mode(self, view_mode: ViewMode) -> None:
        self.view_state = self.view_state.model_copy(update={"view_mode": ViewMode(view_mode)})
        logger.debug("view_mode_changed", view_mode=self.view_state.view_mode.value)

    def set_current_view(self, current_view: CurrentView) -> None:
        self.view_state = self.view_state.model_copy(
            update={"current_view": CurrentView(current_view)}
        )
        logger.debug("current_view_changed", current_view=self.view_state.current_view.value)

    def select_listing(self, listing_id: str | None) -> None:
        """Mark a listing as selected (e.g. a clicked map marker)."""
        self.view_state = self.view_state.model_copy(update={"selected_listing_id": listing_id})

    def selected_listing(self) -> Listing | None:
        """The selected listing, looked up in the catalog then the selections."""
        listing_id = self.view_state.selected_listing_id
        if listing_id is None:
            return None
        return self._find(listing_id)

    # --- assistant highlights ---

    def highlight_listings(self, listing_ids: Iterable[str]) -> None:
        """Replace the set of listings the assistant wants highlighted."""
        self._highlighted_ids = tuple(dict.fromkeys(listing_ids))
        logger.debug("listings_highlighted", count=len(self._highlighted_ids))

    def highlighted_listings(self) -> list[Listing]:
        """Highlighted catalog listings in catalog order; unknown ids are ignored."""
        wanted = set(self._highlighted_ids)
        return [listing for listing in self.catalog if listing.id in wanted]

    # --- selections ---

    def add_to_cart(self, listing: Listing) -> bool:
        return self.cart.add(listing)

    def remove_from_cart(self, listing_id: str) -> bool:
        return self.cart.remove(listing_id)

    def is_in_cart(self, listing_id: str) -> bool:
        return listing_id in self.cart

    def toggle_favorite(self, listing: Listing) -> bool:
        """Flip favorite status; returns True if now a favorite."""
        return self.favorites.toggle(listing)

    def is_favorite(self, listing_id: str) -> bool:
        return listing_id in self.favorites

    @property
    def favorites_count(self) -> int:
        return len(self.favorites)

    def cart_summary(self) -> dict[str, Any]:
        return summarize_cart(self.cart, self.filters)

    def _find(self, listing_id: str) -> Listing | None:
        for listing in self.catalog:
            if listing.id == listing_id:
                return listing
        return self.favorites.get(listing_id) or self.cart.get(listing_id)


def create_session(
    catalog: Iterable[Listing],
    settings: Settings | None = None,
) -> Session:
    """Start a session with the configured default filters and view mode."""
    settings = settings if settings is not None else Settings()
    session = Session(
        catalog,
        filters=settings.get_default_filters(),
        view_state=ViewState(view_mode=settings.default_view_mode),
    )
    logger.info("session_created", listings=len(session.catalog))
    return session
