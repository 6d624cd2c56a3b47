"""Cart and favorites: insertion-ordered listing collections keyed by id."""

from collections.abc import Iterator

from invest_finder.logging import get_logger
from invest_finder.models import Listing

logger = get_logger(__name__)


class SelectionSet:
    """Listings chosen by the user, unique by ``Listing.id``.

    Entries are the listing values captured when they were added. They are
    kept even if the listing later disappears from the catalog.
    """

    name = "selection"

    def __init__(self) -> None:
        self._listings: dict[str, Listing] = {}

    def add(self, listing: Listing) -> bool:
        """Append a listing unless one with the same id is already present.

        Returns:
            True if the listing was added.
        """
        if listing.id in self._listings:
            return False
        self._listings[listing.id] = listing
        logger.debug("selection_added", selection=self.name, listing_id=listing.id, size=len(self))
        return True

    def remove(self, listing_id: str) -> bool:
        """Remove the listing with this id, if any.

        Returns:
            True if a listing was removed.
        """
        if self._listings.pop(listing_id, None) is None:
            return False
        logger.debug(
            "selection_removed", selection=self.name, listing_id=listing_id, size=len(self)
        )
        return True

    def get(self, listing_id: str) -> Listing | None:
        return self._listings.get(listing_id)

    def contains(self, listing_id: str) -> bool:
        return listing_id in self._listings

    __contains__ = contains

    def __len__(self) -> int:
        return len(self._listings)

    def __iter__(self) -> Iterator[Listing]:
        return iter(self._listings.values())

    @property
    def listings(self) -> list[Listing]:
        """Contents in insertion order."""
        return list(self._listings.values())

    @property
    def ids(self) -> list[str]:
        return list(self._listings)


class Cart(SelectionSet):
    """Listings set aside for a financing comparison."""

    name = "cart"

    @property
    def total_price(self) -> float:
        """Sum of the prices of every listing in the cart."""
        return sum(listing.price for listing in self)


class Favorites(SelectionSet):
    """Listings the user marked as favorites."""

    name = "favorites"

    def toggle(self, listing: Listing) -> bool:
        """Remove the listing if it is a favorite, add it otherwise.

        Returns:
            True if the listing is a favorite afterwards.
        """
        if self.remove(listing.id):
            return False
        return self.add(listing)
