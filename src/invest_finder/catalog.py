"""Load the listing catalog supplied by the upstream data source."""

from collections import Counter
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from invest_finder.logging import get_logger
from invest_finder.models import Listing

logger = get_logger(__name__)

_LISTINGS_ADAPTER = TypeAdapter(list[Listing])


class DuplicateListingError(ValueError):
    """Raised when two listings in one catalog share an id."""

    def __init__(self, listing_ids: list[str]) -> None:
        self.listing_ids = listing_ids
        super().__init__(f"Duplicate listing ids in catalog: {', '.join(listing_ids)}")


def parse_catalog(data: Any) -> tuple[Listing, ...]:
    """Validate decoded catalog data (a list of listing objects).

    Raises:
        pydantic.ValidationError: If a listing is malformed.
        DuplicateListingError: If two listings share an id.
    """
    return _check_unique(_LISTINGS_ADAPTER.validate_python(data))


def _check_unique(listings: list[Listing]) -> tuple[Listing, ...]:
    duplicates = sorted(
        listing_id
        for listing_id, count in Counter(listing.id for listing in listings).items()
        if count > 1
    )
    if duplicates:
        raise DuplicateListingError(duplicates)
    return tuple(listings)


def load_catalog(path: str | Path) -> tuple[Listing, ...]:
    """Read a JSON catalog file.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the file is not valid JSON or a listing is malformed.
        DuplicateListingError: If two listings share an id.
    """
    path = Path(path)
    catalog = _check_unique(_LISTINGS_ADAPTER.validate_json(path.read_bytes()))
    logger.info("catalog_loaded", path=str(path), listings=len(catalog))
    return catalog
