"""Choose which listings are on screen."""

from collections.abc import Iterable

from invest_finder.models import CurrentView, Listing


def displayed_listings(
    current_view: CurrentView,
    filtered: Iterable[Listing],
    favorites: Iterable[Listing],
) -> list[Listing]:
    """Return the listings for the current view.

    The favorites view shows every favorite as-is, without applying the
    active filter. The search view shows the filtered catalog.
    """
    if current_view == CurrentView.FAVORITES:
        return list(favorites)
    return list(filtered)
