"""Start a browsing session from application settings."""

from invest_finder.catalog import load_catalog
from invest_finder.config import Settings
from invest_finder.logging import configure_logging, get_logger
from invest_finder.session import Session, create_session

logger = get_logger(__name__)


def bootstrap(settings: Settings | None = None) -> Session:
    """Configure logging, load the catalog and open a session.

    Args:
        settings: Application settings. Read from the environment when omitted.

    Raises:
        FileNotFoundError: If the configured catalog file does not exist.
        pydantic.ValidationError: If the catalog file is malformed.
        DuplicateListingError: If two catalog listings share an id.
    """
    settings = settings if settings is not None else Settings()
    configure_logging(json_output=settings.json_logs, level=settings.log_level_number)

    try:
        catalog = load_catalog(settings.catalog_path)
    except FileNotFoundError:
        logger.error("catalog_not_found", path=settings.catalog_path)
        raise

    return create_session(catalog, settings)
