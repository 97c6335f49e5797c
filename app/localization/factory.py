"""Factory functions for creating localization components."""

from typing import Optional

from localization.config import LocalizationSettings
from localization.config import settings as default_settings
from localization.logging import configure_logging, get_module_logger
from localization.service import Localization

logger = get_module_logger()


def create_localization(
    settings: Optional[LocalizationSettings] = None,
    setup_logging: bool = False,
) -> Localization:
    """Create a Localization configured from settings.

    The returned instance still needs ``await localization.prepare()``.

    Args:
        settings: Settings to use (default: the environment-loaded singleton).
        setup_logging: Also configure structlog from the same settings.

    Returns:
        Localization: Unprepared localization instance

    Usage:
        localization = create_localization()
        await localization.prepare()
    """
    settings = settings or default_settings
    if setup_logging:
        configure_logging(settings)

    localization = Localization(
        settings.to_options(),
        convention_prefix=settings.convention_prefix,
    )
    logger.info(
        "localization_created",
        localizations_location=settings.localizations_location,
        default_locale=settings.default_locale,
        use_file_name=settings.use_file_name,
    )
    return localization


async def create_prepared_localization(
    settings: Optional[LocalizationSettings] = None,
) -> Localization:
    """Create a Localization and load its dictionary."""
    localization = create_localization(settings)
    await localization.prepare()
    return localization
