"""Localization configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from localization.models import LocalizationOptions


class LocalizationSettings(BaseSettings):
    """Localization configuration loaded from the environment.

    Environment Variables:
        LOCALIZATION_DEFAULT_LOCALE: Locale used when none is requested (default: en)
        LOCALIZATION_USE_FILE_NAME: Namespace translations by file name (default: True)
        LOCALIZATION_LOCATION: Directory holding translation files (default: ./src)
        LOCALIZATION_CONVENTION_PREFIX: Marker segment of translation files (default: local)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        PREFIX: Environment prefix, empty in production

    Example:
        ```python
        from localization.config import settings

        options = settings.to_options()
        if settings.is_production:
            ...
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="LOCALIZATION_DEFAULT_LOCALE",
        description="Locale used when a translation call does not name one",
    )
    use_file_name: bool = Field(
        default=True,
        alias="LOCALIZATION_USE_FILE_NAME",
        description="Use the file name segments as a key prefix under the locale",
    )
    localizations_location: str = Field(
        default="./src",
        alias="LOCALIZATION_LOCATION",
        description="Directory searched for translation files",
    )
    convention_prefix: str = Field(
        default="local",
        alias="LOCALIZATION_CONVENTION_PREFIX",
        description="Last stem segment marking a file as a translation source",
    )

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def to_options(self) -> LocalizationOptions:
        """Build construction options from these settings."""
        return LocalizationOptions(
            default_locale=self.default_locale,
            use_file_name=self.use_file_name,
            localizations_location=self.localizations_location,
        )


# Create the singleton settings instance
settings = LocalizationSettings()
