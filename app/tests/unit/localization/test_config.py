"""Tests for localization.config module."""

import pytest

from localization.config import LocalizationSettings
from localization.models import LocalizationOptions


class TestLocalizationSettings:
    """Test suite for LocalizationSettings configuration."""

    def test_defaults(self, monkeypatch):
        for name in (
            "LOCALIZATION_DEFAULT_LOCALE",
            "LOCALIZATION_USE_FILE_NAME",
            "LOCALIZATION_LOCATION",
            "LOCALIZATION_CONVENTION_PREFIX",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = LocalizationSettings(_env_file=None)

        assert settings.default_locale == "en"
        assert settings.use_file_name is True
        assert settings.localizations_location == "./src"
        assert settings.convention_prefix == "local"

    def test_custom_values(self, monkeypatch):
        monkeypatch.setenv("LOCALIZATION_DEFAULT_LOCALE", "es-MX")
        monkeypatch.setenv("LOCALIZATION_USE_FILE_NAME", "false")
        monkeypatch.setenv("LOCALIZATION_LOCATION", "/srv/locales")
        monkeypatch.setenv("LOCALIZATION_CONVENTION_PREFIX", "i18n")

        settings = LocalizationSettings(_env_file=None)

        assert settings.default_locale == "es-MX"
        assert settings.use_file_name is False
        assert settings.localizations_location == "/srv/locales"
        assert settings.convention_prefix == "i18n"

    def test_field_names_accepted(self):
        settings = LocalizationSettings(_env_file=None, default_locale="fr")
        assert settings.default_locale == "fr"

    @pytest.mark.parametrize("prefix,expected", [("", True), ("dev", False)])
    def test_is_production(self, prefix, expected):
        settings = LocalizationSettings(_env_file=None, PREFIX=prefix)
        assert settings.is_production is expected

    def test_to_options(self):
        settings = LocalizationSettings(
            _env_file=None, default_locale="es", use_file_name=False
        )
        assert settings.to_options() == LocalizationOptions(
            default_locale="es",
            use_file_name=False,
            localizations_location=settings.localizations_location,
        )
