"""Tests for localization.factory module."""

import pytest

from localization.config import LocalizationSettings
from localization.factory import create_localization, create_prepared_localization


class TestCreateLocalization:
    """Tests for create_localization() and create_prepared_localization()."""

    def test_create_from_settings(self, good_location):
        settings = LocalizationSettings(
            _env_file=None,
            default_locale="es",
            localizations_location=good_location,
            convention_prefix="i18n",
        )

        localization = create_localization(settings)

        assert localization.options.default_locale == "es"
        assert localization.options.localizations_location == good_location
        assert localization.convention_prefix == "i18n"
        assert localization.prepared is False

    @pytest.mark.asyncio
    async def test_create_prepared(self, good_location):
        settings = LocalizationSettings(
            _env_file=None, localizations_location=good_location
        )

        localization = await create_prepared_localization(settings)

        assert localization.prepared is True
        assert localization.translate("first.hello", "es") == "Hola"
