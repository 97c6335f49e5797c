"""Feature-level fixtures for localization tests."""

from unittest.mock import MagicMock

import pytest

from localization import DiagnosticsEmitter, Translator
from tests.factories.localization import make_dictionary, make_raw_tree


@pytest.fixture
def raw_tree():
    return make_raw_tree()


@pytest.fixture
def emitter():
    return DiagnosticsEmitter()


@pytest.fixture
def warning_mock(emitter):
    """MagicMock subscribed to warnings of the emitter fixture."""
    mock = MagicMock()
    emitter.on("warning", mock)
    return mock


@pytest.fixture
def error_mock(emitter):
    """MagicMock subscribed to errors of the emitter fixture."""
    mock = MagicMock()
    emitter.on("error", mock)
    return mock


@pytest.fixture
def translator(emitter):
    return Translator(make_dictionary(), default_locale="en", emitter=emitter)
