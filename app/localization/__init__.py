"""Localization - locale-keyed translation dictionary with fallback lookups.

Main components:
- builder: DictionaryBuilder assembling the dictionary from raw sources
- translator: Translator resolving locales and dotted translation paths
- service: Localization facade with prepare() and translate()
- loader: ConfigLoader reading YAML/JSON translation files
- events: DiagnosticsEmitter for warning and error reports
"""

from localization.builder import BuildResult, DictionaryBuilder
from localization.events import DiagnosticsEmitter
from localization.factory import create_localization, create_prepared_localization
from localization.loader import ConfigLoader, check_directory, load_config
from localization.merge import shallow_merge
from localization.models import (
    DiagnosticEvent,
    LocalizationOptions,
    is_locale_code,
)
from localization.navigation import NavigationResult, navigate_object
from localization.service import Localization
from localization.translator import Translator
from localization.variables import replace_vars

__all__ = [
    "BuildResult",
    "ConfigLoader",
    "DiagnosticEvent",
    "DiagnosticsEmitter",
    "DictionaryBuilder",
    "Localization",
    "LocalizationOptions",
    "NavigationResult",
    "Translator",
    "check_directory",
    "create_localization",
    "create_prepared_localization",
    "is_locale_code",
    "load_config",
    "navigate_object",
    "replace_vars",
    "shallow_merge",
]
