"""Localization facade.

Ties the loader, the builder and the translator together behind the
``prepare()`` / ``translate()`` interface applications use.

Usage:
    localization = Localization({"localizations_location": "./locales"})
    await localization.prepare()

    localization.on("warning", print)
    localization.translate("first.name.hello", "es-MX", {"name": "Juan"})
"""

from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional, Union

from localization.builder import DictionaryBuilder
from localization.events import DiagnosticHandler, DiagnosticsEmitter
from localization.loader import load_config
from localization.logging import get_module_logger
from localization.models import (
    LocalizationDictionary,
    LocalizationOptions,
    TranslationPath,
)
from localization.translator import Translator

logger = get_module_logger()


class Localization:
    """Locale dictionary loaded from disk with fallback-aware lookups.

    The dictionary is filled once by ``prepare()``. It must complete before
    any lookup and is not guarded against concurrent rebuilds.

    Attributes:
        options: Effective construction options.
        dictionary: Locale code -> locale tree, in load order.
        prepared: Whether prepare() has completed.
    """

    def __init__(
        self,
        options: Optional[Union[LocalizationOptions, Mapping[str, Any]]] = None,
        convention_prefix: str = "local",
    ):
        if isinstance(options, LocalizationOptions):
            self.options = replace(options)
        else:
            self.options = LocalizationOptions.from_overrides(
                dict(options) if options else None
            )

        self.convention_prefix = convention_prefix
        self.emitter = DiagnosticsEmitter()
        self._dictionary: LocalizationDictionary = {}
        self._translator = Translator(
            self._dictionary,
            default_locale=self.options.default_locale,
            emitter=self.emitter,
        )
        self.prepared = False

    @property
    def dictionary(self) -> LocalizationDictionary:
        return self._dictionary

    @property
    def translator(self) -> Translator:
        return self._translator

    def on(self, event_type: str, handler: DiagnosticHandler) -> DiagnosticHandler:
        """Subscribe to "warning" or "error" diagnostics."""
        return self.emitter.on(event_type, handler)

    def off(self, event_type: str, handler: DiagnosticHandler) -> None:
        self.emitter.off(event_type, handler)

    async def prepare(self) -> None:
        """Load the translation sources and build the dictionary.

        Raises:
            ValueError: If the localizations location is not a directory or
                a source file cannot be parsed.
        """
        raw_tree = await load_config(
            self.options.localizations_location,
            convention_prefix=self.convention_prefix,
        )

        builder = DictionaryBuilder(
            use_file_name=self.options.use_file_name,
            convention_prefix=self.convention_prefix,
            emitter=self.emitter,
        )
        builder.build(raw_tree, dictionary=self._dictionary)
        self.prepared = True

        logger.info(
            "localization_prepared",
            location=self.options.localizations_location,
            locales=self.get_available_locales(),
        )

    def translate(
        self,
        subject: TranslationPath,
        locale: Optional[str] = None,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Translate a dotted path, see Translator.translate()."""
        return self._translator.translate(subject, locale, variables)

    def has_translation(
        self, subject: TranslationPath, locale: Optional[str] = None
    ) -> bool:
        return self._translator.has_translation(
            subject, locale if locale is not None else self.options.default_locale
        )

    def get_available_locales(self) -> List[str]:
        return self._translator.get_available_locales()
