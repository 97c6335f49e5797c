"""Translation lookup with locale fallback and variable interpolation.

Lookups never raise: missing locales and missing translations are reported
through the diagnostics channel and degrade to a best-effort result.
"""

from typing import Any, List, Mapping, Optional, Tuple

from localization.events import DiagnosticsEmitter
from localization.logging import get_module_logger
from localization.models import (
    DiagnosticEvent,
    LocaleTree,
    LocalizationDictionary,
    TranslationPath,
    join_path,
    language_of,
)
from localization.navigation import navigate_object
from localization.variables import replace_vars

logger = get_module_logger()


class Translator:
    """Resolves translation paths against a locale dictionary.

    Locale resolution, first match wins:
    1. Exact locale
    2. Language of the locale ("es" for "es-AR")
    3. First locale starting with that language ("fr-CM" for "fr")
    4. First available locale
    5. Nothing loaded: an empty tree and an error

    Attributes:
        dictionary: Locale dictionary, read only from here on.
        default_locale: Locale used when a call does not name one.
        emitter: Channel receiving warnings and errors.
    """

    def __init__(
        self,
        dictionary: LocalizationDictionary,
        default_locale: str = "en",
        emitter: Optional[DiagnosticsEmitter] = None,
    ):
        self.dictionary = dictionary
        self.default_locale = default_locale
        self.emitter = emitter if emitter is not None else DiagnosticsEmitter()

    def resolve_locale(
        self, locale: str, subject: str = ""
    ) -> Tuple[Optional[str], LocaleTree]:
        """Find the best available locale tree for locale.

        Args:
            locale: Requested locale.
            subject: Path being translated, quoted in fallback warnings.

        Returns:
            Tuple of the chosen locale (None when nothing is loaded) and its tree.
        """
        if locale in self.dictionary:
            return locale, self.dictionary[locale]

        language = language_of(locale)
        if language in self.dictionary:
            chosen = language
        else:
            available = list(self.dictionary.keys())
            chosen = next(
                (candidate for candidate in available if candidate.startswith(language)),
                available[0] if available else None,
            )

        if chosen is None:
            self.emitter.emit(
                DiagnosticEvent.from_error(
                    LookupError(f"Missing locale <{locale}> and no fallback found for it")
                )
            )
            return None, {}

        self.emitter.emit(
            DiagnosticEvent.warning(
                f'Missing locale "{locale}", using "{chosen}" instead for "{subject}"'
            )
        )
        return chosen, self.dictionary[chosen]

    def translate(
        self,
        subject: TranslationPath,
        locale: Optional[str] = None,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Translate a dotted path.

        Args:
            subject: Dotted path ("first.name.hello") or sequence of segments.
            locale: Requested locale; None means the default locale.
            variables: Optional mapping for {{variable}} interpolation.

        Returns:
            The translated string, or "missing <path>" when the path does not
            lead to a string.
        """
        final_locale = locale if locale is not None else self.default_locale
        subject_path = join_path(subject)

        _, locale_tree = self.resolve_locale(final_locale, subject_path)
        result = navigate_object(locale_tree, subject)
        found = result.value

        if not isinstance(found, str):
            self.emitter.emit(
                DiagnosticEvent.warning(
                    f'Missing translation for "{subject_path}" in "{final_locale}"'
                )
            )
            return f"missing <{result.path}>"

        if variables is not None:
            return replace_vars(found, variables)

        return found

    def has_translation(self, subject: TranslationPath, locale: str) -> bool:
        """Check for a string at subject in exactly locale, without fallback."""
        locale_tree = self.dictionary.get(locale)
        if locale_tree is None:
            return False
        return isinstance(navigate_object(locale_tree, subject).value, str)

    def get_available_locales(self) -> List[str]:
        """Get loaded locale codes in insertion order."""
        return list(self.dictionary.keys())
