"""Dictionary assembly from raw translation sources.

Entries of the raw tree whose key ends in ``.local`` are translation files.
The locale comes either from the file name (``first.en.local``) or, when the
second-to-last segment is not a locale, from the top-level keys of the file
contents (``light.local`` holding ``{"en": {...}, "es": {...}}``).
"""

import re
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from localization.events import DiagnosticsEmitter
from localization.logging import get_module_logger
from localization.merge import shallow_merge
from localization.models import (
    DiagnosticEvent,
    LocalizationDictionary,
    is_locale_code,
)

logger = get_module_logger()


@dataclass
class BuildResult:
    """Dictionary produced by a build, with the diagnostics raised on the way."""

    dictionary: LocalizationDictionary = field(default_factory=dict)
    diagnostics: List[DiagnosticEvent] = field(default_factory=list)

    @property
    def errors(self) -> List[DiagnosticEvent]:
        return [d for d in self.diagnostics if d.event == "error"]


class DictionaryBuilder:
    """Turns a raw configuration tree into a locale-keyed dictionary.

    Attributes:
        use_file_name: Namespace file-derived translations by the file name.
        emitter: Optional channel receiving diagnostics as they are raised.
    """

    def __init__(
        self,
        use_file_name: bool = True,
        convention_prefix: str = "local",
        emitter: Optional[DiagnosticsEmitter] = None,
    ):
        self.use_file_name = use_file_name
        self.convention_prefix = convention_prefix
        self.emitter = emitter
        self._marker = re.compile(rf".*\.{re.escape(convention_prefix)}", re.DOTALL)

    def is_translation_key(self, key: Any) -> bool:
        return isinstance(key, str) and self._marker.fullmatch(key) is not None

    def build(
        self,
        raw_tree: Mapping[str, Any],
        dictionary: Optional[LocalizationDictionary] = None,
    ) -> BuildResult:
        """Classify and merge every translation entry of raw_tree.

        Args:
            raw_tree: Nested mapping produced by the configuration loader.
                It is never modified.
            dictionary: Existing dictionary to extend in place, if any.

        Returns:
            BuildResult with the dictionary and the diagnostics raised.
        """
        result = BuildResult(dictionary=dictionary if dictionary is not None else {})
        self._visit(raw_tree, result)

        logger.info(
            "built_localization_dictionary",
            locale_count=len(result.dictionary),
            locales=list(result.dictionary.keys()),
            error_count=len(result.errors),
        )
        return result

    def _visit(self, node: Mapping[str, Any], result: BuildResult) -> None:
        for key, value in node.items():
            if self.is_translation_key(key):
                # Matched entries are terminal, their contents are not walked.
                self._add_entry(key, value, result)
            elif isinstance(value, Mapping):
                self._visit(value, result)

    def _add_entry(self, key: str, value: Any, result: BuildResult) -> None:
        if not isinstance(value, Mapping):
            logger.warning("invalid_translation_entry", key=key, expected="mapping")
            return

        parts = key.split(".")
        file_locale = parts[-2] if len(parts) >= 2 else ""

        if is_locale_code(file_locale):
            self._add_file_locale(file_locale, parts[:-2], value, result.dictionary)
        else:
            self._add_inline_locales(key, value, result)

    def _add_file_locale(
        self,
        locale: str,
        name_parts: List[str],
        value: Mapping[str, Any],
        dictionary: LocalizationDictionary,
    ) -> None:
        locale_tree = dictionary.setdefault(locale, {})

        if self.use_file_name:
            file_key = ".".join(name_parts)
            locale_tree[file_key] = shallow_merge(locale_tree.get(file_key), value)
        else:
            dictionary[locale] = shallow_merge(locale_tree, value)

    def _add_inline_locales(
        self, key: str, value: Mapping[str, Any], result: BuildResult
    ) -> None:
        for candidate, fragment in value.items():
            if not is_locale_code(candidate):
                self._report(
                    DiagnosticEvent.from_error(
                        ValueError(f'Invalid locale "{candidate}" coming from "{key}"')
                    ),
                    result,
                )
                continue

            if not isinstance(fragment, Mapping):
                logger.warning(
                    "invalid_locale_fragment",
                    key=key,
                    locale=candidate,
                    expected="mapping",
                )
                continue

            result.dictionary[candidate] = shallow_merge(
                result.dictionary.get(candidate), fragment
            )

    def _report(self, event: DiagnosticEvent, result: BuildResult) -> None:
        """Record a diagnostic and log it once.

        The emitter logs the events it dispatches, so the local log line is
        only written when no emitter is attached.
        """
        result.diagnostics.append(event)
        if self.emitter is not None:
            self.emitter.emit(event)
        else:
            logger.error("localization_error", message=event.message)
