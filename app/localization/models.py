"""Localization models.

Defines the locale code pattern, construction options and the diagnostic
event record shared by the builder and the translator.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Union

# A locale is either a 2-letter language ("es") or language-REGION ("es-MX").
LOCALE_PATTERN = re.compile(r"(..|..-..)")

LocaleTree = Dict[str, Any]
LocalizationDictionary = Dict[str, LocaleTree]
TranslationPath = Union[str, list, tuple]


def is_locale_code(candidate: Any) -> bool:
    """Check whether a string looks like a locale code.

    Only the shape is checked, "zz-ZZ" is accepted as readily as "en-US".

    Args:
        candidate: Value to check.

    Returns:
        True if candidate matches the locale pattern.
    """
    return isinstance(candidate, str) and LOCALE_PATTERN.fullmatch(candidate) is not None


def language_of(locale: str) -> str:
    """Get language part of a locale (e.g., "en" from "en-US")."""
    return locale.split("-")[0]


def join_path(path: TranslationPath, separator: str = ".") -> str:
    """Return a translation path as a single dotted string."""
    if isinstance(path, str):
        return path
    return separator.join(str(segment) for segment in path)


@dataclass
class LocalizationOptions:
    """Options recognized when constructing a Localization.

    Attributes:
        default_locale: Locale used when none is requested.
        use_file_name: Whether file-name segments namespace the translations.
        localizations_location: Directory holding the translation sources.
    """

    default_locale: str = "en"
    use_file_name: bool = True
    localizations_location: str = "./src"

    @classmethod
    def from_overrides(
        cls, overrides: Optional[Dict[str, Any]] = None
    ) -> "LocalizationOptions":
        """Create options from a partial mapping, keeping defaults elsewhere.

        Args:
            overrides: Mapping of option name to value. Unknown names raise.

        Returns:
            LocalizationOptions instance.

        Raises:
            TypeError: If an unknown option name is given.
        """
        return cls(**(overrides or {}))


@dataclass(frozen=True)
class DiagnosticEvent:
    """A non-fatal report emitted while building or translating.

    Attributes:
        event: Either "warning" or "error".
        message: Human readable description.
        error: Underlying exception, set for errors only.
        timestamp: When the event was created.
    """

    event: str
    message: str
    error: Optional[Exception] = None
    timestamp: datetime = field(default_factory=datetime.now, compare=False)

    @classmethod
    def warning(cls, message: str) -> "DiagnosticEvent":
        return cls(event="warning", message=message)

    @classmethod
    def from_error(cls, error: Exception) -> "DiagnosticEvent":
        return cls(event="error", message=str(error), error=error)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the event, the error rendered as its message."""
        data: Dict[str, Any] = {"event": self.event, "message": self.message}
        if self.error is not None:
            data["error"] = str(self.error)
        data["timestamp"] = self.timestamp.isoformat()
        return data
