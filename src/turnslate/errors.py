"""turnslate exception hierarchy.

Every failure in a generation run is fatal: there is no partial output,
no retry and no fallback schema. Callers catch TurnslateError at the
process boundary.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Sequence

from ftllexengine.syntax.ast import Annotation

__all__ = [
    "ConfigurationError",
    "FetchError",
    "MissingMainLocaleError",
    "ParseError",
    "TurnslateError",
    "WriteError",
]


class TurnslateError(Exception):
    """Base exception for all turnslate errors."""


class ConfigurationError(TurnslateError):
    """A required setting (project, token, output path) is missing or invalid.

    Attributes:
        missing: Names of the settings that were not provided
    """

    def __init__(self, message: str, *, missing: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.missing = tuple(missing)


class FetchError(TurnslateError):
    """Bundle retrieval failed or returned content that is not a bundle."""


class MissingMainLocaleError(TurnslateError):
    """The bundle's declared main locale has no entry in its locale map.

    Attributes:
        main: The declared main locale
        available: Locales actually present in the bundle
    """

    def __init__(self, main: str, available: Sequence[str]) -> None:
        listed = ", ".join(available) if available else "<none>"
        super().__init__(
            f"Main locale '{main}' does not exist in bundle (available: {listed})"
        )
        self.main = main
        self.available = tuple(available)


class ParseError(TurnslateError):
    """Main locale FTL is not valid under the Fluent grammar.

    Attributes:
        locale: Locale whose source failed to parse
        annotations: Parser annotations collected from Junk entries
    """

    def __init__(
        self,
        message: str,
        *,
        locale: str | None = None,
        annotations: Sequence[Annotation] = (),
    ) -> None:
        super().__init__(message)
        self.locale = locale
        self.annotations = tuple(annotations)


class WriteError(TurnslateError):
    """The generated document could not be written to its destination."""
