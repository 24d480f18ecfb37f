"""Bundle data model.

A Bundle is what the translation service returns for a project: the raw
FTL text of every locale plus the designation of the main locale, whose
text is the authoritative source of the parameter schema.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from turnslate.errors import FetchError, MissingMainLocaleError
from turnslate.types import FTLSource, LocaleCode

__all__ = ["Bundle"]


@dataclass(frozen=True, slots=True)
class Bundle:
    """Immutable per-run translation bundle.

    Locale order is the order in which the service listed the locales and is
    carried through to the generated locale table.

    Attributes:
        main: Locale whose FTL defines the schema
        langs: Locale code to raw FTL text, for every locale of the project
    """

    main: LocaleCode
    langs: Mapping[LocaleCode, FTLSource] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze langs into a read-only copy."""
        object.__setattr__(self, "langs", MappingProxyType(dict(self.langs)))

    @classmethod
    def from_payload(cls, payload: object) -> Bundle:
        """Build a Bundle from the decoded JSON response.

        Args:
            payload: Decoded JSON value, expected to be
                     {"main": str, "langs": {str: str}}

        Returns:
            Bundle with locales in payload order

        Raises:
            FetchError: If the payload does not have the bundle shape
        """
        if not isinstance(payload, dict):
            msg = f"Bundle payload must be an object, got {type(payload).__name__}"
            raise FetchError(msg)

        main = payload.get("main")
        if not isinstance(main, str):
            msg = f"Bundle 'main' must be a string, got {type(main).__name__}"
            raise FetchError(msg)

        langs = payload.get("langs")
        if not isinstance(langs, dict):
            msg = f"Bundle 'langs' must be an object, got {type(langs).__name__}"
            raise FetchError(msg)

        for locale, source in langs.items():
            if not isinstance(source, str):
                msg = (
                    f"Bundle locale '{locale}' must map to FTL text, "
                    f"got {type(source).__name__}"
                )
                raise FetchError(msg)

        return cls(main=main, langs=langs)

    def main_source(self) -> FTLSource:
        """Return the FTL text of the main locale.

        Raises:
            MissingMainLocaleError: If main is not a key of langs
        """
        try:
            return self.langs[self.main]
        except KeyError:
            raise MissingMainLocaleError(self.main, list(self.langs)) from None

    @property
    def locale_count(self) -> int:
        """Number of locales carried by the bundle."""
        return len(self.langs)
