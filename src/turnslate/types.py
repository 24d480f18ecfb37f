"""Type aliases for the turnslate domain.

Provides semantic type aliases shared by the extraction, rendering and
composition stages.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "FTLSource",
    "LocaleCode",
    "MessageId",
    "ProjectId",
    "VariableName",
]

type MessageId = str
"""Identifier for a Fluent message (e.g., 'hello-user', 'shared-photos')."""

type VariableName = str
"""Variable name as referenced in FTL, without the $ prefix."""

type LocaleCode = str
"""Locale key as delivered by the translation service (e.g., 'en', 'pt-BR')."""

type FTLSource = str
"""Raw FTL source text as a Python string."""

type ProjectId = str
"""Translation service project identifier."""
