"""TypeScript schema rendering.

Turns extraction records into a type mapping each message id to the tuple
of parameters its translator call accepts:

    export type LocalizedMessage = {
      'hello': [],
      'hello-user': [Vars<'userName'>],
    }

    type Vars<T extends string> = Record<T, string | number>

Message ids may contain hyphens, so every key is emitted as a quoted string
literal rather than a bare identifier.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable

from turnslate.constants import SCHEMA_TYPE_NAME, VARS_TYPE_NAME
from turnslate.extractor import ExtractionRecord

__all__ = ["VARS_DEFINITION", "quote_key", "render", "render_parameters"]

VARS_DEFINITION = f"type {VARS_TYPE_NAME}<T extends string> = Record<T, string | number>"
"""Auxiliary type: required variable names mapped to string-or-number values."""

_INDENT = "  "

_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def quote_key(value: str) -> str:
    """Quote a string as a single-quoted TypeScript string literal.

    Example:
        >>> quote_key("hello-user")
        "'hello-user'"
    """
    return "'" + "".join(_ESCAPES.get(char, char) for char in value) + "'"


def render_parameters(record: ExtractionRecord) -> str:
    """Render the parameter tuple type for one message."""
    if not record.variables:
        return "[]"
    names = " | ".join(quote_key(name) for name in record.variables)
    return f"[{VARS_TYPE_NAME}<{names}>]"


def render(records: Iterable[ExtractionRecord]) -> str:
    """Render extraction records as a TypeScript schema.

    Args:
        records: Records in main locale declaration order

    Returns:
        Schema type followed by the Vars helper type, no trailing newline
    """
    lines = [f"export type {SCHEMA_TYPE_NAME} = {{"]
    lines.extend(
        f"{_INDENT}{quote_key(record.name)}: {render_parameters(record)},"
        for record in records
    )
    lines.append("}")
    return "\n".join(lines) + "\n\n" + VARS_DEFINITION
