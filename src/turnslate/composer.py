"""Output document composition.

The generated TypeScript module has three sections, always in this order:

1. RUNTIME_PREAMBLE - constant @fluent/bundle binding (createLang)
2. Schema - LocalizedMessage type rendered from the main locale
3. Locale table - raw FTL of every locale, keyed by locale code

Only the schema is derived from the main locale. Every other locale is
embedded unparsed and unvalidated.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from turnslate.bundle import Bundle
from turnslate.constants import LOCALE_TABLE_NAME
from turnslate.extractor import extract, parse_main
from turnslate.renderer import quote_key, render
from turnslate.types import FTLSource, LocaleCode

__all__ = [
    "RUNTIME_PREAMBLE",
    "compose",
    "generate",
    "render_locale_table",
    "template_literal",
]

logger = logging.getLogger(__name__)

RUNTIME_PREAMBLE = """\
import { FluentBundle, FluentResource } from '@fluent/bundle'

export interface Lang {
  <K extends keyof LocalizedMessage>(
    id: K,
    ...params: LocalizedMessage[K]
  ): string
}

export function createLang(locale: keyof typeof langs): Lang {
  const bundle = new FluentBundle(locale)
  const resource = new FluentResource(langs[locale])
  bundle.addResource(resource)
  return (id, ...[params]) => {
    const message = bundle.getMessage(id)
    if (!message || !message.value) {
      return id
    }
    return bundle.formatPattern(message.value, params)
  }
}"""
"""Binding from a locale code to a typed translator function.

Refers to LocalizedMessage and langs by name; both are defined by the
sections that follow it in the document.
"""

_INDENT = "  "


def template_literal(source: FTLSource) -> str:
    """Embed text in a TypeScript template literal.

    Backslashes, backticks and ${ are escaped, and carriage returns are
    written as \\r because template literals normalize raw CRLF to LF. The
    literal therefore evaluates to exactly the input text.
    """
    escaped = (
        source.replace("\\", "\\\\")
        .replace("`", "\\`")
        .replace("${", "\\${")
        .replace("\r", "\\r")
    )
    return f"`{escaped}`"


def render_locale_table(langs: Mapping[LocaleCode, FTLSource]) -> str:
    """Render the constant locale table, one entry per locale in map order."""
    lines = [f"export const {LOCALE_TABLE_NAME} = {{"]
    lines.extend(
        f"{_INDENT}{quote_key(locale)}: {template_literal(source)},"
        for locale, source in langs.items()
    )
    lines.append("} as const")
    return "\n".join(lines)


def compose(schema_text: str, langs: Mapping[LocaleCode, FTLSource]) -> str:
    """Assemble the output document.

    Args:
        schema_text: Rendered schema (see renderer.render)
        langs: Raw FTL of every locale

    Returns:
        Complete TypeScript module text, newline-terminated
    """
    sections = [RUNTIME_PREAMBLE, schema_text, render_locale_table(langs)]
    return "\n\n".join(sections) + "\n"


def generate(bundle: Bundle) -> str:
    """Run parse, extract, render and compose for a bundle.

    Raises:
        MissingMainLocaleError: If the main locale is absent from the bundle
        ParseError: If the main locale FTL does not parse
    """
    source = bundle.main_source()
    resource = parse_main(source, locale=bundle.main)
    records = extract(resource)
    logger.info(
        "Extracted %d messages from main locale %s (%d with parameters)",
        len(records),
        bundle.main,
        sum(1 for record in records if record.variables),
    )
    return compose(render(records), bundle.langs)
