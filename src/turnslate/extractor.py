"""Parameter schema extraction from a parsed FTL resource.

Walks the main locale's AST and produces one ExtractionRecord per message:
the message identifier and every variable name that must be supplied to
format it. Select expressions do not scope variables to a branch; the set
for a message is the union over its selectors and every variant, default
or not, at any nesting depth.

Variable names are kept in first-appearance order so that generated output
is stable across runs.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, assert_never

from ftllexengine import FluentSyntaxError, parse_ftl
from ftllexengine.syntax.ast import (
    Junk,
    Message,
    Pattern,
    Placeable,
    Resource,
    SelectExpression,
    TextElement,
    VariableReference,
)

from turnslate.constants import LOG_TRUNCATE
from turnslate.errors import ParseError

if TYPE_CHECKING:
    from ftllexengine.syntax.ast import Expression, InlineExpression, PatternElement

    from turnslate.types import FTLSource, LocaleCode, MessageId, VariableName

__all__ = [
    "ExtractionRecord",
    "collect_variables",
    "extract",
    "parse_main",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtractionRecord:
    """Parameters required by one message.

    Attributes:
        name: Message identifier
        variables: Deduplicated variable names in first-appearance order
    """

    name: MessageId
    variables: tuple[VariableName, ...] = ()


# ==============================================================================
# PARSING
# ==============================================================================


def parse_main(source: FTLSource, *, locale: LocaleCode | None = None) -> Resource:
    """Parse main locale FTL, treating any syntax error as fatal.

    The Fluent parser recovers from errors by emitting Junk entries. Every
    Junk entry is logged and the first one raises.

    Args:
        source: FTL source of the main locale
        locale: Locale code, used only for diagnostics

    Returns:
        Parsed resource without Junk entries

    Raises:
        ParseError: If the source contains unparseable content
    """
    try:
        resource = parse_ftl(source)
    except FluentSyntaxError as e:
        msg = f"Failed to parse FTL for locale '{locale}': {e}"
        raise ParseError(msg, locale=locale) from e

    junk = [entry for entry in resource.entries if isinstance(entry, Junk)]
    if not junk:
        return resource

    for entry in junk:
        logger.warning(
            "Syntax error in main locale %s: %s",
            locale or "<string>",
            repr(entry.content[:LOG_TRUNCATE]),
        )

    first = junk[0]
    detail = first.annotations[0].message if first.annotations else "unparseable content"
    msg = (
        f"Failed to parse FTL for locale '{locale}': {detail} "
        f"near {first.content[:LOG_TRUNCATE]!r} ({len(junk)} junk entries)"
    )
    annotations = [annotation for entry in junk for annotation in entry.annotations]
    raise ParseError(msg, locale=locale, annotations=annotations)


# ==============================================================================
# EXTRACTION
# ==============================================================================


def extract(resource: Resource) -> list[ExtractionRecord]:
    """Produce one record per message in declaration order.

    Terms, comments and junk are skipped. Message attributes are not part of
    the schema.

    Args:
        resource: Parsed FTL resource

    Returns:
        Records in the order messages are declared
    """
    records: list[ExtractionRecord] = []
    seen: set[MessageId] = set()
    for entry in resource.entries:
        match entry:
            case Message(id=identifier, value=value):
                if identifier.name in seen:
                    # Emitted twice in the schema; TypeScript rejects the duplicate key
                    logger.warning("Duplicate message id: %s", identifier.name)
                seen.add(identifier.name)
                variables = collect_variables(value) if value is not None else ()
                records.append(ExtractionRecord(name=identifier.name, variables=variables))
                logger.debug("Extracted message %s: %s", identifier.name, variables)
            case _:
                pass
    return records


def collect_variables(pattern: Pattern) -> tuple[VariableName, ...]:
    """Collect every variable referenced by a pattern.

    Args:
        pattern: Message value pattern

    Returns:
        Deduplicated variable names in first-appearance order
    """
    # dict keys give an insertion-ordered set
    found: dict[VariableName, None] = {}
    _visit_pattern(pattern, found)
    return tuple(found)


def _visit_pattern(pattern: Pattern, found: dict[VariableName, None]) -> None:
    for element in pattern.elements:
        _visit_element(element, found)


def _visit_element(element: PatternElement, found: dict[VariableName, None]) -> None:
    match element:
        case TextElement():
            pass
        case Placeable(expression=expression):
            _visit_expression(expression, found)
        case _ as unreachable:
            assert_never(unreachable)


def _visit_expression(
    expression: Expression | InlineExpression, found: dict[VariableName, None]
) -> None:
    match expression:
        case VariableReference(id=identifier):
            found.setdefault(identifier.name, None)
        case SelectExpression(selector=selector, variants=variants):
            _visit_expression(selector, found)
            for variant in variants:
                _visit_pattern(variant.value, found)
        case Placeable(expression=inner):
            # { { $var } }
            _visit_expression(inner, found)
        case _:
            # Literals, function calls, message and term references
            pass
