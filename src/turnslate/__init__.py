"""turnslate - typed Fluent translations from a translation project.

Fetches a project's FTL bundle, derives the parameters every message of
the main locale requires, and emits a TypeScript module that declares
those parameters and embeds the raw FTL of every locale.

Public API:
    Bundle - Main locale designation plus raw FTL per locale
    ExtractionRecord - Message id and its required variables
    parse_main - Parse main locale FTL, failing on any syntax error
    extract - Extraction records for every message of a resource
    collect_variables - Variables referenced by a pattern
    render - TypeScript schema for extraction records
    compose - Full output document from schema and locale table
    generate - Bundle to output document
    fetch_bundle - Retrieve a Bundle from the translation service
    write_output - Atomically write the output document

Exceptions:
    TurnslateError - Base exception class
    ConfigurationError, FetchError, MissingMainLocaleError, ParseError, WriteError
"""

from .bundle import Bundle
from .composer import RUNTIME_PREAMBLE, compose, generate
from .errors import (
    ConfigurationError,
    FetchError,
    MissingMainLocaleError,
    ParseError,
    TurnslateError,
    WriteError,
)
from .extractor import ExtractionRecord, collect_variables, extract, parse_main
from .fetcher import fetch_bundle
from .renderer import render
from .writer import write_output

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("turnslate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "RUNTIME_PREAMBLE",
    "Bundle",
    "ConfigurationError",
    "ExtractionRecord",
    "FetchError",
    "MissingMainLocaleError",
    "ParseError",
    "TurnslateError",
    "WriteError",
    "__version__",
    "collect_variables",
    "compose",
    "extract",
    "fetch_bundle",
    "generate",
    "parse_main",
    "render",
    "write_output",
]
