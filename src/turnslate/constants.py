"""Shared constants for turnslate.

Constants are grouped by domain:
- Service: Translation service endpoint and request limits
- Environment: Variable names read by the configuration layer
- Generated code: Names emitted into the TypeScript document
- Logging: Excerpt truncation

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Service
    "DEFAULT_ENDPOINT",
    "DEFAULT_TIMEOUT",
    # Environment
    "ENV_PROJECT",
    "ENV_TOKEN",
    "ENV_OUT_FILE",
    "ENV_ENDPOINT",
    "ENV_TIMEOUT",
    # Generated code
    "SCHEMA_TYPE_NAME",
    "VARS_TYPE_NAME",
    "LOCALE_TABLE_NAME",
    # Logging
    "LOG_TRUNCATE",
]

# ============================================================================
# SERVICE
# ============================================================================

DEFAULT_ENDPOINT: str = "https://us-central1-turnslate.cloudfunctions.net/langs"
"""Cloud function returning {"main": ..., "langs": {...}} for a project."""

DEFAULT_TIMEOUT: float = 30.0
"""Seconds to wait for the bundle response (connect and read)."""

# ============================================================================
# ENVIRONMENT
# ============================================================================

ENV_PROJECT: str = "PROJECT"
ENV_TOKEN: str = "TOKEN"
ENV_OUT_FILE: str = "OUT_FILE"
ENV_ENDPOINT: str = "TURNSLATE_ENDPOINT"
ENV_TIMEOUT: str = "TURNSLATE_TIMEOUT"

# ============================================================================
# GENERATED CODE
# ============================================================================

# The runtime preamble refers to these names literally. Changing one here
# without changing composer.RUNTIME_PREAMBLE produces a document that does
# not type-check.
SCHEMA_TYPE_NAME: str = "LocalizedMessage"
VARS_TYPE_NAME: str = "Vars"
LOCALE_TABLE_NAME: str = "langs"

# ============================================================================
# LOGGING
# ============================================================================

LOG_TRUNCATE: int = 50
"""Maximum characters of junk content included in log lines and errors."""
