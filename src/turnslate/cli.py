"""Command-line entry point.

Fetches a project's translation bundle, generates the typed TypeScript
module and writes it to the output path.

Usage:
    turnslate [--project ID] [--token TOKEN] [--out-file PATH]
              [--endpoint URL] [--timeout SECONDS] [-v | -vv]

Each option falls back to an environment variable (PROJECT, TOKEN,
OUT_FILE, TURNSLATE_ENDPOINT, TURNSLATE_TIMEOUT).

Exit codes:
    0: Document written
    1: Configuration, fetch, parse or write failure
    2: Invalid command-line usage

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys

from turnslate.composer import generate
from turnslate.config import Settings, load_settings
from turnslate.errors import TurnslateError
from turnslate.fetcher import HttpClient, fetch_bundle
from turnslate.writer import write_output

__all__ = ["main", "run"]

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="turnslate",
        description="Generate typed Fluent translations from a translation project.",
    )
    parser.add_argument("--project", help="project id (default: $PROJECT)")
    parser.add_argument("--token", help="access token (default: $TOKEN)")
    parser.add_argument("--out-file", help="output file (default: $OUT_FILE)")
    parser.add_argument("--endpoint", help="service URL (default: $TURNSLATE_ENDPOINT)")
    parser.add_argument("--timeout", help="request timeout in seconds")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase log verbosity (-v info, -vv debug)",
    )
    return parser.parse_args(argv)


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run(settings: Settings, *, client: HttpClient | None = None) -> int:
    """Fetch, generate and write one document.

    Args:
        settings: Validated run settings
        client: HTTP client passed to fetch_bundle

    Returns:
        Number of locales embedded in the document

    Raises:
        TurnslateError: On any fatal failure; nothing is written
    """
    bundle = fetch_bundle(
        settings.project,
        settings.token,
        endpoint=settings.endpoint,
        timeout=settings.timeout,
        client=client,
    )
    document = generate(bundle)
    write_output(settings.out_file, document)
    return bundle.locale_count


def main(argv: list[str] | None = None) -> int:
    """Run the generator and return a process exit code."""
    args = _parse_args(argv)
    _configure_logging(args.verbose)

    try:
        settings = load_settings(
            project=args.project,
            token=args.token,
            out_file=args.out_file,
            endpoint=args.endpoint,
            timeout=args.timeout,
        )
        logger.debug("Loaded %r", settings)
        count = run(settings)
    except TurnslateError as e:
        logger.debug("Run failed with %s", type(e).__name__, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Generated translations for {count} languages")
    return 0


if __name__ == "__main__":
    sys.exit(main())
