"""Atomic output writing.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from turnslate.errors import WriteError

__all__ = ["write_output"]

logger = logging.getLogger(__name__)


def _target_mode(path: Path) -> int:
    """Permission bits for the written file.

    An existing destination keeps its mode; a new one gets 0o666 minus the
    process umask, as a plain open() would. mkstemp alone creates 0o600.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_output(destination: str | os.PathLike[str], text: str) -> Path:
    """Write the generated document, replacing any previous file atomically.

    The text goes to a temporary file in the destination directory which is
    then renamed over the destination, so readers never observe a partial
    document and a failed run leaves the previous file untouched.

    Args:
        destination: Output file path
        text: Document text, written as UTF-8 without newline translation

    Returns:
        Resolved destination path

    Raises:
        WriteError: If the directory is missing or not writable
    """
    path = Path(destination)
    directory = path.parent if str(path.parent) else Path()

    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=directory, prefix=f".{path.name}.", suffix=".tmp"
        )
    except OSError as e:
        msg = f"Failed to write file {path}: {e}"
        raise WriteError(msg) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            os.fchmod(handle.fileno(), _target_mode(path))
            handle.write(text)
        os.replace(tmp_name, path)
    except OSError as e:
        Path(tmp_name).unlink(missing_ok=True)
        msg = f"Failed to write file {path}: {e}"
        raise WriteError(msg) from e

    logger.info("Wrote %d characters to %s", len(text), path)
    return path.resolve()
