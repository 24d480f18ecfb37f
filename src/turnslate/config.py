"""Run configuration.

Settings come from command-line values first and the environment second.
Project, token and output path are required; the endpoint and timeout have
defaults.

Python 3.13+.
"""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

from turnslate.constants import (
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT,
    ENV_ENDPOINT,
    ENV_OUT_FILE,
    ENV_PROJECT,
    ENV_TIMEOUT,
    ENV_TOKEN,
)
from turnslate.errors import ConfigurationError
from turnslate.types import ProjectId

__all__ = ["Settings", "load_settings"]


@dataclass(frozen=True, slots=True)
class Settings:
    """Validated settings for one generation run."""

    project: ProjectId
    token: str
    out_file: str
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        return (
            f"Settings(project={self.project!r}, token='***', "
            f"out_file={self.out_file!r}, endpoint={self.endpoint!r}, "
            f"timeout={self.timeout!r})"
        )


def _parse_timeout(raw: str | float | None) -> float:
    if raw is None or raw == "":
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        msg = f"Timeout must be a number of seconds, got {raw!r}"
        raise ConfigurationError(msg) from None
    if not math.isfinite(timeout) or timeout <= 0:
        msg = f"Timeout must be a positive finite number, got {timeout}"
        raise ConfigurationError(msg)
    return timeout


def load_settings(
    *,
    project: str | None = None,
    token: str | None = None,
    out_file: str | None = None,
    endpoint: str | None = None,
    timeout: str | float | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Resolve settings from explicit values and the environment.

    Args:
        project: Project id (falls back to $PROJECT)
        token: Access token (falls back to $TOKEN)
        out_file: Output path (falls back to $OUT_FILE)
        endpoint: Service URL (falls back to $TURNSLATE_ENDPOINT)
        timeout: Request timeout (falls back to $TURNSLATE_TIMEOUT)
        environ: Environment mapping; defaults to os.environ

    Returns:
        Validated Settings

    Raises:
        ConfigurationError: If a required value is missing or timeout is invalid
    """
    env = os.environ if environ is None else environ

    resolved = {
        ENV_PROJECT: project or env.get(ENV_PROJECT, ""),
        ENV_TOKEN: token or env.get(ENV_TOKEN, ""),
        ENV_OUT_FILE: out_file or env.get(ENV_OUT_FILE, ""),
    }
    missing = [name for name, value in resolved.items() if not value]
    if missing:
        msg = f"Missing required configuration: {', '.join(missing)}"
        raise ConfigurationError(msg, missing=missing)

    return Settings(
        project=resolved[ENV_PROJECT],
        token=resolved[ENV_TOKEN],
        out_file=resolved[ENV_OUT_FILE],
        endpoint=endpoint or env.get(ENV_ENDPOINT) or DEFAULT_ENDPOINT,
        timeout=_parse_timeout(timeout if timeout is not None else env.get(ENV_TIMEOUT)),
    )
