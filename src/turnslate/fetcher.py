"""Bundle retrieval from the translation service.

One authenticated POST per run. Failures are fatal and never retried.

Python 3.13+. Requires requests.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import requests

from turnslate.bundle import Bundle
from turnslate.constants import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT
from turnslate.errors import FetchError
from turnslate.types import ProjectId

__all__ = ["HttpClient", "fetch_bundle"]

logger = logging.getLogger(__name__)


class HttpClient(Protocol):
    """Anything with a requests-compatible post() (requests module or Session)."""

    def post(self, url: str, **kwargs: Any) -> requests.Response: ...


def fetch_bundle(
    project_id: ProjectId,
    token: str,
    *,
    endpoint: str = DEFAULT_ENDPOINT,
    timeout: float = DEFAULT_TIMEOUT,
    client: HttpClient | None = None,
) -> Bundle:
    """Fetch the translation bundle of a project.

    Args:
        project_id: Translation service project identifier
        token: Access token for the project
        endpoint: Service URL
        timeout: Request timeout in seconds
        client: HTTP client; defaults to the requests module

    Returns:
        Deserialized Bundle

    Raises:
        FetchError: On transport failure, non-2xx status, or a body that is
                    not a bundle
    """
    http = client if client is not None else requests
    logger.info("Fetching bundle for project %s from %s", project_id, endpoint)

    try:
        response = http.post(
            endpoint,
            json={"projectId": project_id, "token": token},
            timeout=timeout,
        )
    except requests.RequestException as e:
        msg = f"Failed to fetch data from the server: {e}"
        raise FetchError(msg) from e

    logger.debug("Bundle response status=%s", response.status_code)
    if not 200 <= response.status_code < 300:
        msg = f"Failed to fetch data from the server: HTTP {response.status_code}"
        raise FetchError(msg)

    try:
        payload = response.json()
    except ValueError as e:
        # requests' JSONDecodeError derives from ValueError
        msg = f"Failed to parse bundle JSON: {e}"
        raise FetchError(msg) from e

    bundle = Bundle.from_payload(payload)
    logger.info(
        "Fetched %d locales (main: %s)", bundle.locale_count, bundle.main
    )
    return bundle
