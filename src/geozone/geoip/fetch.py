"""
Blocking HTTP retrieval of GeoIP service responses.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from ..settings import settings

logger = logging.getLogger(__name__)


def fetch_url(url: str, timeout: Optional[float] = None) -> bytes:
    """
    Fetch the body of ``url`` with a single GET request.

    No headers are added and nothing is retried. Transport failures and
    non-success statuses are logged and produce an empty body, so callers
    see "no data" instead of an exception.

    Args:
        url: Absolute endpoint URL
        timeout: Request timeout in seconds, defaults to settings.request_timeout

    Returns:
        Response body, or b"" on failure
    """
    if timeout is None:
        timeout = settings.request_timeout

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning("GeoIP request to '%s' failed: %s", url, e)
        return b""

    logger.debug("Fetched %d bytes from %s", len(response.content), url)
    return response.content
