"""HTTP client utilities for the stats endpoint.

Separated from parsing so the transport can be swapped (e.g. in tests via
``httpx.MockTransport``). A single attempt is made: a failed load is
terminal for the session.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx

from config import settings
from parsing.errors import PayloadFormatError, StatsTransportError

logger = logging.getLogger(__name__)


def fetch_json(
    url: str | None = None,
    *,
    client: Optional[httpx.Client] = None,
    timeout: float | None = None,
    user_agent: Optional[str] = None,
) -> Any:
    url = url or settings.STATS_URL
    close_client = False
    if client is None:
        client = httpx.Client(
            headers={"User-Agent": user_agent or settings.DEFAULT_USER_AGENT},
            timeout=timeout or settings.DEFAULT_TIMEOUT,
        )
        close_client = True
    try:
        logger.debug("GET %s", url)
        try:
            resp = client.get(url)
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise StatsTransportError(f"Failed to fetch {url}: {e}", context={"url": url}) from e
        try:
            return resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise PayloadFormatError(
                f"Response from {url} is not valid JSON: {e}", context={"url": url}
            ) from e
    finally:
        if close_client:
            client.close()


__all__ = ["fetch_json"]
