"""HTTP client for the sheet-backed webhook."""

from __future__ import annotations

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 25


def webhook_headers() -> dict[str, str]:
    return {"Accept": "application/json"}


def fetch_sheets(endpoint: str, timeout: float = REQUEST_TIMEOUT) -> Any:
    """GET the raw nested sheet payload.

    Raises ``requests.RequestException`` on transport or HTTP errors and
    ``ValueError`` when the body is not JSON. No retry is attempted.
    """

    logger.info("Fetching sheets from %s", endpoint)
    response = requests.get(endpoint, headers=webhook_headers(), timeout=timeout)
    response.raise_for_status()
    payload = response.json()

    if isinstance(payload, list):
        logger.debug("Received %d sheets", len(payload))
    return payload
