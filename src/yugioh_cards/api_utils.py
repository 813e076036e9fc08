#!/usr/bin/env python3
"""Common API utilities for YGOPRODeck API access."""

import logging
from typing import Dict

import requests

log = logging.getLogger(__name__)

BASE_URL = "https://db.ygoprodeck.com/api/v7/cardinfo.php"
USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/135.0.0.0 Safari/537.36 Edg/135.0.0.0"
)

# Seconds
CONNECT_TIMEOUT = 5.0
READ_TIMEOUT = 5.0


def build_archetype_url(archetype: str) -> str:
    """Build the card info URL filtered by archetype.

    The archetype is appended as-is; callers must URL-encode it themselves.
    """
    return f"{BASE_URL}?archetype={archetype}"


def create_session() -> requests.Session:
    """Create an HTTP session identifying itself with the fixed user agent."""
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def fetch_card_catalog(session: requests.Session, url: str = BASE_URL) -> Dict:
    """Fetch the card catalog document from the API.

    A non-2xx status is an error even when the body is a JSON object, so an
    API error document is never saved as the catalog.

    Args:
        session: Session to issue the request with
        url: Endpoint to fetch (default: all cards)

    Returns:
        The parsed JSON object, uninterpreted

    Raises:
        requests.RequestException: On connection errors, timeouts or HTTP errors
        ValueError: If the body is not a JSON object

    """
    response = session.get(
        url, timeout=(CONNECT_TIMEOUT, READ_TIMEOUT), verify=True
    )
    try:
        response.raise_for_status()
        catalog = response.json()
    finally:
        response.close()

    if not isinstance(catalog, dict):
        raise ValueError(
            f"Expected a JSON object from {url}, got {type(catalog).__name__}"
        )

    log.debug("Fetched card catalog with %d top-level keys", len(catalog))
    return catalog
