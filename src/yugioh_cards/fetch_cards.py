#!/usr/bin/env python3
"""Fetch the full card catalog from YGOPRODeck and save it locally.

The saved file is overwritten on every run.
"""

import logging
from typing import Callable

import requests

from yugioh_cards.api_utils import BASE_URL, create_session, fetch_card_catalog
from yugioh_cards.data_utils import save_json_data
from yugioh_cards.paths import ApplicationPaths

log = logging.getLogger(__name__)


def fetch_all_cards(
    paths: ApplicationPaths,
    session_factory: Callable[[], requests.Session] = create_session,
) -> bool:
    """Download the card catalog and write it to the all-cards file.

    Errors are logged to the fetch log and never raised.

    Args:
        paths: Application paths for this run
        session_factory: Creates the HTTP session used for the request

    Returns:
        True if the catalog was written, False otherwise

    """
    fetch_log = {"log_file": paths.fetch_log_file}
    output_file = paths.all_cards_file

    log.info("Url: %s", BASE_URL, extra=fetch_log)

    persisted = False
    session = session_factory()
    try:
        catalog = fetch_card_catalog(session, BASE_URL)

        log.info("Starting to write card data to file: %s", output_file, extra=fetch_log)
        save_json_data(
            catalog,
            output_file,
            "card catalog",
            indent=4,
            log_file=paths.fetch_log_file,
        )
        log.info("Successfully wrote card data to file: %s", output_file, extra=fetch_log)
        persisted = True

    except Exception as e:
        log.error("Failed to fetch card data: %s", e, extra=fetch_log)

    finally:
        try:
            session.close()
        except Exception as e:
            log.error("Failed to close HTTP session: %s", e, extra=fetch_log)

    return persisted
