#!/usr/bin/env python3
"""Command-line entry point: check the environment, then fetch all cards."""

import logging
import sys

from yugioh_cards.environment import check_environment
from yugioh_cards.fetch_cards import fetch_all_cards
from yugioh_cards.logging_utils import setup_logging
from yugioh_cards.paths import PathResolutionError, build_paths

log = logging.getLogger(__name__)


def main() -> None:
    """Main CLI entry point."""
    print("Yu-Gi-Oh Cards Application Started!")

    try:
        paths = build_paths()
    except PathResolutionError as e:
        log.error("Error: %s", e)
        sys.exit(1)

    if not check_environment(paths):
        print("Environment check failed!")
        return

    print("Environment check passed!")
    fetch_all_cards(paths)


def run() -> None:
    """Set up logging and run main."""
    setup_logging()
    main()


if __name__ == "__main__":
    run()
