#!/usr/bin/env python3
"""Startup check for the directories a run needs."""

import logging

from yugioh_cards.file_utils import check_directory_exists, delete_regular_files
from yugioh_cards.paths import ApplicationPaths

log = logging.getLogger(__name__)


def check_environment(paths: ApplicationPaths) -> bool:
    """Prepare the log and output directories for a run.

    The log directory is created if missing and emptied of the previous run's
    log files. The output directory is created if missing.

    Args:
        paths: Application paths for this run

    Returns:
        True if both directories are usable, False otherwise

    """
    if not check_directory_exists(paths.log_dir):
        # The log file itself is unusable, so report on the console.
        log.error("Log directory does not exist and could not be created.")
        return False

    delete_regular_files(paths.log_dir, log_file=paths.main_log_file)

    main_log = {"log_file": paths.main_log_file}
    if not check_directory_exists(paths.output_dir):
        log.error(
            "Output directory does not exist and could not be created.", extra=main_log
        )
        return False

    log.info("Output directory exists or was successfully created.", extra=main_log)
    return True
