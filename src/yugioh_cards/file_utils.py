#!/usr/bin/env python3
"""Common file and directory utilities."""

import logging
from pathlib import Path
from typing import List, Optional, Union

log = logging.getLogger(__name__)


def check_file_exists(file_path: Union[str, Path]) -> bool:
    """Make sure a file exists, creating it and its parents if needed.

    Args:
        file_path: File to check

    Returns:
        True if the file exists or was created, False otherwise

    """
    path = Path(file_path)
    if path.exists():
        return True

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=False)
    except OSError as e:
        log.error("Failed to create file %s: %s", path, e)
        return False

    log.info("File created: %s", path)
    return True


def check_directory_exists(dir_path: Union[str, Path]) -> bool:
    """Make sure a directory exists, creating it and its parents if needed.

    A path that exists but is not a directory is left alone and reported.

    Args:
        dir_path: Directory to check

    Returns:
        True if the directory exists or was created, False otherwise

    """
    path = Path(dir_path)
    if path.is_dir():
        return True
    if path.exists():
        log.error("Path exists but is not a directory: %s", path)
        return False

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        log.error("Failed to create directory %s: %s", path, e)
        return False

    log.info("Directory created: %s", path)
    return True


def delete_regular_files(
    directory: Path, log_file: Optional[Path] = None
) -> List[Path]:
    """Delete the regular files directly inside a directory.

    Subdirectories are not descended into. Failures are reported on the
    console and do not stop the remaining deletions.

    Args:
        directory: Directory to clear
        log_file: Where to record each successful deletion

    Returns:
        The files that were deleted

    """
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        log.error("Failed to list directory contents for cleanup %s: %s", directory, e)
        return []

    deleted = []
    for entry in entries:
        if not entry.is_file():
            continue
        try:
            entry.unlink()
        except OSError as e:
            log.error("Failed to delete existing file %s: %s", entry, e)
            continue
        deleted.append(entry)
        log.info("Deleted existing log file: %s", entry, extra={"log_file": log_file})

    return deleted
