#!/usr/bin/env python3
"""Common data access utilities for the yugioh_cards library."""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

log = logging.getLogger(__name__)


def save_json_data(
    data: Dict,
    output_file: Path,
    description: str = "data",
    indent: int = 4,
    log_file: Optional[Path] = None,
) -> None:
    """Save data to a JSON file, overwriting any existing file.

    Args:
        data: Data to save
        output_file: Path to output file
        description: Human-readable description for logging
        indent: Spaces per indentation level
        log_file: Where to record a failure (default: console)

    """
    try:
        # Ensure output directory exists
        output_file.parent.mkdir(parents=True, exist_ok=True)

        text = json.dumps(data, indent=indent, ensure_ascii=False)
        output_file.write_text(text, encoding="utf-8")

    except Exception as e:
        log.error(
            "Error saving %s to %s: %s",
            description,
            output_file,
            e,
            extra={"log_file": log_file},
        )
        raise

