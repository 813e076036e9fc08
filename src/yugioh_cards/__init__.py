"""Yu-Gi-Oh Cards: fetch the YGOPRODeck card catalog and keep a local copy.

This library resolves the application's resource directories, prepares them
for a run, downloads the full card catalog and writes it out as formatted
JSON, logging each step.
"""

from .api_utils import build_archetype_url, create_session, fetch_card_catalog
from .data_utils import save_json_data
from .environment import check_environment
from .fetch_cards import fetch_all_cards
from .file_utils import check_directory_exists, check_file_exists
from .logging_utils import log_message, setup_logging
from .paths import (
    ApplicationPaths,
    ApplicationRootError,
    PathResolutionError,
    build_paths,
    resolve_application_root,
    safe_join,
)

__version__ = "0.1.0"

__all__ = [
    # Paths
    "ApplicationPaths",
    "ApplicationRootError",
    "PathResolutionError",
    "build_paths",
    "resolve_application_root",
    "safe_join",
    # Logging
    "log_message",
    "setup_logging",
    # Environment
    "check_directory_exists",
    "check_environment",
    "check_file_exists",
    # API and data utilities
    "build_archetype_url",
    "create_session",
    "fetch_card_catalog",
    "fetch_all_cards",
    "save_json_data",
]
