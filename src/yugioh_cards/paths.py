#!/usr/bin/env python3
"""Application root resolution and the resource paths derived from it."""

import logging
import os
import sys
import zipimport
from dataclasses import dataclass
from importlib.machinery import (
    ExtensionFileLoader,
    ModuleSpec,
    SourceFileLoader,
    SourcelessFileLoader,
)
from pathlib import Path
from typing import Optional, Union

log = logging.getLogger(__name__)

PACKAGE_NAME = __name__.partition(".")[0]

RESOURCE_DIR_NAME = "resource"
OUTPUT_DIR_NAME = "output"
LOG_DIR_NAME = "log"
ALL_CARDS_FILE_NAME = "allcards.json"
MAIN_LOG_FILE_NAME = "main.log"
FETCH_LOG_FILE_NAME = "getAllCards.log"

FILE_LOADERS = (SourceFileLoader, SourcelessFileLoader, ExtensionFileLoader)


class PathResolutionError(Exception):
    """A required application path could not be derived."""


class ApplicationRootError(PathResolutionError):
    """The application root directory could not be determined."""


@dataclass(frozen=True)
class ApplicationPaths:
    """Filesystem locations used by one run, all beneath ``root``."""

    root: Path
    resource_dir: Path
    output_dir: Path
    log_dir: Path
    all_cards_file: Path
    main_log_file: Path
    fetch_log_file: Path


def resolve_application_root(spec: Optional[ModuleSpec] = None) -> Path:
    """Find the directory the application's code is running from.

    A frozen executable or a zip archive resolves to the directory holding
    it. A loose package resolves to the import root that contains the package
    directory, and a single-file module to the directory holding the file.

    When the code location is unknown the current working directory is used
    instead. That fallback only holds when the process was started from the
    application directory and can point anywhere otherwise.

    Args:
        spec: Module spec to resolve from; defaults to this package's spec

    Returns:
        Absolute path of the application root

    Raises:
        ApplicationRootError: If the code was loaded by an unsupported loader

    """
    if spec is None:
        if getattr(sys, "frozen", False):
            return Path(sys.executable).resolve().parent
        spec = getattr(sys.modules.get(PACKAGE_NAME), "__spec__", None)

    if spec is None or not spec.origin:
        log.warning(
            "Could not determine the code location. Falling back to the current "
            "working directory, this might be inaccurate."
        )
        return Path(os.getcwd()).resolve()

    loader = spec.loader
    if isinstance(loader, zipimport.zipimporter):
        return Path(loader.archive).resolve().parent

    if isinstance(loader, FILE_LOADERS):
        location = Path(spec.origin).resolve()
        if spec.submodule_search_locations is not None:
            location = location.parent.parent
        return location.parent if location.is_file() else location

    raise ApplicationRootError(
        f"Unsupported code location for {spec.name}: {spec.origin}"
    )


def safe_join(base: Union[str, Path], child: str) -> Optional[Path]:
    """Join a single path segment onto a base directory.

    Args:
        base: Base directory
        child: One path segment, without separators

    Returns:
        The joined, normalized path, or None if the segment is unsafe

    """
    if base is None or child is None or not str(base).strip() or not child.strip():
        log.error("Base path and sub path cannot be empty")
        return None

    if "/" in child or "\\" in child or child in (".", ".."):
        log.error(
            "Sub path cannot contain path separators or be '.' or '..'. Found: %s",
            child,
        )
        return None

    try:
        base_path = Path(os.path.normpath(os.path.abspath(base)))
        resolved = Path(os.path.normpath(base_path / child))
    except (TypeError, ValueError) as e:
        log.error("Error creating path from %s and %s: %s", base, child, e)
        return None

    if base_path not in resolved.parents:
        log.error(
            "Resolved path escapes the base directory. Base: %s, Resolved: %s",
            base_path,
            resolved,
        )
        return None

    return resolved


def join_or_raise(base: Path, child: str) -> Path:
    """Join like ``safe_join`` but raise instead of returning None."""
    path = safe_join(base, child)
    if path is None:
        raise PathResolutionError(f"Could not derive '{child}' under {base}")
    return path


def build_paths(root: Optional[Union[str, Path]] = None) -> ApplicationPaths:
    """Derive every application path from the root directory.

    Args:
        root: Application root; resolved from the code location when omitted

    Returns:
        The path bundle for this run

    Raises:
        PathResolutionError: If the root or any derived path is unusable

    """
    root_path = Path(root) if root is not None else resolve_application_root()
    root_path = Path(os.path.normpath(os.path.abspath(root_path)))

    resource_dir = join_or_raise(root_path, RESOURCE_DIR_NAME)
    output_dir = join_or_raise(resource_dir, OUTPUT_DIR_NAME)
    log_dir = join_or_raise(resource_dir, LOG_DIR_NAME)

    return ApplicationPaths(
        root=root_path,
        resource_dir=resource_dir,
        output_dir=output_dir,
        log_dir=log_dir,
        all_cards_file=join_or_raise(output_dir, ALL_CARDS_FILE_NAME),
        main_log_file=join_or_raise(log_dir, MAIN_LOG_FILE_NAME),
        fetch_log_file=join_or_raise(log_dir, FETCH_LOG_FILE_NAME),
    )
