"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from uicomposer import (
    Composer,
    ComposerSettings,
    build_composer,
    default_catalog,
    find_settings_file,
    load_catalog,
)

# stdout belongs to command output (and to the host in serve mode)
console = Console(stderr=True)

log = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the uicomposer CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - catalog loading, renders
    - Debug (UICOMPOSER_DEBUG=1): DEBUG level - dropped nodes and messages
    """
    if os.environ.get("UICOMPOSER_DEBUG"):
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=bool(os.environ.get("UICOMPOSER_DEBUG")),
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    for name in ("uicomposer", "uicomposercli"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers = [handler]
        logger.propagate = False


def get_settings(config_file: Optional[Path] = None) -> ComposerSettings:
    """Load settings from the given file or the nearest uicomposer.yaml."""
    path = config_file or find_settings_file()
    if path is None:
        return ComposerSettings()
    log.debug(f"Using settings file {path}")
    return ComposerSettings.load(path)


def get_composer(
    settings: ComposerSettings, catalog: Optional[Path] = None
) -> Composer:
    """Build the composer from --catalog, the settings catalog, or the default."""
    catalog_path = catalog or settings.catalog
    config = load_catalog(catalog_path) if catalog_path else default_catalog()
    return build_composer(config, max_depth=settings.max_depth)
