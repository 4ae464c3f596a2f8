"""Schema command - print the component catalog"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from uicomposercli.lib.errors import handle_error

from .utils import get_composer, get_settings


def schema_command(
    catalog: Optional[Path] = None,
    config_file: Optional[Path] = None,
) -> None:
    """Print the catalog exactly as the host receives it."""
    try:
        settings = get_settings(config_file)
        composer = get_composer(settings, catalog)
    except Exception as e:
        handle_error(e)

    typer.echo(json.dumps(composer.serialize_catalog().to_wire(), indent=2))
