"""Render command - render a component description file"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from uicomposer import ComponentDescription, Display
from uicomposercli.lib.errors import exit_with_error, handle_error

from .utils import get_composer, get_settings

log = logging.getLogger(__name__)


def render_command(
    description_file: Path,
    catalog: Optional[Path] = None,
    config_file: Optional[Path] = None,
    html: bool = False,
) -> None:
    """Render a description and print the node tree (JSON) or HTML."""
    if not description_file.exists():
        exit_with_error(f"File not found: {description_file}")

    try:
        description = ComponentDescription.model_validate_json(
            description_file.read_text()
        )
    except ValidationError as e:
        exit_with_error(f"Invalid component description: {e}")

    try:
        settings = get_settings(config_file)
        composer = get_composer(settings, catalog)
    except Exception as e:
        handle_error(e)

    node = composer.render(description)
    if node is None:
        log.warning(f"Root type '{description.type}' is not registered")

    if html:
        display = Display(loading_text=settings.loading_text)
        display.update(node)
        typer.echo(display.to_html())
    else:
        typer.echo(json.dumps(node.to_dict() if node else None, indent=2))
