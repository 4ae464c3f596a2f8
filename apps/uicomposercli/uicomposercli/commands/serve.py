"""Serve command - talk to a host over stdin/stdout"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer

from uicomposer import Display
from uicomposer.protocol import ComposerSession, open_stdio_channel
from uicomposercli.lib.errors import handle_error

from .utils import get_composer, get_settings

log = logging.getLogger(__name__)


def serve_command(
    catalog: Optional[Path] = None,
    config_file: Optional[Path] = None,
    output: Optional[Path] = None,
) -> None:
    """Send the catalog, then render each command read from stdin.

    One JSON message per line in each direction. Runs until stdin closes.
    After every render the display is shown: as HTML rewritten into
    ``output`` when given, otherwise as one JSON node line on stderr.
    """
    try:
        settings = get_settings(config_file)
        composer = get_composer(settings, catalog)
    except Exception as e:
        handle_error(e)

    def show(display: Display) -> None:
        if output is not None:
            output.write_text(display.to_html())
            return
        node = display.content
        typer.echo(json.dumps(node.to_dict() if node else None), err=True)

    display = Display(loading_text=settings.loading_text, on_update=show)
    if output is not None:
        output.write_text(display.to_html())

    async def _serve() -> None:
        channel = await open_stdio_channel()
        await ComposerSession(composer, channel, display).run()

    asyncio.run(_serve())
    log.info(f"Session ended after {display.updates} renders")
