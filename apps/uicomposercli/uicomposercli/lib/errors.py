"""Error reporting for uicomposercli commands."""

import logging
import sys
from typing import NoReturn

import typer

from uicomposer.exceptions import ComposerError

log = logging.getLogger(__name__)


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Report an error and exit with its status.

    ComposerErrors carry their own ``exit_code`` (catalog and settings
    problems exit 2). Anything else is a bug and exits 1 with a traceback
    in the debug log.
    """
    if isinstance(error, ComposerError):
        exit_with_error(str(error), error.exit_code)
    log.debug("Unexpected error", exc_info=error)
    exit_with_error(f"Unexpected {type(error).__name__}: {error}")
