"""uicomposer CLI Main Entry Point

Usage:
    uicomposer schema                      # Print the component catalog
    uicomposer render ui.json              # Render a description to a node tree
    uicomposer render ui.json --html       # ...or to HTML
    uicomposer serve                       # Host session over stdin/stdout
    uicomposer serve -o display.html       # ...keeping the display in a file
    uicomposer <command> -c catalog.yaml   # Use a custom catalog
    uicomposer --version                   # Show version
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ._version import __version__
from .commands import render_command, schema_command, serve_command
from .commands.utils import setup_logging

typer_app = typer.Typer(
    help="Declarative UI composition engine.",
    no_args_is_help=True,
)

CatalogOption = typer.Option(
    None, "-c", "--catalog", help="Catalog YAML (defaults to the built-in catalog)."
)
ConfigOption = typer.Option(
    None, "-f", "--config", help="Path to uicomposer.yaml."
)
VerboseOption = typer.Option(False, "-v", "--verbose", help="Verbose logging.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"uicomposer {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Declarative UI composition engine."""


@typer_app.command("schema")
def schema(
    catalog: Optional[Path] = CatalogOption,
    config_file: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the component catalog as JSON."""
    setup_logging(verbose)
    schema_command(catalog=catalog, config_file=config_file)


@typer_app.command("render")
def render(
    description_file: Path = typer.Argument(..., help="Component description JSON."),
    catalog: Optional[Path] = CatalogOption,
    config_file: Optional[Path] = ConfigOption,
    html: bool = typer.Option(False, "--html", help="Print HTML instead of JSON."),
    verbose: bool = VerboseOption,
) -> None:
    """Render a component description file."""
    setup_logging(verbose)
    render_command(
        description_file, catalog=catalog, config_file=config_file, html=html
    )


@typer_app.command("serve")
def serve(
    catalog: Optional[Path] = CatalogOption,
    config_file: Optional[Path] = ConfigOption,
    output: Optional[Path] = typer.Option(
        None,
        "-o",
        "--output",
        help="Rewrite this file with the display HTML after every render.",
    ),
    verbose: bool = VerboseOption,
) -> None:
    """Exchange messages with a host over stdin/stdout (JSON lines)."""
    setup_logging(verbose)
    serve_command(catalog=catalog, config_file=config_file, output=output)


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
