"""Command-line interface for mediapick.

This package provides the Typer app and global console for all CLI commands and
user-facing output.

- app: The Typer application object; commands are registered in
  :mod:`mediapick.cli.commands`.
- console: Rich Console instance for styled output outside a ConsoleManager.
"""

import os

import typer
from rich.console import Console
from rich.traceback import install

# Install rich traceback handler for all CLI commands
install(show_locals=True)

# Load the ``console`` submodule first so that binding it as a package
# attribute does not later shadow the global Console instance below.
from mediapick.cli import console as _console_module  # noqa: E402,F401

console = Console()

app = typer.Typer(
    name="mediapick",
    help="Pick folders and files interactively and remux videos with their subtitles.",
    add_completion=True,
)


@app.callback()
def callback(
    ctx: typer.Context,  # noqa: D401 – Typer requires ctx param first
    no_rich: bool = typer.Option(
        False,
        "--no-rich",
        help=(
            "Disable Rich coloured output and spinners. "
            "Can also be set with the MEDIAPICK_NO_RICH environment variable."
        ),
    ),
) -> None:
    """Top-level CLI callback adding global options.

    ``--no-rich`` sets ``MEDIAPICK_NO_RICH`` so that
    :class:`~mediapick.cli.console.ConsoleManager` behaves the same whether the
    flag is passed or the variable is set externally.
    """
    if no_rich:
        os.environ["MEDIAPICK_NO_RICH"] = "1"


@app.command()
def version() -> None:
    """Show the version of mediapick."""
    from mediapick.__about__ import __version__

    console.print(f"MediaPick version: [bold]{__version__}[/bold]")
