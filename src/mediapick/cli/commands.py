"""CLI commands for mediapick.

- ``pick-folder`` / ``pick-file``: run a navigator and print the chosen path.
- ``remux``: pick (or take) a folder, match subtitles to its videos and run
  mkvmerge for each video.

All output is routed through a Rich Console obtained from
:class:`~mediapick.cli.console.ConsoleManager`; the pickers read their
responses from standard input.
"""

import shlex
import shutil
from enum import Enum
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from mediapick.cli import app
from mediapick.cli.console import ConsoleManager
from mediapick.core.mux import build_mkvmerge_args, output_path, run_mkvmerge
from mediapick.core.scanner import find_media
from mediapick.core.subtitles import attach_subtitles
from mediapick.models.media import MuxStatus, Video
from mediapick.picker.navigator import pick_file, pick_folder
from mediapick.utils.config import resolve_setting
from mediapick.utils.debug import debug, warn


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1
    WARNING = 2


START = Annotated[
    Optional[str],
    typer.Argument(
        help="Folder to start browsing in (default: home; 'Downloads' for the "
        "Downloads folder)",
    ),
]

BATCH_SIZE = Annotated[
    Optional[int],
    typer.Option(
        "--batch-size",
        "-b",
        min=1,
        max=100,
        help="Entries listed per screen (default: picker.batch_size or 40)",
    ),
]

SHOW_HIDDEN = Annotated[
    Optional[bool],
    typer.Option(
        "--show-hidden/--hide-hidden",
        help="List hidden entries from the start (toggle with H while browsing)",
    ),
]

REMUX_FOLDER = Annotated[
    Optional[Path],
    typer.Argument(
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
        resolve_path=True,
        help="Folder holding the videos; picked interactively when omitted",
    ),
]

LANGUAGE = Annotated[
    Optional[str],
    typer.Option(
        "--language",
        "-l",
        help="Spoken language code for video/audio tracks (default: mux.language)",
    ),
]

MKVMERGE = Annotated[
    Optional[str],
    typer.Option(
        "--mkvmerge",
        help="mkvmerge executable (default: mux.mkvmerge_path)",
    ),
]

DRY_RUN = Annotated[
    bool,
    typer.Option(
        "--dry-run",
        help="Print the mkvmerge commands without running them",
    ),
]


def _print_path(console: Console, path: Path) -> None:
    console.print(str(path), markup=False, highlight=False, soft_wrap=True)


def _report_error(console: Console, e: Exception) -> None:
    console.print(f"[red]Error: {escape(str(e))}[/red]")


def _report_pick(console: Console, picked: Optional[Path], what: str) -> None:
    if picked is None:
        console.print(f"\n[yellow]No {what} selected.[/yellow]")
        raise typer.Exit(ExitCode.ERROR)
    console.print()
    _print_path(console, picked)


@app.command("pick-folder")
def pick_folder_command(
    start: START = None,
    batch_size: BATCH_SIZE = None,
    show_hidden: SHOW_HIDDEN = None,
) -> None:
    """Browse folders and print the one selected with SPACE."""
    with ConsoleManager() as console:
        try:
            picked = pick_folder(
                start, console=console, batch_size=batch_size, show_hidden=show_hidden
            )
        except ValueError as e:
            _report_error(console, e)
            raise typer.Exit(ExitCode.ERROR)
        _report_pick(console, picked, "folder")


@app.command("pick-file")
def pick_file_command(
    start: START = None,
    batch_size: BATCH_SIZE = None,
    show_hidden: SHOW_HIDDEN = None,
) -> None:
    """Browse folders and print the file selected by number."""
    with ConsoleManager() as console:
        try:
            picked = pick_file(
                start, console=console, batch_size=batch_size, show_hidden=show_hidden
            )
        except ValueError as e:
            _report_error(console, e)
            raise typer.Exit(ExitCode.ERROR)
        _report_pick(console, picked, "file")


def _warn_assumed_languages(videos: List[Video]) -> None:
    for video in videos:
        for subtitle in video.subtitles:
            if subtitle.english_assumed:
                warn(f"No language in {subtitle.path.name}, tagging it as English")


def _remux_videos(
    console: Console,
    videos: List[Video],
    language: str,
    mkvmerge: str,
    dry_run: bool,
) -> ExitCode:
    """Remux each video, returning the worst outcome as an exit code."""
    result = ExitCode.SUCCESS
    for video in videos:
        args = build_mkvmerge_args(video, language)
        console.print(
            f"[bold]{escape(video.title)}[/bold] ({len(video.subtitles)} subtitle(s))",
            highlight=False,
        )
        if dry_run:
            console.print(shlex.join([mkvmerge, *args]), markup=False, soft_wrap=True)
            continue
        output_path(video).parent.mkdir(parents=True, exist_ok=True)
        with console.status(f"[cyan]Muxing {escape(video.title)}...", spinner="dots"):
            status = run_mkvmerge(args, executable=mkvmerge)
        if status is MuxStatus.SUCCESS:
            console.print("[green]MUXing successful[/green]")
        elif status is MuxStatus.WARNING:
            console.print("[yellow]MUXer completed with WARNING(S)[/yellow]")
            if result is ExitCode.SUCCESS:
                result = ExitCode.WARNING
        else:
            console.print("[red]ERROR - MUXing aborted[/red]")
            result = ExitCode.ERROR
    return result


@app.command()
def remux(
    folder: REMUX_FOLDER = None,
    language: LANGUAGE = None,
    mkvmerge: MKVMERGE = None,
    dry_run: DRY_RUN = False,
) -> None:
    """Remux every video in a folder together with its matching subtitles."""
    language = resolve_setting("mux.language", default="eng", cli_value=language)
    mkvmerge = resolve_setting(
        "mux.mkvmerge_path", default="mkvmerge", cli_value=mkvmerge
    )
    with ConsoleManager() as console:
        if folder is None:
            try:
                folder = pick_folder(console=console)
            except ValueError as e:
                _report_error(console, e)
                raise typer.Exit(ExitCode.ERROR)
            if folder is None:
                console.print("\n[yellow]No folder selected.[/yellow]")
                raise typer.Exit(ExitCode.ERROR)
        if not dry_run and shutil.which(mkvmerge) is None:
            console.print(f"[red]Error: mkvmerge not found: {escape(mkvmerge)}[/red]")
            raise typer.Exit(ExitCode.ERROR)

        try:
            videos, subtitles = find_media(folder)
            if not videos:
                console.print("[yellow]No video files found.[/yellow]")
                raise typer.Exit(ExitCode.SUCCESS)
            attach_subtitles(videos, subtitles)
            _warn_assumed_languages(videos)
            debug(f"Remuxing {len(videos)} video(s) from {folder}")
            result = _remux_videos(console, videos, language, mkvmerge, dry_run)
        except typer.Exit:
            raise
        except (FileNotFoundError, PermissionError, ValueError) as e:
            _report_error(console, e)
            raise typer.Exit(ExitCode.ERROR)
        except Exception as e:
            console.print(f"[red]Error: An unexpected error occurred: {str(e)}[/red]")
            console.print_exception()
            raise typer.Exit(ExitCode.ERROR)
    if result != ExitCode.SUCCESS:
        raise typer.Exit(result)


def main() -> None:
    """Main entry point for the CLI."""
    app()
