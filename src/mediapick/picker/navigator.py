"""Folder and file navigators built on :class:`ItemPicker`.

A navigator lists the current folder, lets the user drill into sub-folders,
go up with ``..``, toggle hidden entries with ``H`` and finally pick a folder
(SPACE selects the folder being listed) or a file. At a filesystem root ``..``
asks for a drive letter instead.

Both variants share one state machine (:class:`Navigator`); they differ only
in their :class:`NavigatorMode`: what is listed, how entries are rendered and
which free-text responses are accepted.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Union

from rich.console import Console

from mediapick.fs.listing import (
    FileSystem,
    LocalFileSystem,
    format_volumes,
    resolve_start_dir,
)
from mediapick.models.entry import FsEntry
from mediapick.picker.engine import MAX_BATCH_SIZE, ItemPicker, selected_index
from mediapick.utils.config import resolve_setting
from mediapick.utils.debug import debug

DEFAULT_BATCH_SIZE = 40

SELECT_CURRENT = " "
PARENT = ".."
TOGGLE_HIDDEN = "H"
HIDDEN_TAG = "*H"

DRIVE_PATTERN = re.compile(r"([A-Za-z])(:|:\\)?")

FOLDER_HELP = (
    "<Enter> to continue if listing paused; <Space> to select current folder;\n"
    "(n)n to drill down to nn'th folder; .. for parent folder; "
    "H to show/hide Hidden folders; ? for Help\n\nPlease enter your response: "
)
FILE_HELP = (
    "<Enter> to continue if listing paused; (n)n to select file or folder;\n"
    " .. for parent folder; H to show/hide Hidden items; ? for Help\n\n"
    "Please enter your response: "
)


class NavigatorError(RuntimeError):
    """A response reached the navigator that its own validator should reject."""


def _hidden_tag(entry: FsEntry) -> str:
    return HIDDEN_TAG if entry.hidden else ""


def render_folder(entry: FsEntry) -> str:
    return f"{entry.name} {_hidden_tag(entry)}"


def render_file_or_folder(entry: FsEntry) -> str:
    if not entry.is_dir:
        return entry.name
    return f"[{entry.name}] {_hidden_tag(entry)}"


@dataclass(frozen=True)
class NavigatorMode:
    """What a navigator lists and which responses it understands."""

    name: str
    include_files: bool
    render: Callable[[FsEntry], str]
    help_message: str
    can_select_folder: bool

    def accepts(self, response: str) -> bool:
        if self.can_select_folder and response == SELECT_CURRENT:
            return True
        return response.upper() == TOGGLE_HIDDEN or response == PARENT


FOLDER_MODE = NavigatorMode(
    name="folder",
    include_files=False,
    render=render_folder,
    help_message=FOLDER_HELP,
    can_select_folder=True,
)

FILE_MODE = NavigatorMode(
    name="file",
    include_files=True,
    render=render_file_or_folder,
    help_message=FILE_HELP,
    can_select_folder=False,
)


class Navigator:
    """Browse the filesystem until a folder/file is picked or input runs out.

    Args:
        mode: ``FOLDER_MODE`` or ``FILE_MODE``.
        initial_path: First folder listed; see :func:`resolve_start_dir`.
        filesystem: Enumeration backend (defaults to the local filesystem).
        console: Rich console for all output.
        read_line: Line reader shared with the picker; raises EOFError at end
            of input.
        batch_size: Entries per screen (``picker.batch_size`` setting).
        show_hidden: Initial hidden-entry visibility (``picker.show_hidden``).

    Raises:
        ValueError: If the resolved batch size is outside 1-100.
    """

    def __init__(
        self,
        mode: NavigatorMode,
        initial_path: Union[str, Path, None] = None,
        *,
        filesystem: Optional[FileSystem] = None,
        console: Optional[Console] = None,
        read_line: Optional[Callable[[], str]] = None,
        batch_size: Optional[int] = None,
        show_hidden: Optional[bool] = None,
    ) -> None:
        self.mode = mode
        self.filesystem: FileSystem = filesystem or LocalFileSystem()
        self.console = console or Console()
        self.read_line = read_line or self.console.input
        self.batch_size = resolve_setting(
            "picker.batch_size", default=DEFAULT_BATCH_SIZE, cli_value=batch_size
        )
        if not 1 <= self.batch_size <= MAX_BATCH_SIZE:
            raise ValueError(
                f"picker.batch_size must be between 1 and {MAX_BATCH_SIZE}, "
                f"got {self.batch_size}"
            )
        self.show_hidden = resolve_setting(
            "picker.show_hidden", default=False, cli_value=show_hidden
        )
        self.current_folder = resolve_start_dir(
            initial_path, is_dir=self.filesystem.is_dir
        )
        self.picker: ItemPicker[FsEntry] = ItemPicker(
            render=mode.render,
            accepts=mode.accepts,
            console=self.console,
            read_line=self.read_line,
            help_message=mode.help_message,
        )

    @property
    def heading(self) -> str:
        suffix = f" (showing Hidden {HIDDEN_TAG})" if self.show_hidden else ""
        return f"{self.current_folder}{suffix}"

    def enumerate(self) -> list[FsEntry]:
        """List the current folder with the current hidden-entry filter."""
        return self.filesystem.list_children(
            self.current_folder,
            include_hidden=self.show_hidden,
            include_files=self.mode.include_files,
        )

    def run(self) -> Optional[Path]:
        """Drive the navigation loop.

        Returns:
            The picked folder (folder mode) or file (file mode), or None when
            the user aborted with end of input.

        Raises:
            NavigatorError: If the picker returned a response this navigator
                does not understand.
        """
        while True:
            self.picker.batch_heading = self.heading
            entries = self.enumerate()
            response = self.picker.pick(entries, self.batch_size)

            if response is None:
                debug(f"{self.mode.name} navigator aborted in {self.current_folder}")
                return None
            if self.mode.can_select_folder and response == SELECT_CURRENT:
                return self.current_folder
            if response.upper() == TOGGLE_HIDDEN:
                self.show_hidden = not self.show_hidden
                continue
            if response == PARENT:
                if not self.ascend():
                    return None
                continue

            index = selected_index(response)
            if index is None or not 0 <= index < len(entries):
                raise NavigatorError(f"Unexpected picker response: {response!r}")
            entry = entries[index]
            if entry.is_dir:
                debug(f"Descending into {entry.path}")
                self.current_folder = entry.path
                continue
            return entry.path

    def ascend(self) -> bool:
        """Move to the parent folder, or ask for a drive at a root.

        Returns:
            False if input ran out while asking for a drive, else True.
        """
        parent = self.filesystem.parent(self.current_folder)
        if parent is not None:
            self.current_folder = parent
            return True

        volumes = self.filesystem.list_volumes()
        if not volumes:
            self._write(f"Already at the filesystem root ({self.current_folder}).\n")
            return True
        root = self._prompt_for_drive(volumes)
        if root is None:
            return False
        self.current_folder = root
        return True

    def _prompt_for_drive(self, volumes: dict[str, Path]) -> Optional[Path]:
        prompt = f"Select an available Drive ({format_volumes(volumes)}): "
        while True:
            self._write(prompt)
            try:
                response = self.read_line()
            except EOFError:
                return None
            match = DRIVE_PATTERN.fullmatch(response.strip())
            if not match:
                continue
            letter = match.group(1).upper()
            if letter not in volumes:
                self._write("Invalid drive specification\n")
                continue
            debug(f"Switching to drive {letter}")
            return volumes[letter]

    def _write(self, text: str) -> None:
        self.console.print(
            text, end="", markup=False, highlight=False, emoji=False, soft_wrap=True
        )


def pick_folder(
    initial_path: Union[str, Path, None] = None, **kwargs: Any
) -> Optional[Path]:
    """Let the user pick a folder, starting in *initial_path* (home by default)."""
    return Navigator(FOLDER_MODE, initial_path, **kwargs).run()


def pick_file(
    initial_path: Union[str, Path, None] = None, **kwargs: Any
) -> Optional[Path]:
    """Let the user pick a file, starting in *initial_path* (home by default)."""
    return Navigator(FILE_MODE, initial_path, **kwargs).run()
