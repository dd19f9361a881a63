"""Directory enumeration primitives used by the navigators.

The navigator never touches the filesystem directly; it goes through a
:class:`FileSystem` implementation so that tests can script a directory tree
(including Windows drive roots) on any platform.

- ``list_children`` returns the immediate children of a folder. System entries
  (Windows attribute) are always skipped; hidden entries only when asked.
- ``parent`` returns None at a filesystem root.
- ``list_volumes`` maps drive letters to their root paths (Windows only).
"""

import logging
import os
import stat
import string
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Union

from mediapick.models.entry import FsEntry

logger = logging.getLogger(__name__)

# Attribute bits from stat; defined on every platform since Python 3.5 but only
# ever set on Windows.
_HIDDEN = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2)
_SYSTEM = getattr(stat, "FILE_ATTRIBUTE_SYSTEM", 0x4)

DOWNLOADS = "Downloads"


class FileSystem(Protocol):
    """Enumeration boundary consumed by the navigator."""

    def list_children(
        self, folder: Path, *, include_hidden: bool, include_files: bool
    ) -> List[FsEntry]: ...

    def parent(self, folder: Path) -> Optional[Path]: ...

    def list_volumes(self) -> Dict[str, Path]: ...

    def is_dir(self, path: Path) -> bool: ...


def is_hidden_name(name: str) -> bool:
    """Check if a single path component is hidden (starts with a dot)."""
    return name.startswith(".")


def _attributes(entry: os.DirEntry) -> int:
    try:
        return getattr(entry.stat(follow_symlinks=False), "st_file_attributes", 0)
    except OSError:
        return 0


class LocalFileSystem:
    """:class:`FileSystem` backed by the real operating system."""

    def list_children(
        self, folder: Path, *, include_hidden: bool, include_files: bool
    ) -> List[FsEntry]:
        """Return the children of *folder*, sorted case-insensitively by name.

        Unreadable folders produce an empty listing; the user can still
        navigate away from them.
        """
        entries: List[FsEntry] = []
        try:
            with os.scandir(folder) as it:
                for dir_entry in it:
                    attrs = _attributes(dir_entry)
                    if attrs & _SYSTEM:
                        continue
                    hidden = is_hidden_name(dir_entry.name) or bool(attrs & _HIDDEN)
                    if hidden and not include_hidden:
                        continue
                    try:
                        is_dir = dir_entry.is_dir()
                    except OSError:
                        continue
                    if not is_dir and not include_files:
                        continue
                    entries.append(
                        FsEntry(
                            path=Path(dir_entry.path),
                            name=dir_entry.name,
                            is_dir=is_dir,
                            hidden=hidden,
                        )
                    )
        except (PermissionError, FileNotFoundError, NotADirectoryError) as e:
            logger.warning("Cannot list %s: %s", folder, e)
            return []
        entries.sort(key=lambda e: e.name.casefold())
        return entries

    def parent(self, folder: Path) -> Optional[Path]:
        parent = folder.parent
        if parent == folder:
            return None
        return parent

    def list_volumes(self) -> Dict[str, Path]:
        if sys.platform != "win32":
            return {}
        volumes: Dict[str, Path] = {}
        for letter in string.ascii_uppercase:
            root = Path(f"{letter}:\\")
            if os.path.exists(root):
                volumes[letter] = root
        return volumes

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()


def format_volumes(letters: Iterable[str]) -> str:
    """Render drive letters for a prompt: ``C``, ``C or D``, ``C,D or E``."""
    letters = list(letters)
    if len(letters) <= 1:
        return "".join(letters)
    return ",".join(letters[:-1]) + " or " + letters[-1]


def resolve_start_dir(
    initial_path: Union[str, Path, None] = None,
    *,
    home: Optional[Path] = None,
    is_dir: Callable[[Path], bool] = Path.is_dir,
) -> Path:
    """Work out which folder a navigator should open first.

    Args:
        initial_path: Folder requested by the caller. ``None`` means the home
            directory; the literal ``"Downloads"`` means the Downloads folder
            inside the home directory.
        home: Home directory override (defaults to :meth:`Path.home`).
        is_dir: Existence check, usually ``FileSystem.is_dir``.

    Returns:
        The requested directory, or the home directory when the request does
        not name an existing directory.
    """
    home = home or Path.home()
    if initial_path is None:
        return home
    if str(initial_path) == DOWNLOADS:
        initial_path = home / DOWNLOADS
    candidate = Path(initial_path).expanduser()
    if not is_dir(candidate):
        logger.debug("Start folder %s not found, using %s", candidate, home)
        return home
    # No ".." segments: ``parent`` works on the path text.
    return Path(os.path.normpath(candidate.absolute()))
