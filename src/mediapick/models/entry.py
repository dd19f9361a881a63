"""Filesystem entry model listed by the navigators."""

from pathlib import Path

from pydantic import BaseModel


class FsEntry(BaseModel):
    """One child of a directory as seen by the navigator.

    Entries are snapshots: the navigator re-enumerates after every folder
    change or hidden-item toggle rather than refreshing existing entries.
    """

    path: Path
    """Full path of the entry."""

    name: str
    """Final path component, as shown to the user."""

    is_dir: bool
    """True for directories (including symlinks to directories)."""

    hidden: bool = False
    """Dot-prefixed name, or the Windows hidden attribute is set."""
