"""Filesystem access for mediapick."""

from mediapick.fs.listing import (
    FileSystem,
    LocalFileSystem,
    format_volumes,
    resolve_start_dir,
)

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "format_volumes",
    "resolve_start_dir",
]
