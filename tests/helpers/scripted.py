"""Test doubles for driving pickers without a terminal."""

import io
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from rich.console import Console

from mediapick.models.entry import FsEntry

C_DRIVE = Path("/c_drive")
D_DRIVE = Path("/d_drive")


class ScriptedInput:
    """Line reader returning scripted responses, then raising EOFError."""

    def __init__(self, *lines: str) -> None:
        self.lines: List[str] = list(lines)
        self.reads = 0

    def __call__(self) -> str:
        if not self.lines:
            raise EOFError
        self.reads += 1
        return self.lines.pop(0)


def make_console() -> Console:
    """A plain, wide console writing into a StringIO buffer."""
    return Console(
        file=io.StringIO(), width=200, color_system=None, force_terminal=False
    )


def output_of(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


class FakeFileSystem:
    """In-memory directory tree with drive-letter volumes."""

    def __init__(self, volumes: Optional[Dict[str, Path]] = None) -> None:
        self.volumes: Dict[str, Path] = (
            {"C": C_DRIVE, "D": D_DRIVE} if volumes is None else volumes
        )
        self.roots = {C_DRIVE, D_DRIVE} | set(self.volumes.values())
        self.children: Dict[Path, List[FsEntry]] = {root: [] for root in self.roots}
        self.calls: List[Tuple[Path, bool, bool]] = []

    def add(self, path: Path, *, is_dir: bool = True, hidden: bool = False) -> Path:
        self.children.setdefault(path.parent, []).append(
            FsEntry(path=path, name=path.name, is_dir=is_dir, hidden=hidden)
        )
        if is_dir:
            self.children.setdefault(path, [])
        return path

    def list_children(
        self, folder: Path, *, include_hidden: bool, include_files: bool
    ) -> List[FsEntry]:
        self.calls.append((folder, include_hidden, include_files))
        return [
            entry
            for entry in self.children.get(folder, [])
            if (include_hidden or not entry.hidden)
            and (include_files or entry.is_dir)
        ]

    def parent(self, folder: Path) -> Optional[Path]:
        if folder in self.roots:
            return None
        return folder.parent

    def list_volumes(self) -> Dict[str, Path]:
        return dict(self.volumes)

    def is_dir(self, path: Path) -> bool:
        return path in self.children
