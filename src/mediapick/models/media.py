"""Media models for the remux workflow.

- Video: a video file plus the subtitles that will be muxed into it.
- Subtitle: a sidecar subtitle file with the language inferred from its name.
- MuxStatus: classification of an mkvmerge exit code.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


class MuxStatus(str, Enum):
    """Outcome of one mkvmerge run."""

    SUCCESS = "success"
    WARNING = "warning"
    FATAL = "fatal"


class Subtitle(BaseModel):
    """A subtitle file (``.srt``/``.ass``) found next to or below a video."""

    path: Path
    language_code: Optional[str] = None
    """ISO-639-2 code, e.g. ``spa``."""

    language_name: Optional[str] = None
    """English language name, e.g. ``Spanish``."""

    english_assumed: bool = False
    """No language was recognised in the filename, so English was assumed."""

    is_sdh: bool = False
    """Subtitles for the deaf and hard of hearing."""

    is_forced: bool = False

    @property
    def size(self) -> int:
        return self.path.stat().st_size


class Video(BaseModel):
    """A video file to remux, with its display title and matched subtitles."""

    path: Path
    title: str
    subtitles: List[Subtitle] = Field(default_factory=list)
