"""Domain models for the mediapick application."""

from mediapick.models.entry import FsEntry
from mediapick.models.media import MuxStatus, Subtitle, Video

__all__ = [
    "FsEntry",
    "MuxStatus",
    "Subtitle",
    "Video",
]
