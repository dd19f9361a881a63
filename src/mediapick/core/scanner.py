"""Media scanner for the remux workflow.

Collects the video and subtitle files below a folder picked by the user.
Hidden files and folders are skipped, and so is the ``Remuxed`` output folder
so that previous results are never fed back into mkvmerge.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Tuple

from mediapick.core.subtitles import parse_subtitle
from mediapick.core.titles import extract_title
from mediapick.fs.listing import is_hidden_name
from mediapick.models.media import Subtitle, Video

logger = logging.getLogger(__name__)

VIDEO_EXTENSIONS = {".avi", ".mkv", ".mp4"}
SUBTITLE_EXTENSIONS = {".srt", ".ass"}
REMUX_FOLDER = "Remuxed"


def _iter_files(folder: Path, recursive: bool) -> Iterator[Path]:
    try:
        children = sorted(folder.iterdir(), key=lambda p: p.name.casefold())
    except (PermissionError, OSError) as e:
        logger.warning("Error accessing directory %s: %s", folder, e)
        return
    for item in children:
        if is_hidden_name(item.name):
            continue
        if item.is_dir():
            if recursive and item.name != REMUX_FOLDER:
                yield from _iter_files(item, recursive)
        elif item.is_file():
            yield item


def find_media(
    folder: Path, *, recursive: bool = True
) -> Tuple[List[Video], List[Subtitle]]:
    """Find videos and subtitles below *folder*.

    Args:
        folder: Folder to scan.
        recursive: Descend into sub-folders (``Subs`` folders live there).

    Returns:
        ``(videos, subtitles)``, each in path order. Videos have their title
        set; subtitles have their language parsed from the file name.

    Raises:
        FileNotFoundError: If the folder doesn't exist.
        ValueError: If the path is not a directory.
    """
    if not folder.exists():
        raise FileNotFoundError(f"Directory does not exist: {folder}")
    if not folder.is_dir():
        raise ValueError(f"Path is not a directory: {folder}")

    videos: List[Video] = []
    subtitles: List[Subtitle] = []
    for path in _iter_files(folder, recursive):
        ext = path.suffix.lower()
        if ext in VIDEO_EXTENSIONS:
            videos.append(Video(path=path, title=extract_title(path.name)))
        elif ext in SUBTITLE_EXTENSIONS:
            subtitles.append(parse_subtitle(path))
    logger.debug(
        "Found %d videos and %d subtitles in %s", len(videos), len(subtitles), folder
    )
    return videos, subtitles
