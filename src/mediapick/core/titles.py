"""Title extraction from video filenames.

``The.Office.s02e03.720p.WEB.mkv`` becomes ``The Office S02E03``: everything
after the season/episode token is release noise and is dropped.
"""

import re
from pathlib import Path

_UP_TO_EPISODE = re.compile(r"(.*[Ss]\d\d[Ee]\d\d)")
# A dot is a word separator unless it sits between two digits (e.g. "2.0").
_SEPARATOR_DOT = re.compile(r"(?<=\D)\.|\.(?=\D)")
_SEASON_LETTER = re.compile(r"[Ss](?=\d\d[Ee]\d\d)")
_EPISODE_LETTER = re.compile(r"(?<=[Ss]\d\d)[Ee](?=\d\d)")


def extract_title(filename: str) -> str:
    """Return a display title for a video file name.

    Args:
        filename: File name, with or without a directory part and extension.

    Returns:
        For episode files, the name up to and including ``SxxEyy`` with dots
        turned into spaces and the season/episode letters upper-cased.
        Otherwise the file name without its extension.

    Raises:
        ValueError: If *filename* is empty.
    """
    if not filename:
        raise ValueError("filename must not be empty")
    stem = Path(filename).stem
    match = _UP_TO_EPISODE.match(stem)
    if not match:
        return stem
    title = _SEPARATOR_DOT.sub(" ", match.group(1))
    title = _SEASON_LETTER.sub("S", title)
    title = _EPISODE_LETTER.sub("E", title)
    return title.strip()
