"""Subtitle parsing and subtitle-to-video matching.

A subtitle belongs to a video when any of these hold:

1. it sits in a folder named after the video;
2. its name equals the video name;
3. its name equals the video name plus a trailing language word
   (``Movie.spa.srt`` for ``Movie.mkv``);
4. it sits in a ``Subs``/``Subtitles`` folder directly below the video's
   folder, has a recognised language, and either carries no episode number
   or matches the video up to and including its episode number.
"""

import re
from pathlib import Path
from typing import Iterable, List, Tuple

from mediapick.core.languages import long_name, to_iso639_2
from mediapick.models.media import Subtitle, Video

DEFAULT_LANGUAGE = "eng"

_FLAG_WORDS = {"sdh", "forced"}
_WORD_SPLIT = re.compile(r"[ ._-]+")
_LAST_WORD = re.compile(r"([A-Za-z]{2,})$")
_FINAL_WORD = re.compile(r"(.*)[ _.-][A-Za-z]{2,}$")
_SUBS_FOLDER = re.compile(r"SUBS|SUBTITLES")
_EPISODE_INSIDE = re.compile(r"[ .][Ee]\d\d[ .]")
_EPISODE = re.compile(r"[ .][Ee]\d\d([ .]|$)")
_UP_TO_EPISODE = re.compile(r"^(.*[ .][Ee]\d\d([ .]|$))")


def language_from_filename(filename: str) -> Tuple[str, bool]:
    """Return ``(iso639_2_code, english_assumed)`` for a subtitle file name.

    The language is read from the last alphabetic word of the name, ignoring
    trailing ``sdh``/``forced`` markers.
    """
    words = [w for w in _WORD_SPLIT.split(Path(filename).stem) if w]
    while words and words[-1].lower() in _FLAG_WORDS:
        words.pop()
    match = _LAST_WORD.search(words[-1]) if words else None
    code = to_iso639_2(match.group(1)) if match else None
    if code is None:
        return DEFAULT_LANGUAGE, True
    return code, False


def parse_subtitle(path: Path) -> Subtitle:
    """Build a :class:`Subtitle` from a subtitle file path."""
    code, english_assumed = language_from_filename(path.name)
    words = {w.lower() for w in _WORD_SPLIT.split(path.stem)}
    return Subtitle(
        path=path,
        language_code=code,
        language_name=long_name(code),
        english_assumed=english_assumed,
        is_sdh="sdh" in words,
        is_forced="forced" in words,
    )


def _trim_final_word(name: str) -> str:
    match = _FINAL_WORD.match(name)
    return match.group(1) if match else ""


def _in_level1_subs_folder(subtitle: Subtitle, video: Video) -> bool:
    sub_dir = subtitle.path.parent
    video_dir = video.path.parent
    if len(sub_dir.parts) - len(video_dir.parts) != 1:
        return False
    # Kept alongside the depth check: both must hold.
    if str(video_dir) not in str(sub_dir):
        return False
    folder = str(sub_dir)[len(str(video_dir)) + 1 :].upper()
    return bool(_SUBS_FOLDER.search(folder))


def _is_episode(name: str) -> bool:
    return bool(_EPISODE_INSIDE.search(name))


def _episodes_match(subtitle_name: str, video_name: str) -> bool:
    if not _EPISODE.search(subtitle_name) or not _EPISODE.search(video_name):
        return False
    sub_match = _UP_TO_EPISODE.match(subtitle_name)
    video_match = _UP_TO_EPISODE.match(video_name)
    if not sub_match or not video_match:
        return False
    return sub_match.group(1) == video_match.group(1)


def belongs_to(subtitle: Subtitle, video: Video) -> bool:
    """Check whether *subtitle* should be muxed into *video*."""
    video_name = video.path.stem
    subtitle_name = subtitle.path.stem
    if video_name == subtitle.path.parent.name:
        return True
    if video_name == subtitle_name:
        return True
    if video_name == _trim_final_word(subtitle_name):
        return True
    if _in_level1_subs_folder(subtitle, video) and subtitle.language_code:
        return not _is_episode(subtitle_name) or _episodes_match(
            subtitle_name, video_name
        )
    return False


def same_language_and_size(first: Subtitle, second: Subtitle) -> bool:
    """Two subtitle files are duplicates when language and file size match."""
    if first is second:
        return True
    return first.language_code == second.language_code and first.size == second.size


def dedupe_subtitles(subtitles: Iterable[Subtitle]) -> List[Subtitle]:
    """Drop subtitles duplicating an earlier one (same language and size)."""
    unique: List[Subtitle] = []
    for subtitle in subtitles:
        if not any(same_language_and_size(subtitle, kept) for kept in unique):
            unique.append(subtitle)
    return unique


def attach_subtitles(videos: Iterable[Video], subtitles: List[Subtitle]) -> None:
    """Fill ``video.subtitles`` with the matching, de-duplicated subtitles."""
    for video in videos:
        matching = (s for s in subtitles if belongs_to(s, video))
        video.subtitles = dedupe_subtitles(matching)
