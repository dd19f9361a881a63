"""mkvmerge command building and invocation.

Each video is remuxed to ``<video folder>/Remuxed/<title>.drMUX.mkv`` with
its title set, its first two tracks (video, audio) tagged with the spoken
language, and every matched subtitle added as a non-default track.
"""

import logging
import subprocess
from pathlib import Path
from typing import List

from mediapick.core.scanner import REMUX_FOLDER
from mediapick.core.subtitles import DEFAULT_LANGUAGE
from mediapick.models.media import MuxStatus, Subtitle, Video

logger = logging.getLogger(__name__)

REMUX_SUFFIX = ".drMUX.mkv"

# mkvmerge exit codes; anything else (e.g. killed by a signal) is fatal.
_EXIT_STATUS = {
    0: MuxStatus.SUCCESS,
    1: MuxStatus.WARNING,
    2: MuxStatus.FATAL,
}


def output_path(video: Video) -> Path:
    """Where the remuxed copy of *video* is written."""
    return video.path.parent / REMUX_FOLDER / f"{video.title}{REMUX_SUFFIX}"


def subtitle_args(subtitle: Subtitle) -> List[str]:
    """mkvmerge arguments adding one subtitle file as a track."""
    args = [
        "--language",
        f"0:{subtitle.language_code or DEFAULT_LANGUAGE}",
        "--default-track-flag",
        "0:0",
    ]
    if subtitle.is_sdh:
        args += ["--hearing-impaired-flag", "0", "--track-name", "0:SDH"]
    if subtitle.is_forced:
        args += ["--forced-display-flag", "0", "--track-name", "0:forced"]
    args.append(str(subtitle.path))
    return args


def build_mkvmerge_args(video: Video, language: str = DEFAULT_LANGUAGE) -> List[str]:
    """Build the mkvmerge argument list (without the executable) for *video*."""
    args = [
        "--title",
        video.title,
        "-q",
        "--language",
        f"0:{language}",
        "--language",
        f"1:{language}",
        "-o",
        str(output_path(video)),
        str(video.path),
    ]
    for subtitle in video.subtitles:
        args += subtitle_args(subtitle)
    return args


def classify_exit_code(code: int) -> MuxStatus:
    return _EXIT_STATUS.get(code, MuxStatus.FATAL)


def run_mkvmerge(args: List[str], executable: str = "mkvmerge") -> MuxStatus:
    """Run mkvmerge and classify its exit code.

    Args:
        args: Arguments from :func:`build_mkvmerge_args`.
        executable: mkvmerge binary name or path.

    Returns:
        SUCCESS, WARNING (exit 1) or FATAL.

    Raises:
        FileNotFoundError: If *executable* cannot be found.
    """
    result = subprocess.run([executable, *args], check=False)
    status = classify_exit_code(result.returncode)
    logger.debug("mkvmerge exited with %d (%s)", result.returncode, status.value)
    return status
