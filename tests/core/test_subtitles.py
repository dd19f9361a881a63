"""Tests for subtitle parsing and subtitle-to-video matching."""

from pathlib import Path

import pytest

from mediapick.core.subtitles import (
    attach_subtitles,
    belongs_to,
    dedupe_subtitles,
    language_from_filename,
    parse_subtitle,
)
from mediapick.models.media import Subtitle, Video


@pytest.mark.parametrize(
    "filename,expected",
    [
        ("Movie.spa.srt", ("spa", False)),
        ("Movie.en.srt", ("eng", False)),
        ("Movie.English.srt", ("eng", False)),
        ("2_Spanish.srt", ("spa", False)),
        ("Movie.en.sdh.srt", ("eng", False)),
        ("Movie.fr.forced.srt", ("fre", False)),
        ("Movie.srt", ("eng", True)),
        ("Movie.x.srt", ("eng", True)),
        ("sdh.srt", ("eng", True)),
    ],
)
def test_language_from_filename(filename: str, expected) -> None:
    assert language_from_filename(filename) == expected


def test_parse_subtitle_flags() -> None:
    sub = parse_subtitle(Path("/m/Movie.es.SDH.srt"))
    assert sub.language_code == "spa"
    assert sub.language_name == "Spanish"
    assert sub.is_sdh is True
    assert sub.is_forced is False
    assert sub.english_assumed is False

    forced = parse_subtitle(Path("/m/Movie.forced.srt"))
    assert forced.is_forced is True
    assert forced.english_assumed is True


def _video(path: str) -> Video:
    return Video(path=Path(path), title=Path(path).stem)


def _sub(path: str) -> Subtitle:
    return parse_subtitle(Path(path))


class TestBelongsTo:
    def test_folder_named_after_video(self) -> None:
        assert belongs_to(_sub("/m/Alien/2_English.srt"), _video("/m/Alien.mkv"))

    def test_same_name(self) -> None:
        assert belongs_to(_sub("/m/Alien.srt"), _video("/m/Alien.mkv"))

    def test_same_name_plus_language(self) -> None:
        assert belongs_to(_sub("/m/Alien.spa.srt"), _video("/m/Alien.mkv"))

    def test_unrelated_name(self) -> None:
        assert not belongs_to(_sub("/m/Aliens.srt"), _video("/m/Alien.mkv"))

    def test_subs_folder_one_level_down(self) -> None:
        video = _video("/m/Alien.mkv")
        assert belongs_to(_sub("/m/Subs/3_Spanish.srt"), video)
        assert belongs_to(_sub("/m/Subtitles/English.srt"), video)

    def test_other_folder_one_level_down(self) -> None:
        assert not belongs_to(_sub("/m/Extras/English.srt"), _video("/m/Alien.mkv"))

    def test_subs_folder_two_levels_down(self) -> None:
        assert not belongs_to(
            _sub("/m/Subs/English/1.srt"), _video("/m/Alien.mkv")
        )

    def test_subs_folder_episode_must_match(self) -> None:
        video = _video("/s/Show.E01.1080p.mkv")
        assert belongs_to(_sub("/s/Subs/Show.E01.720p.eng.srt"), video)
        assert not belongs_to(_sub("/s/Subs/Show.E02.720p.eng.srt"), video)


class TestDedupe:
    def test_same_language_and_size_is_dropped(self, tmp_path: Path) -> None:
        (tmp_path / "a.en.srt").write_text("hello")
        (tmp_path / "b.English.srt").write_text("world")
        subs = [_sub(str(tmp_path / "a.en.srt")), _sub(str(tmp_path / "b.English.srt"))]
        assert dedupe_subtitles(subs) == subs[:1]

    def test_different_size_or_language_is_kept(self, tmp_path: Path) -> None:
        (tmp_path / "a.en.srt").write_text("hello")
        (tmp_path / "b.en.srt").write_text("hello there")
        (tmp_path / "c.es.srt").write_text("hola!")
        subs = [_sub(str(tmp_path / n)) for n in ("a.en.srt", "b.en.srt", "c.es.srt")]
        assert dedupe_subtitles(subs) == subs


def test_attach_subtitles(tmp_path: Path) -> None:
    (tmp_path / "Subs").mkdir()
    (tmp_path / "Alien.mkv").write_text("v")
    (tmp_path / "Heat.mkv").write_text("v")
    (tmp_path / "Alien.en.srt").write_text("one")
    (tmp_path / "Heat.srt").write_text("two")
    (tmp_path / "Subs" / "Spanish.srt").write_text("three")

    alien = Video(path=tmp_path / "Alien.mkv", title="Alien")
    heat = Video(path=tmp_path / "Heat.mkv", title="Heat")
    subs = [
        _sub(str(tmp_path / "Alien.en.srt")),
        _sub(str(tmp_path / "Heat.srt")),
        _sub(str(tmp_path / "Subs" / "Spanish.srt")),
    ]

    attach_subtitles([alien, heat], subs)

    assert [s.path.name for s in alien.subtitles] == ["Alien.en.srt", "Spanish.srt"]
    assert [s.path.name for s in heat.subtitles] == ["Heat.srt", "Spanish.srt"]
