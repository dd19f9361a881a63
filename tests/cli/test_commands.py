"""Tests for the mediapick CLI commands.

The pickers read from standard input, so these tests drive them through
``CliRunner(input=...)``; mkvmerge itself is never executed.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from mediapick.cli.commands import ExitCode, app
from mediapick.models.media import MuxStatus

runner = CliRunner()


@pytest.fixture(autouse=True)
def plain_output(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MEDIAPICK_NO_RICH", "1")


@pytest.fixture
def folders(tmp_path: Path) -> Path:
    (tmp_path / "alpha").mkdir()
    (tmp_path / "beta").mkdir()
    (tmp_path / "beta" / "clip.mp4").write_text("x")
    return tmp_path


@pytest.fixture
def media(tmp_path: Path) -> Path:
    (tmp_path / "Movie.mkv").write_text("video")
    (tmp_path / "Movie.en.srt").write_text("subs")
    return tmp_path


def test_pick_folder_prints_selection(folders: Path) -> None:
    result = runner.invoke(
        app, ["pick-folder", str(folders), "--batch-size", "40"], input="1\n \n"
    )
    assert result.exit_code == 0
    assert "00 alpha" in result.stdout
    assert str(folders / "beta") in result.stdout.splitlines()


def test_pick_folder_without_selection_fails(folders: Path) -> None:
    result = runner.invoke(app, ["pick-folder", str(folders)], input="")
    assert result.exit_code == ExitCode.ERROR
    assert "No folder selected." in result.stdout


def test_pick_file_prints_selection(folders: Path) -> None:
    result = runner.invoke(
        app, ["pick-file", str(folders), "--hide-hidden"], input="1\n0\n"
    )
    assert result.exit_code == 0
    assert "[beta]" in result.stdout
    assert str(folders / "beta" / "clip.mp4") in result.stdout.splitlines()


def test_pick_folder_rejects_oversized_batch(folders: Path) -> None:
    result = runner.invoke(app, ["pick-folder", str(folders), "--batch-size", "101"])
    assert result.exit_code != 0


def test_remux_dry_run_prints_commands(media: Path) -> None:
    result = runner.invoke(
        app, ["remux", str(media), "--dry-run", "--language", "spa"]
    )
    assert result.exit_code == 0
    assert "Movie (1 subtitle(s))" in result.stdout
    assert "mkvmerge --title Movie -q --language 0:spa" in result.stdout
    assert "Movie.en.srt" in result.stdout
    assert not (media / "Remuxed").exists()


def test_remux_without_videos(tmp_path: Path) -> None:
    result = runner.invoke(app, ["remux", str(tmp_path), "--dry-run"])
    assert result.exit_code == 0
    assert "No video files found." in result.stdout


def test_remux_missing_mkvmerge(media: Path, mocker) -> None:
    mocker.patch("mediapick.cli.commands.shutil.which", return_value=None)
    result = runner.invoke(app, ["remux", str(media), "--mkvmerge", "nope"])
    assert result.exit_code == ExitCode.ERROR
    assert "mkvmerge not found" in result.stdout


def test_remux_runs_mkvmerge_and_reports_warning(media: Path, mocker) -> None:
    mocker.patch("mediapick.cli.commands.shutil.which", return_value="/bin/mkvmerge")
    run = mocker.patch(
        "mediapick.cli.commands.run_mkvmerge", return_value=MuxStatus.WARNING
    )

    result = runner.invoke(app, ["remux", str(media)])

    assert result.exit_code == ExitCode.WARNING
    assert "MUXer completed with WARNING(S)" in result.stdout
    assert (media / "Remuxed").is_dir()
    args = run.call_args.args[0]
    assert args[:2] == ["--title", "Movie"]
    assert str(media / "Movie.en.srt") in args


def test_remux_error_is_not_downgraded_by_later_warning(
    tmp_path: Path, mocker
) -> None:
    (tmp_path / "A.mkv").write_text("a")
    (tmp_path / "B.mkv").write_text("b")
    mocker.patch("mediapick.cli.commands.shutil.which", return_value="/bin/mkvmerge")
    mocker.patch(
        "mediapick.cli.commands.run_mkvmerge",
        side_effect=[MuxStatus.FATAL, MuxStatus.WARNING],
    )

    result = runner.invoke(app, ["remux", str(tmp_path)])

    assert result.exit_code == ExitCode.ERROR
    assert "ERROR - MUXing aborted" in result.stdout


def test_remux_picks_folder_when_omitted(media: Path, mocker) -> None:
    mocker.patch("mediapick.cli.commands.pick_folder", return_value=media)
    result = runner.invoke(app, ["remux", "--dry-run"])
    assert result.exit_code == 0
    assert "Movie (1 subtitle(s))" in result.stdout


def test_remux_aborts_when_no_folder_picked(mocker) -> None:
    mocker.patch("mediapick.cli.commands.pick_folder", return_value=None)
    result = runner.invoke(app, ["remux", "--dry-run"])
    assert result.exit_code == ExitCode.ERROR
    assert "No folder selected." in result.stdout


def test_version_command() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "MediaPick version:" in result.stdout


def test_no_rich_flag_is_accepted(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MEDIAPICK_NO_RICH", raising=False)
    result = runner.invoke(app, ["--no-rich", "version"])
    assert result.exit_code == 0
    assert "MediaPick version:" in result.stdout


def test_out_of_range_batch_size_setting_is_reported(
    folders: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("MEDIAPICK_PICKER_BATCH_SIZE", "500")
    result = runner.invoke(app, ["pick-folder", str(folders)], input=" \n")
    assert result.exit_code == ExitCode.ERROR
    expected = "Error: picker.batch_size must be between 1 and 100, got 500"
    assert expected in result.stdout
    assert "00 alpha" not in result.stdout


def test_remux_warns_about_assumed_language(media: Path, caplog) -> None:
    (media / "Movie.srt").write_text("untagged")
    result = runner.invoke(app, ["remux", str(media), "--dry-run"])
    assert result.exit_code == 0
    assert "No language in Movie.srt, tagging it as English" in caplog.text
