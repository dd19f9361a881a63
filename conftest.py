"""Configure pytest for mediapick."""

import sys
from pathlib import Path

import pytest

# Make the src layout importable without an editable install.
src_path = str(Path(__file__).parent / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path_factory, monkeypatch):
    """Keep the user's config file and MEDIAPICK_* variables out of tests."""
    from mediapick.utils import config

    config_dir = tmp_path_factory.mktemp("config") / "mediapick"
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_FILE", config_dir / "config.toml")
    for key in (
        "picker.batch_size",
        "picker.show_hidden",
        "mux.language",
        "mux.mkvmerge_path",
    ):
        monkeypatch.delenv(config._make_env_var_name(key), raising=False)
    monkeypatch.delenv("MEDIAPICK_NO_RICH", raising=False)
