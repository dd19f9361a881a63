"""Configuration lookup for MediaPick settings (picker batch size, mkvmerge path).

Settings live in ``$XDG_CONFIG_HOME/mediapick/config.toml`` (default
``~/.config/mediapick/config.toml``) and can be overridden per setting with a
``MEDIAPICK_*`` environment variable or a CLI option. The file is parsed with
tomli; MediaPick never writes it.

Known keys:

* ``picker.batch_size`` - items listed per screen (1-100, default 40)
* ``picker.show_hidden`` - list hidden entries when a navigator starts
* ``mux.mkvmerge_path`` - mkvmerge executable
* ``mux.language`` - spoken language code for remuxed video tracks
"""

import contextlib
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import tomli

# Determine config directory respecting XDG_CONFIG_HOME if set.
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
CONFIG_DIR = _xdg_config_home / "mediapick"
CONFIG_FILE = CONFIG_DIR / "config.toml"

ENV_PREFIX = "MEDIAPICK_"

_TRUTHY = {"1", "true", "yes", "on"}

T = TypeVar("T")


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""
    if not CONFIG_FILE.exists():
        return {}
    with CONFIG_FILE.open("rb") as f:
        return tomli.load(f)


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Retrieve ``data["picker"]["batch_size"]`` for ``"picker.batch_size"``."""
    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str, prefix: str = ENV_PREFIX) -> str:
    """Convert a dotted key path to an uppercase ENV var name.

    Example: "picker.batch_size" -> "MEDIAPICK_PICKER_BATCH_SIZE".
    """
    return prefix + dotted_key.replace(".", "_").upper()


def _coerce(raw: Any, default: T) -> T:
    """Coerce *raw* to the type of *default*, falling back to *default*.

    Strings coming from the environment or from quoted TOML values are parsed
    as bool/int/float when the default has that type. Values that cannot be
    converted are ignored.
    """
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return cast(T, raw)
        if isinstance(raw, str):
            return cast(T, raw.lower() in _TRUTHY)
        return default
    if isinstance(default, int):
        if isinstance(raw, int) and not isinstance(raw, bool):
            return cast(T, raw)
        if isinstance(raw, str):
            with contextlib.suppress(ValueError):
                return cast(T, int(raw))
        return default
    if isinstance(default, float):
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return cast(T, float(raw))
        if isinstance(raw, str):
            with contextlib.suppress(ValueError):
                return cast(T, float(raw))
        return default
    if isinstance(default, str):
        return cast(T, str(raw))
    return cast(T, raw)


def resolve_setting(
    key: str,
    *,
    default: T,
    cli_value: T | None = None,
) -> T:
    """Resolve a configuration *key* using precedence CLI > env > config > default.

    Args:
        key: Dotted key path, e.g. ``"picker.batch_size"``.
        default: Value to fall back to when no overrides found. Its type
            drives coercion of env/config values.
        cli_value: Value passed from a CLI option (``None`` when not provided).

    Returns:
        The resolved value with type matching *default* (or *cli_value*).
    """
    if cli_value is not None:
        return cli_value

    env_var = _make_env_var_name(key)
    if env_var in os.environ:
        return _coerce(os.environ[env_var], default)

    file_val = _lookup_nested(_read_config_file(), key)
    if file_val is not None:
        return _coerce(file_val, default)

    return default
