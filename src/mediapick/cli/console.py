"""Console context manager for CLI commands.

* ``ConsoleManager`` yields a pre-configured :class:`rich.console.Console`.
* Opt-out via the ``--no-rich`` flag (sets env var ``MEDIAPICK_NO_RICH``) or
  the environment variable being set externally.
"""

from __future__ import annotations

import os
from contextlib import AbstractContextManager
from typing import Any, Dict

from rich.console import Console
from rich.traceback import install as install_rich_traceback

__all__ = ["ConsoleManager", "rich_enabled"]

# ENV VAR used to disable rich output entirely (useful for piping or testing)
_ENV_DISABLE_RICH = "MEDIAPICK_NO_RICH"


def rich_enabled() -> bool:
    return os.getenv(_ENV_DISABLE_RICH, "0").lower() not in {"1", "true", "yes"}


class ConsoleManager(AbstractContextManager):
    """Context manager that yields a configured Rich :class:`Console`.

    Parameters
    ----------
    record:
        Forwarded to :class:`rich.console.Console` so tests can read the
        output back with ``console.export_text``.
    force_use:
        When *True* / *False* this overrides autodetection and forces rich
        enabled/disabled. When *None*, autodetect via ``MEDIAPICK_NO_RICH``.
    console_kwargs:
        Additional keyword arguments forwarded verbatim to the Console.
    """

    def __init__(
        self,
        *,
        record: bool = False,
        force_use: bool | None = None,
        **console_kwargs: Any,
    ) -> None:
        self._record = record
        self._force_use = force_use
        self._console_kwargs: Dict[str, Any] = console_kwargs
        self.console: Console | None = None

    def __enter__(self) -> Console:
        use_rich = rich_enabled() if self._force_use is None else self._force_use
        if use_rich:
            self.console = Console(record=self._record, **self._console_kwargs)
        else:
            # Plain output: no colour codes even when attached to a terminal.
            self.console = Console(
                record=self._record,
                color_system=None,
                force_terminal=False,
                **self._console_kwargs,
            )
        install_rich_traceback(show_locals=True, console=self.console)
        return self.console

    def __exit__(self, exc_type, exc_val, exc_tb):  # type: ignore[override]
        if self.console is not None:
            self.console.file.flush()
        # Exceptions propagate to the caller.
        return False
