"""Paginated item picker.

Lists a sequence of items in numbered batches (one screen at a time) and reads
one validated response after each batch. The picker is generic over the item
type: callers supply how an item is rendered and which free-text responses are
acceptable, and get back either a sequence-global index or the accepted text.

Responses, checked in this order:

* ``?`` - show the help message and ask again.
* ENTER on its own - list the next batch (rejected after the final batch).
* a number - select that item of the current batch.
* any other text - returned if ``accepts(text)`` is true, else rejected.
* end of input - abort, ``pick`` returns None.
"""

import logging
import re
from typing import Callable, Generic, Optional, Sequence, TypeVar

from rich.console import Console
from rich.text import Text

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_BATCH_SIZE = 100
# Items shorter than this are listed two per line.
TWO_COLUMN_THRESHOLD = 46
COLUMN_WIDTH = 50

HEADING_STYLE = "white on grey35"

RESPONSE_PROMPT = "\n\nEnter your response (? for help): "
DEFAULT_HELP = (
    "Select item by number, or press ENTER to continue if listing paused."
    + RESPONSE_PROMPT
)
PROMPT_AFTER_BATCH = "more (press ENTER)..." + RESPONSE_PROMPT
PROMPT_AFTER_FINAL_BATCH = "END OF LISTING." + RESPONSE_PROMPT

NO_MORE_ITEMS = "No more items to list! Please choose again: "
NOT_LISTED = "That is not an item listed. Please choose again: "
INVALID_RESPONSE = "Invalid response. Please try again: "

_INTEGER = re.compile(r"\s*[+-]?\d+\s*")


def default_render(item: object) -> str:
    return "" if item is None else str(item)


def accept_any(response: str) -> bool:
    return True


def selected_index(response: Optional[str]) -> Optional[int]:
    """Return the item index encoded in a picker response, or None."""
    if response is None or not _INTEGER.fullmatch(response):
        return None
    return int(response)


def layout_batch(texts: Sequence[str]) -> list[str]:
    """Number *texts* from 00 and arrange them into output lines.

    *texts* is one batch, and the layout is decided per batch: two columns
    are used only when every text in it is shorter than
    ``TWO_COLUMN_THRESHOLD`` and none spans several lines. Later batches do
    not affect earlier ones.
    """
    numbered = [f"{i:02d} {text}" for i, text in enumerate(texts)]
    two_columns = bool(texts) and (
        max(len(t) for t in texts) < TWO_COLUMN_THRESHOLD
        and not any("\n" in t for t in texts)
    )
    if not two_columns:
        return numbered
    lines = []
    for i in range(0, len(numbered), 2):
        pair = numbered[i : i + 2]
        if len(pair) == 2:
            lines.append(f"{pair[0]:<{COLUMN_WIDTH}}{pair[1]}")
        else:
            lines.append(pair[0])
    return lines


class ItemPicker(Generic[T]):
    """Interactive picker listing items of type ``T`` in batches.

    Args:
        render: Turns one item into its display text.
        accepts: Decides whether a non-numeric, non-empty response is allowed.
        console: Rich console used for all output.
        read_line: Reads one line of user input; must raise EOFError when no
            more input is available. Defaults to ``console.input``.
        batch_heading: Text shown above every batch.
        help_message: Text shown when the user types ``?``.
    """

    def __init__(
        self,
        *,
        render: Optional[Callable[[T], str]] = None,
        accepts: Optional[Callable[[str], bool]] = None,
        console: Optional[Console] = None,
        read_line: Optional[Callable[[], str]] = None,
        batch_heading: str = "",
        help_message: str = DEFAULT_HELP,
    ) -> None:
        self.render: Callable[[T], str] = render or default_render
        self.accepts: Callable[[str], bool] = accepts or accept_any
        self.console = console or Console()
        self._read_line = read_line or self.console.input
        self.batch_heading = batch_heading
        self.help_message = help_message
        self.prompt_after_batch = PROMPT_AFTER_BATCH
        self.prompt_after_final_batch = PROMPT_AFTER_FINAL_BATCH

    def pick(self, items: Sequence[T], batch_size: int) -> Optional[str]:
        """List *items* in batches of *batch_size* and return the user's choice.

        Returns:
            The sequence-global index of the selected item (as a string of
            digits), the accepted free-text response, or None when input ran
            out. Never an empty string.

        Raises:
            ValueError: If *batch_size* is not between 1 and 100.
        """
        if batch_size > MAX_BATCH_SIZE:
            raise ValueError(f"batch_size cannot be greater than {MAX_BATCH_SIZE}.")
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1.")

        offset = 0
        while True:
            batch = items[offset : offset + batch_size]
            is_final = len(items) - offset <= batch_size
            self._show_batch(batch)
            if is_final:
                self._write("\n" + self.prompt_after_final_batch)
            else:
                self._write(self.prompt_after_batch)

            response = self._read_response(len(batch), is_final)
            if response == "":
                offset += len(batch)
                continue
            index = selected_index(response)
            if index is not None:
                logger.debug("Picked item %d (batch offset %d)", index + offset, offset)
                return str(index + offset)
            return response

    def _show_batch(self, batch: Sequence[T]) -> None:
        self.console.print()
        self.console.print(Text(self.batch_heading, style=HEADING_STYLE))
        for line in layout_batch([self.render(item) for item in batch]):
            self._write(line + "\n")

    def _write(self, text: str) -> None:
        self.console.print(
            text, end="", markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    def _read_response(self, batch_count: int, is_final: bool) -> Optional[str]:
        while True:
            try:
                response = self._read_line()
            except EOFError:
                return None

            if response == "?":
                self._write(self.help_message)
                continue
            if response == "":
                if is_final:
                    self._write(NO_MORE_ITEMS)
                    continue
                return response
            index = selected_index(response)
            if index is not None:
                if 0 <= index < batch_count:
                    return str(index)
                self._write(NOT_LISTED)
                continue
            if self.accepts(response):
                return response
            self._write(INVALID_RESPONSE)
