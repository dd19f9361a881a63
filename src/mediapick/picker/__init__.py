"""Interactive terminal pickers.

- ItemPicker: lists any sequence in numbered batches and validates responses.
- pick_folder / pick_file: filesystem navigators built on ItemPicker.
"""

from mediapick.picker.engine import ItemPicker, selected_index
from mediapick.picker.navigator import (
    FILE_MODE,
    FOLDER_MODE,
    Navigator,
    NavigatorError,
    NavigatorMode,
    pick_file,
    pick_folder,
)

__all__ = [
    "FILE_MODE",
    "FOLDER_MODE",
    "ItemPicker",
    "Navigator",
    "NavigatorError",
    "NavigatorMode",
    "pick_file",
    "pick_folder",
    "selected_index",
]
