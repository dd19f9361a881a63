# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""MediaPick - Interactive folder/file picker and subtitle remux helper."""

from mediapick.__about__ import __version__

__all__ = ["__version__"]
