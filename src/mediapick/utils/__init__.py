"""Utility modules for mediapick."""

from mediapick.utils.config import resolve_setting

__all__ = ["resolve_setting"]
