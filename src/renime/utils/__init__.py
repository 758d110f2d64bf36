"""
Constants, logging, subprocess and filesystem helpers, and interactive
selection used across the renime package.
"""

from .constants import (
    CONFIRM_ANSWER,
    DEFAULT_SEASON_TAG,
    FZF_BINARY,
    SERIES_DIR,
    SERIES_NAME_PLACEHOLDER,
    TVNAMER_BINARY,
)
from .logger import LogLevel

__all__ = [
    "CONFIRM_ANSWER",
    "DEFAULT_SEASON_TAG",
    "FZF_BINARY",
    "TVNAMER_BINARY",
    "SERIES_DIR",
    "SERIES_NAME_PLACEHOLDER",
    "LogLevel",
]
