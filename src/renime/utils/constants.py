"""
Constants and configuration settings for episode renaming.

This module holds the regular expressions used by the normalization pipeline,
the names of the external binaries, terminal styling codes and the defaults
that can be overridden from the environment (a ``.env`` file is honored).
"""

import os
import re

from dotenv import load_dotenv

load_dotenv()

# External tools
FZF_BINARY = "fzf"
TVNAMER_BINARY = "tvnamer"

# Directory that receives the per-series folders created by tvnamer
SERIES_DIR = os.getenv("SERIES_DIR", ".")
SERIES_NAME_PLACEHOLDER = "%(seriesname)s"

# Exact answer accepted by confirmation prompts
CONFIRM_ANSWER = "Yes"

# Default season tag when no season is requested
DEFAULT_SEASON_TAG = "S1"

# Regex patterns for filename parsing
BRACKET_TAG_REGEX = re.compile(r"\[[^\[\]]*\]")
SEASON_MARKER_REGEX = re.compile(r"[Ss]\d{1,2}")
SEASON_VALUE_REGEX = re.compile(r"^\d{1,2}$")
PART_MARKER_REGEX = re.compile(r"(?<![a-z])part[ ._]?\d+", re.IGNORECASE)
# An extension has a letter in it and is not an episode marker (.E05, .1x05)
EXTENSION_REGEX = re.compile(r"\.(?!(?:[Ee][Pp]?\d+|\d{1,2}[Xx]\d+)$)(?=[0-9]*[A-Za-z])[A-Za-z0-9]{1,5}$")
EPISODE_PATTERN_REGEX = re.compile(r"(.*) -? *(?:[Ee][Pp]?|\d{1,2}[Xx])?(\d+(?:-\d+){0,2})(?![\dpPiI]) *")
EPISODE_TOKEN_REGEX = re.compile(r" - (?:S\d+)?(E\d+(?:-\d+){0,2})")
DIGIT_RUN_REGEX = re.compile(r"\d+")

# Safe filename rules
UNSAFE_RUN_REGEX = re.compile(r'^\W+|[/\\:*"?<>|~;]{1,254}')
RESERVED_NAMES_REGEX = re.compile(r"^(?:COM\d|CON|LPT\d|NUL|PRN|AUX)$", re.IGNORECASE)

# Lines scraped from the tvnamer dry-run output
TVNAMER_OLD_MARKER = "Old filename"
TVNAMER_NEW_MARKER = "New filename"
TVNAMER_MOVE_MARKER = "moved to"
TVNAMER_MOVE_SEPARATOR = " will be moved to "

# Terminal styling
BOLD = "\033[1m"
RED_BOLD = "\033[1;31m"
BLUE = "\033[34m"
RED_UNDERLINED = "\033[4;31m"
RESET = "\033[0m"
