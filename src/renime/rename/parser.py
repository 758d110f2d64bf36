"""
Module for sanitizing episode filenames and extracting the episode number.

Sanitizing removes release tags, the season marker, ``Part N`` markers and word
separators, then makes the result safe to use as a path segment. Extraction
applies a single greedy pattern and returns an explicit match or no-match
result so callers have to handle the fallback case.
"""
import re
from dataclasses import dataclass

from renime.utils.constants import (
    BRACKET_TAG_REGEX,
    EPISODE_PATTERN_REGEX,
    EXTENSION_REGEX,
    PART_MARKER_REGEX,
    RESERVED_NAMES_REGEX,
    SEASON_MARKER_REGEX,
    UNSAFE_RUN_REGEX,
)


@dataclass(frozen=True)
class EpisodeMatch:
    """The episode pattern matched: text before the marker, the episode span, and what follows it."""
    prefix: str
    episode: str
    trailing: str


@dataclass(frozen=True)
class Unmatched:
    """The episode pattern did not match; ``text`` is the unchanged input."""
    text: str


def split_extension(name: str) -> tuple[str, str]:
    """Split ``name`` into (stem, extension) where the extension keeps its dot."""
    m = EXTENSION_REGEX.search(name)
    if not m:
        return name, ""
    return name[: m.start()], m.group(0)


def safe_filename(name: str) -> str:
    """
    Make a name safe to use as a single path segment.

    - A leading run of non-word characters becomes ``_``.
    - Every run of ``/ \\ : * " ? < > | ~ ;`` becomes ``_`` (one ``_`` per 254
      characters of a run).
    - A stem equal to a reserved device name (CON, PRN, AUX, NUL, COM0-9,
      LPT0-9, any case) gets a trailing ``_`` so it no longer names a device.
    """
    cleaned = UNSAFE_RUN_REGEX.sub("_", name)
    stem, ext = split_extension(cleaned)
    if RESERVED_NAMES_REGEX.match(stem):
        cleaned = f"{stem}_{ext}"
    return cleaned


def sanitize(raw_filename: str, extended: bool = True) -> str:
    """
    Clean a raw filename before the episode pattern is applied.

    Steps, in order:
    1. Remove every ``[...]`` group (release tags, checksums).
    2. Remove the first season marker (``S1``, ``s03``).
    3. Remove the first ``Part N`` marker (extended variant only).
    4. Replace ``_`` with spaces; the extended variant also replaces every
       ``.`` except the extension dot. Runs of separators and spaces become one space.
    5. Apply ``safe_filename``.
    6. Strip one leading ``_`` left by step 5.

    Examples:
      "[Group] My_Show - 05 [ABCD1234].mkv" -> "My Show - 05 .mkv"
      "My.Show.S01E03.1080p.mkv" -> "My Show E03 1080p.mkv"

    Never fails; pathological input can produce an empty string.
    """
    s = BRACKET_TAG_REGEX.sub("", raw_filename)
    s = SEASON_MARKER_REGEX.sub("", s, count=1)

    if extended:
        s = PART_MARKER_REGEX.sub("", s, count=1)
        stem, ext = split_extension(s)
        s = _fold_separators(stem, "[_. ]+") + ext
    else:
        s = _fold_separators(s, "[_ ]+")

    s = safe_filename(s)
    if s.startswith("_"):
        s = s[1:]
    return s


def _fold_separators(text: str, pattern: str) -> str:
    return re.sub(pattern, " ", text)


def find_season_marker(raw_filename: str) -> str | None:
    """Return the first season marker of a raw filename, upper-cased (``s02`` -> ``S02``)."""
    m = SEASON_MARKER_REGEX.search(raw_filename)
    return m.group(0).upper() if m else None


def extract_episode(sanitized: str) -> EpisodeMatch | Unmatched:
    """
    Locate the episode number in a sanitized filename.

    The pattern is greedy on the prefix, so the last plausible episode number
    wins; an explicit marker (``E``, ``EP``, ``<n>x``) may precede the digits
    and up to three dash-joined runs form a multi-episode span. The digits may
    not be followed by another digit or a resolution suffix (``p``, ``i``), which
    keeps tokens like ``1080p`` out while version suffixes (``05v2``) still match.

    Examples:
      "show ep5.mp4" -> EpisodeMatch("show", "5", ".mp4")
      "Show - 05-06.mkv" -> EpisodeMatch("Show -", "05-06", ".mkv")
      "Show - 05v2.mkv" -> EpisodeMatch("Show -", "05", "v2.mkv")
      "Pilot.mkv" -> Unmatched("Pilot.mkv")
    """
    m = EPISODE_PATTERN_REGEX.search(sanitized)
    if not m:
        return Unmatched(sanitized)
    return EpisodeMatch(prefix=m.group(1), episode=m.group(2), trailing=sanitized[m.end(2):])
