"""
Season-tag resolution and canonical name formatting.

The season tag comes from a small decision table:

- explicit N -> ``S<N>`` (kept at the width it was given: ``1`` -> ``S1``,
  ``01`` -> ``S01``)
- none -> empty tag
- keep -> the season marker found in the raw filename, else ``S1``
- default -> ``S1``

Formatting then rebuilds the name as ``<series> - <tag>E<episode>`` and
collapses the doubled separators the substitution can leave behind.
"""
import re

from renime.config import SeasonMode, SeasonSpec
from renime.rename.parser import EpisodeMatch, extract_episode, find_season_marker
from renime.utils.constants import DEFAULT_SEASON_TAG


def resolve_season_tag(season: SeasonSpec, raw_filename: str = "") -> str:
    """Return the season tag (``S1``, ``S02`` or ``""``) for a file."""
    if season.mode is SeasonMode.EXPLICIT:
        return f"S{season.number}"
    if season.mode is SeasonMode.NONE:
        return ""
    if season.mode is SeasonMode.KEEP:
        return find_season_marker(raw_filename) or DEFAULT_SEASON_TAG
    return DEFAULT_SEASON_TAG


def collapse_separators(name: str) -> str:
    """Collapse runs of spaces, then the ``" - -"`` left by an empty tag or a dashed prefix."""
    name = re.sub(r" {2,}", " ", name)
    return name.replace(" - -", " -")


def format_filename(sanitized: str, series_name: str | None, season_tag: str) -> str:
    """
    Rewrite a sanitized filename as ``<series> - <tag>E<episode>`` plus whatever
    followed the episode number.

    When ``series_name`` is empty the text before the episode number is used.
    When the episode pattern does not match, ``sanitized`` is returned as is;
    callers must check for an episode token before using the result.

    Examples:
      ("My Show E03 1080p.mkv", "My Show", "S1") -> "My Show - S1E03 1080p.mkv"
      ("show ep5.mp4", None, "") -> "show - E5.mp4"
    """
    match = extract_episode(sanitized)
    if not isinstance(match, EpisodeMatch):
        return match.text

    name = series_name or match.prefix
    return collapse_separators(f"{name} - {season_tag}E{match.episode}{match.trailing}")
