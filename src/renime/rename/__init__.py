"""
Filename normalization and batch renaming for episode files.

Package organization:
- parser: Sanitizing raw filenames, safe-filename rules, season marker lookup
  and episode-number extraction (explicit match / no-match result).
- formatter: Season-tag resolution and ``<series> - <tag>E<episode>``
  formatting.
- core: Episode-number adjustment and the end-to-end canonical name pipeline
  driven by a ``RenameRequest``.
- batch: Planning a batch, applying the moves and reporting per-file results.

Example:
    from renime.config import SeasonSpec
    from renime.rename import RenameRequest, build_canonical_filename
    build_canonical_filename(
        RenameRequest("My.Show.S01E03.1080p-GROUP.mkv", "My Show", SeasonSpec.parse("1"))
    )  # -> "My Show - S1E03.mkv"

Behavior notes:
- The pipeline is pure; only ``batch.apply_renames`` touches the filesystem.
- Files without an episode number raise ``NoEpisodeMarkerError`` and are
  rejected from a batch instead of being renamed to a malformed name; so are
  files an increment would give a negative episode number.
"""
# Public parsing functions
from .parser import (
    EpisodeMatch,
    Unmatched,
    extract_episode,
    find_season_marker,
    safe_filename,
    sanitize,
)

# Formatting
from .formatter import format_filename, resolve_season_tag

# Core pipeline
from .core import RenameRequest, adjust_episode_number, build_canonical_filename

# Batch processing
from .batch import (
    BatchReport,
    RenameOutcome,
    RejectedFile,
    RenamePlan,
    RenameResult,
    apply_renames,
    plan_renames,
)

__all__ = [
    # Parsing
    "EpisodeMatch",
    "Unmatched",
    "extract_episode",
    "find_season_marker",
    "safe_filename",
    "sanitize",
    # Formatting
    "format_filename",
    "resolve_season_tag",
    # Core
    "RenameRequest",
    "adjust_episode_number",
    "build_canonical_filename",
    # Batch processing
    "BatchReport",
    "RenameOutcome",
    "RejectedFile",
    "RenamePlan",
    "RenameResult",
    "apply_renames",
    "plan_renames",
]
