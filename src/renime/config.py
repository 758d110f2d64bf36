"""
Run configuration built once from the parsed command line.

``RenimeConfig`` is immutable and passed explicitly to every stage; nothing in
the package reads option values from module globals.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Tuple

from renime.errors import ValidationError
from renime.utils.constants import SEASON_VALUE_REGEX, SERIES_DIR


class SeasonMode(Enum):
    """How the season tag of the canonical name is chosen."""
    DEFAULT = "default"
    EXPLICIT = "explicit"
    NONE = "none"
    KEEP = "keep"


@dataclass(frozen=True)
class SeasonSpec:
    mode: SeasonMode = SeasonMode.DEFAULT
    number: str | None = None

    @classmethod
    def parse(cls, value: str | None) -> "SeasonSpec":
        """
        Parse a ``--season`` value.

        Accepts 1-2 digits (kept verbatim, so ``01`` stays ``01``), ``none``,
        ``keep``, or None for the default season.
        """
        if value is None:
            return cls()
        lowered = value.strip().lower()
        if lowered == "none":
            return cls(SeasonMode.NONE)
        if lowered == "keep":
            return cls(SeasonMode.KEEP)
        if not SEASON_VALUE_REGEX.match(value.strip()):
            raise ValidationError(f"Invalid season '{value}'. Use 1-2 digits, 'keep' or 'none'.")
        return cls(SeasonMode.EXPLICIT, value.strip())


@dataclass(frozen=True)
class RenimeConfig:
    term: str | None = None
    series: str | None = None
    season: SeasonSpec = field(default_factory=SeasonSpec)
    extension: str | None = None
    increment_by: int = 0
    extended: bool = True
    skip_initial_rename: bool = False
    skip_secondary_rename: bool = False
    base_directory: Path = Path(".")
    series_directory: Path = Path(SERIES_DIR)
    tvnamer_args: Tuple[str, ...] = ()


def validate_option_value(option: str, value: str | None) -> str | None:
    """Reject option values that look like another flag."""
    if value is not None and value.startswith("-"):
        raise ValidationError(
            f"Invalid value '{value}' for option '{option}'. Do not use a value that begins with '-'."
        )
    return value


def build_config(args, tvnamer_args=()) -> RenimeConfig:
    """
    Build a validated RenimeConfig from an argparse namespace.

    The series name is made filesystem-safe here so every later stage sees the
    same value. Raises ValidationError for malformed values.
    """
    # Deferred: renime.rename imports this module.
    from renime.rename.parser import safe_filename

    series = validate_option_value("--series", args.series)
    if series is not None:
        series = safe_filename(series.strip())
        if series.startswith("_"):
            series = series[1:]
        series = series or None

    season_value = validate_option_value("--season", args.season)
    if args.no_season:
        season = SeasonSpec(SeasonMode.NONE)
    elif args.keep_season:
        season = SeasonSpec(SeasonMode.KEEP)
    else:
        season = SeasonSpec.parse(season_value)

    extension = validate_option_value("--extension", args.extension)
    if extension is not None:
        extension = extension.lstrip(".") or None

    return RenimeConfig(
        term=args.term,
        series=series,
        season=season,
        extension=extension,
        increment_by=args.increment_by,
        extended=not args.simple,
        skip_initial_rename=args.skip_initial_rename,
        skip_secondary_rename=args.skip_tvnamer,
        base_directory=Path(args.base_dir).expanduser(),
        series_directory=Path(args.series_dir).expanduser(),
        tvnamer_args=tuple(tvnamer_args),
    )
