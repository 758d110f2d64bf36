"""
The filename normalization pipeline.

A ``RenameRequest`` describes one file and the desired naming options;
``build_canonical_filename`` runs it through sanitize -> season tag ->
format -> episode adjustment and returns the canonical name, e.g.
``"My.Show.S01E03.1080p-GROUP.mkv"`` -> ``"My Show - S1E03.mkv"``.

Everything here is pure: same request, same result, no filesystem access.
"""
from dataclasses import dataclass, field

from renime.config import SeasonSpec
from renime.errors import NoEpisodeMarkerError, ValidationError
from renime.rename import formatter, parser
from renime.utils import LogLevel, logger
from renime.utils.constants import DIGIT_RUN_REGEX, EPISODE_TOKEN_REGEX


@dataclass(frozen=True)
class RenameRequest:
    raw_filename: str
    series_name: str | None = None
    season: SeasonSpec = field(default_factory=SeasonSpec)
    extension: str | None = None
    increment: int = 0
    extended: bool = True


def _shift_run(run: str, increment: int) -> str:
    value = int(run) + increment
    if value < 0:
        raise ValidationError(f"Increment {increment} turns episode {run} negative")
    # Keep the zero padding of the original run: 05 + 1 -> 06
    return str(value).zfill(len(run))


def adjust_episode_number(formatted: str, increment: int = 0, extension: str | None = None) -> str:
    """
    Shift the episode number of a formatted name and finalize its extension.

    The episode token (``E<digits>``, optionally ``-<digits>`` up to twice) that
    follows ``" - "`` and the season tag is located; every digit run in it gets
    ``increment`` added independently, so ``E05-06`` + 1 -> ``E06-07``.
    Everything after the token is dropped and ``.<extension>`` is appended,
    using ``extension`` when given and otherwise the extension already at the
    end of ``formatted``.

    Raises:
        NoEpisodeMarkerError: no episode token in ``formatted``.
        ValidationError: the increment would make an episode number negative.
    """
    m = EPISODE_TOKEN_REGEX.search(formatted)
    if not m:
        raise NoEpisodeMarkerError(formatted)

    token = m.group(1)
    adjusted = DIGIT_RUN_REGEX.sub(lambda d: _shift_run(d.group(0), increment), token)

    ext = (extension or "").lstrip(".")
    if not ext:
        _, tail_ext = parser.split_extension(formatted[m.end(1):])
        ext = tail_ext.lstrip(".")

    head = formatted[: m.start(1)]
    if ext:
        return f"{head}{adjusted}.{ext}"
    return f"{head}{adjusted}"


def build_canonical_filename(request: RenameRequest) -> str:
    """
    Compute the canonical ``<Series> - <SeasonTag>E<Episode>.<ext>`` name for a request.

    Raises NoEpisodeMarkerError when no episode number can be located.
    """
    sanitized = parser.sanitize(request.raw_filename, extended=request.extended)
    season_tag = formatter.resolve_season_tag(request.season, request.raw_filename)

    if isinstance(parser.extract_episode(sanitized), parser.Unmatched):
        raise NoEpisodeMarkerError(request.raw_filename)

    formatted = formatter.format_filename(sanitized, request.series_name, season_tag)
    try:
        canonical = adjust_episode_number(formatted, request.increment, request.extension)
    except NoEpisodeMarkerError as e:
        raise NoEpisodeMarkerError(request.raw_filename) from e

    logger.log(
        "rename.canonical",
        LogLevel.TRACE,
        raw=request.raw_filename,
        sanitized=sanitized,
        formatted=formatted,
        canonical=canonical,
    )
    return canonical
