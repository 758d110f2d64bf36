# python
"""Batch rename utilities for a selection of episode files.

A batch is planned first (canonical name per selected file, rejects for files
without an episode number), shown to the user, and only then applied. Moves
are best-effort: a failed move is recorded in the report and the batch goes
on. Moves already performed are never rolled back.
"""
from dataclasses import dataclass, field
from pathlib import Path

from tqdm import tqdm

from renime.config import RenimeConfig
from renime.errors import FilesystemMoveError, ValidationError
from renime.rename.core import RenameRequest, build_canonical_filename
from renime.utils import LogLevel, file_util, logger


@dataclass(frozen=True)
class RenameOutcome:
    """A file that was successfully renamed."""

    original_path: Path
    new_path: Path


@dataclass(frozen=True)
class RenameResult:
    """Per-file result of the move step: an outcome or the error that prevented it."""

    source: Path
    target: Path
    outcome: RenameOutcome | None = None
    error: FilesystemMoveError | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is not None


@dataclass(frozen=True)
class RejectedFile:
    """A selected file left out of the batch, with the reason."""

    path: Path
    error: ValidationError

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def reason(self) -> str:
        return str(self.error)


@dataclass
class RenamePlan:
    """Proposed (source, target) pairs plus the files rejected while planning."""

    renames: list[tuple[Path, Path]] = field(default_factory=list)
    rejected: list[RejectedFile] = field(default_factory=list)

    def preview_lines(self) -> list[str]:
        return [f"{old} -> {new}" for old, new in self.renames]


@dataclass
class BatchReport:
    results: list[RenameResult] = field(default_factory=list)
    rejected: list[RejectedFile] = field(default_factory=list)

    @property
    def outcomes(self) -> list[RenameOutcome]:
        return [r.outcome for r in self.results if r.ok]

    @property
    def failures(self) -> list[RenameResult]:
        return [r for r in self.results if not r.ok]

    @property
    def renamed_paths(self) -> list[Path]:
        """New paths of the successful moves, in batch order."""
        return [o.new_path for o in self.outcomes]


def request_for(path: Path, config: RenimeConfig) -> RenameRequest:
    """Build the RenameRequest for one selected file."""
    return RenameRequest(
        raw_filename=Path(path).name,
        series_name=config.series,
        season=config.season,
        extension=config.extension,
        increment=config.increment_by,
        extended=config.extended,
    )


def plan_renames(paths: list[Path], config: RenimeConfig) -> RenamePlan:
    """Compute the canonical name of every selected file without touching the filesystem.

    Files with no recognizable episode number, or whose episode number the
    increment would make negative, are left out of ``renames`` and collected
    in ``rejected``; the rest of the batch is planned as usual.
    """
    plan = RenamePlan()
    for path in paths:
        path = Path(path)
        try:
            new_name = build_canonical_filename(request_for(path, config))
        except ValidationError as e:
            logger.log("rename.plan.rejected", LogLevel.WARN, file=path.name, reason=str(e))
            plan.rejected.append(RejectedFile(path, e))
            continue
        plan.renames.append((path, path.with_name(new_name)))
        logger.log("rename.plan", LogLevel.DEBUG, file=path.name, new=new_name)
    return plan


def apply_renames(plan: RenamePlan) -> BatchReport:
    """Perform the moves of a confirmed plan, one file at a time.

    Args:
        plan (RenamePlan): The plan the user confirmed.

    Returns:
        BatchReport: One RenameResult per planned rename, in plan order.
    """
    report = BatchReport(rejected=list(plan.rejected))
    for old, new in tqdm(plan.renames, desc="Renaming files", disable=len(plan.renames) < 2):
        if old == new:
            report.results.append(RenameResult(old, new, outcome=RenameOutcome(old, new)))
            continue
        try:
            file_util.move_file(old, new)
        except FilesystemMoveError as e:
            logger.log("rename.move.fail", LogLevel.ERROR, file=str(old), target=str(new), reason=e.reason)
            report.results.append(RenameResult(old, new, error=e))
            continue
        logger.log("rename.move", LogLevel.DEBUG, file=str(old), target=str(new))
        report.results.append(RenameResult(old, new, outcome=RenameOutcome(old, new)))
    return report
