"""
Client for the external ``tvnamer`` renamer.

tvnamer looks episodes up by series name and moves them into a per-series
directory. It has no machine-readable output, so the dry run is scraped for
three lines: ``Old filename: ...``, ``New filename: ...`` and
``<name> will be moved to <directory>``.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from renime.errors import ExternalToolError
from renime.utils import LogLevel, logger, system_util
from renime.utils.constants import (
    SERIES_NAME_PLACEHOLDER,
    TVNAMER_BINARY,
    TVNAMER_MOVE_MARKER,
    TVNAMER_MOVE_SEPARATOR,
    TVNAMER_NEW_MARKER,
    TVNAMER_OLD_MARKER,
)


@dataclass(frozen=True)
class ProposedRename:
    """What the secondary renamer would do with a file."""

    old_name: str
    new_name: str
    destination_dir: str

    @property
    def destination(self) -> str:
        return f"{self.destination_dir}/{self.new_name}"


def destination_template(series_dir: Path | str) -> str:
    """Move destination with one substitution point for the series name."""
    return f"{Path(series_dir)}/{SERIES_NAME_PLACEHOLDER}"


def _value_after(line: str, marker: str) -> str:
    _, _, value = line.partition(marker)
    return value.lstrip(":").strip()


def parse_dry_run_output(output: str) -> ProposedRename:
    """
    Extract the proposed rename from tvnamer's dry-run output.

    Only lines containing one of the three markers are considered and the last
    of each kind wins. Raises ExternalToolError when the "moved to" line is
    missing or cannot be split into a name and a directory.
    """
    old_line = new_line = move_line = None
    for line in output.splitlines():
        if TVNAMER_OLD_MARKER in line:
            old_line = line
        elif TVNAMER_NEW_MARKER in line:
            new_line = line
        elif TVNAMER_MOVE_MARKER in line:
            move_line = line

    if move_line is None or TVNAMER_MOVE_SEPARATOR not in move_line:
        raise ExternalToolError("tvnamer output has no 'moved to' line")

    moved_name, _, destination_dir = move_line.strip().rpartition(TVNAMER_MOVE_SEPARATOR)
    new_name = moved_name or (_value_after(new_line, TVNAMER_NEW_MARKER) if new_line else "")
    old_name = _value_after(old_line, TVNAMER_OLD_MARKER) if old_line else ""
    if not new_name or not destination_dir:
        raise ExternalToolError(f"Could not parse tvnamer output line: {move_line.strip()}")

    return ProposedRename(old_name=old_name, new_name=new_name, destination_dir=destination_dir)


class SecondaryRenamer:
    """Interface of the metadata-driven second renaming pass."""

    def propose_rename(self, path: Path, destination: str) -> ProposedRename:
        raise NotImplementedError

    def apply_rename(self, path: Path, destination: str) -> str:
        raise NotImplementedError


class TvNamerRenamer(SecondaryRenamer):
    """Runs ``tvnamer`` as a subprocess."""

    def __init__(self, extra_args: Optional[Iterable[str]] = None, binary: str = TVNAMER_BINARY):
        self.binary = binary
        self.extra_args: List[str] = list(extra_args or [])

    def _command(self, flags: List[str], path: Path, destination: str) -> List[str]:
        return [
            self.binary,
            *flags,
            "--move",
            "--movedestination",
            destination,
            *self.extra_args,
            str(path),
        ]

    def propose_rename(self, path: Path, destination: str) -> ProposedRename:
        """Dry-run tvnamer on a file and parse what it would do."""
        cmd = self._command(["--not-batch", "--dry-run", "--selectfirst"], path, destination)
        logger.log("tvnamer.propose", LogLevel.DEBUG, file=str(path), cmd=" ".join(cmd))
        code, out, err = system_util.run_cmd(cmd)
        if code != 0:
            raise ExternalToolError(f"tvnamer dry run failed for {path} (code {code}): {err.strip()}")
        return parse_dry_run_output(out)

    def apply_rename(self, path: Path, destination: str) -> str:
        """Run tvnamer for real on a file and return its output."""
        cmd = self._command(["--batch"], path, destination)
        logger.log("tvnamer.apply", LogLevel.DEBUG, file=str(path), cmd=" ".join(cmd))
        code, out, err = system_util.run_cmd(cmd)
        if code != 0:
            raise ExternalToolError(f"tvnamer failed for {path} (code {code}): {err.strip()}")
        return out
