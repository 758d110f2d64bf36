"""
Filesystem helpers for locating candidate files and moving them.

These are the only functions in the package that touch the filesystem; the
normalization pipeline itself stays pure.
"""
import shutil
from pathlib import Path
from typing import List

from renime.errors import FilesystemMoveError, NoMatchError


def find_candidates(base_dir: Path, term: str | None = None) -> List[Path]:
    """
    List the entries directly inside ``base_dir`` whose name contains ``term``.

    Matching is a case-insensitive substring match; no term matches everything.
    Raises NoMatchError when nothing is found.
    """
    base = Path(base_dir)
    if not base.is_dir():
        raise NoMatchError(f"Folder {base} does not exist")

    needle = (term or "").lower()
    found = sorted(p for p in base.iterdir() if needle in p.name.lower())
    if not found:
        raise NoMatchError("No files found.")
    return found


def move_file(source: Path, target: Path) -> Path:
    """
    Move ``source`` to ``target`` without overwriting an existing file.

    Raises FilesystemMoveError when the source is missing, the target already
    exists or the move itself fails.
    """
    source, target = Path(source), Path(target)
    if not source.exists():
        raise FilesystemMoveError(source, target, "source does not exist")
    if target.exists() and source.resolve() != target.resolve():
        raise FilesystemMoveError(source, target, "destination already exists")
    try:
        shutil.move(str(source), str(target))
    except (OSError, shutil.Error) as e:
        raise FilesystemMoveError(source, target, str(e)) from e
    return target
