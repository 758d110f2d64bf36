#!/usr/bin/env python3
"""
renime: rename episode files to ``Series - SxxEyy.ext`` and hand them to tvnamer.

Workflow:
1. List the files of the base directory matching the search term.
2. Let the user pick files with fzf.
3. Preview the canonical names and ask for confirmation (``Yes``).
4. Rename the files; failed moves are reported and skipped.
5. Dry-run tvnamer on every renamed file and preview where it would go.
6. Ask for confirmation again and run tvnamer for real.

Everything after ``--`` is passed to tvnamer unchanged.
"""
import argparse
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import renime as renime_module
from renime.config import RenimeConfig, build_config
from renime.errors import ExternalToolError, NoMatchError, RenimeError, UserAbort
from renime.rename import batch
from renime.tvnamer import SecondaryRenamer, TvNamerRenamer, destination_template
from renime.utils import LogLevel, file_util, logger, system_util
from renime.utils.constants import FZF_BINARY, SERIES_DIR, TVNAMER_BINARY
from renime.utils.selector import FzfSelector, Selector, confirm


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="renime",
        description="Rename TV episode files to 'Series - SxxEyy.ext', then move them into place with tvnamer.",
        epilog="Example: renime 'my show' --series 'My Show' --season 2 -- --language en",
    )
    parser.add_argument("term", nargs="?", help="Case-insensitive search term used to pre-filter files")
    parser.add_argument("--series", help="Series name to use instead of the one found in the filename")
    parser.add_argument("--season", help="Season number (1-2 digits), 'keep' to keep each file's own, or 'none'")
    parser.add_argument("--no-season", action="store_true", help="Leave the season tag out of the new names")
    parser.add_argument("--keep-season", action="store_true", help="Keep the season marker found in each filename")
    parser.add_argument("--extension", help="Extension for the new names (default: keep the original)")
    parser.add_argument("--increment-by", type=int, default=0, help="Add this number to every episode number")
    parser.add_argument(
        "--simple", action="store_true", help="Only fold underscores and keep 'Part N' markers when sanitizing"
    )
    parser.add_argument("--skip-initial-rename", action="store_true", help="Send the selected files straight to tvnamer")
    parser.add_argument("--skip-tvnamer", action="store_true", help="Stop after the initial rename")
    parser.add_argument("--base-dir", default=".", help="Directory to search for files (default: current directory)")
    parser.add_argument(
        "--series-dir",
        default=SERIES_DIR,
        help="Directory receiving the per-series folders created by tvnamer (default: $SERIES_DIR or '.')",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {renime_module.__version__}")
    return parser


def split_passthrough(argv: Sequence[str]) -> tuple[List[str], List[str], bool]:
    """Split argv at ``--``. Returns (own args, tvnamer args, whether ``--`` was present)."""
    argv = list(argv)
    if "--" not in argv:
        return argv, [], False
    i = argv.index("--")
    return argv[:i], argv[i + 1:], True


def run_initial_rename(selected: List[Path], config: RenimeConfig, input_func: Callable[[str], str]) -> List[Path]:
    """Plan, confirm and apply the canonical renames. Returns the new paths of the renamed files."""
    plan = batch.plan_renames(selected, config)
    for rejected in plan.rejected:
        logger.missing(rejected.filename, f"skipped: {rejected.reason}")

    if not plan.renames:
        raise NoMatchError("None of the selected files has an episode number.")

    if not confirm("Confirm new file names...", plan.preview_lines(), input_func=input_func):
        raise UserAbort()

    report = batch.apply_renames(plan)
    for failure in report.failures:
        logger.error(str(failure.error))

    logger.log(
        "rename.end",
        LogLevel.INFO,
        renamed=len(report.outcomes),
        failed=len(report.failures),
        rejected=len(report.rejected),
    )
    return report.renamed_paths


def run_secondary_rename(
        paths: List[Path], config: RenimeConfig, renamer: SecondaryRenamer, input_func: Callable[[str], str]
) -> int:
    """Preview and apply tvnamer on every path. A file tvnamer fails on is reported and skipped.

    Returns the number of files tvnamer renamed.
    """
    logger.safe_print()
    logger.task("Processing files with tvnamer...")
    destination = destination_template(config.series_directory)

    proposals = []
    failed = 0
    renamed = 0
    for path in paths:
        try:
            proposal = renamer.propose_rename(path, destination)
        except ExternalToolError as e:
            logger.error(str(e))
            failed += 1
            continue
        proposals.append((path, proposal))

    if not proposals:
        raise NoMatchError("tvnamer could not rename any of the files.")

    lines = [f"{path} -> {proposal.destination}" for path, proposal in proposals]
    if not confirm("Confirm TVrename", lines, input_func=input_func):
        raise UserAbort()

    logger.safe_print()
    for path, _ in proposals:
        try:
            output = renamer.apply_rename(path, destination)
        except ExternalToolError as e:
            logger.error(str(e))
            failed += 1
            continue
        renamed += 1
        if output.strip():
            logger.safe_print(output.rstrip())

    logger.log("tvnamer.end", LogLevel.INFO, renamed=renamed, failed=failed)
    return renamed


def run(
        config: RenimeConfig,
        selector: Selector,
        renamer: Optional[SecondaryRenamer],
        input_func: Callable[[str], str] = input,
) -> int:
    """Run the whole workflow for a configuration. Raises RenimeError on fatal errors."""
    if config.term:
        logger.task("Search term:", config.term)
    else:
        logger.task("Awaiting user selection...")

    candidates = file_util.find_candidates(config.base_directory, config.term)
    selected = selector.select(candidates)

    if config.skip_initial_rename:
        paths = selected
    else:
        paths = run_initial_rename(selected, config, input_func)

    if not paths or config.skip_secondary_rename or renamer is None:
        return 0

    run_secondary_rename(paths, config, renamer, input_func)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    own_args, tvnamer_args, passthrough = split_passthrough(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(own_args)
    if passthrough:
        args.skip_tvnamer = False

    logger.set_log_level(LogLevel.DEBUG if args.debug else LogLevel.INFO)

    try:
        config = build_config(args, tvnamer_args)
        system_util.require_binary(FZF_BINARY)
        renamer = None
        if not config.skip_secondary_rename:
            system_util.require_binary(TVNAMER_BINARY)
            renamer = TvNamerRenamer(config.tvnamer_args)
    except ExternalToolError as e:
        logger.error(str(e))
        return 2
    except RenimeError as e:
        logger.error(str(e))
        return 1

    try:
        return run(config, FzfSelector(), renamer)
    except RenimeError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
