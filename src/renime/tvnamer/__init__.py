"""Secondary renaming pass through the external ``tvnamer`` tool.

- client: The ``SecondaryRenamer`` interface, the subprocess-backed
  ``TvNamerRenamer`` and the dry-run output parser.
"""

from .client import (
    ProposedRename,
    SecondaryRenamer,
    TvNamerRenamer,
    destination_template,
    parse_dry_run_output,
)

__all__ = [
    "ProposedRename",
    "SecondaryRenamer",
    "TvNamerRenamer",
    "destination_template",
    "parse_dry_run_output",
]
