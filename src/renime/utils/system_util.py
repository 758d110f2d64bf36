"""
Utility functions for running external commands and verifying binaries.

Functions:
    - run_cmd: Executes a command and returns its exit code along with its
      standard output and error streams.
    - require_binary: Checks that a binary exists on the system's PATH and
      raises ``ExternalToolError`` if it does not.
"""
import shutil
import subprocess
from typing import List, Optional, Tuple

from renime.errors import ExternalToolError


def run_cmd(
        cmd: List[str], input_text: Optional[str] = None, capture_stderr: bool = True
) -> Tuple[int, str, str]:
    """Run a command and return (code, stdout, stderr).

    Interactive tools that draw on the terminal through stderr should be run
    with ``capture_stderr=False``; stderr is then returned as an empty string.
    """
    try:
        p = subprocess.run(
            cmd,
            input=input_text,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE if capture_stderr else None,
            text=True,
        )
    except OSError as e:
        raise ExternalToolError(f"Could not run '{cmd[0]}': {e}") from e
    return p.returncode, p.stdout, p.stderr or ""


def require_binary(binary: str) -> None:
    """Check if a binary exists on PATH, raise if not found."""
    if shutil.which(binary) is None:
        raise ExternalToolError(f"'{binary}' not found on PATH. Install it first.")
