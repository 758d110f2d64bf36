"""
Interactive selection and confirmation.

File selection is delegated to ``fzf``: the candidates are piped in one path
per line and the selected paths are read back the same way. Confirmation
prompts accept only the exact answer ``Yes``.
"""
from pathlib import Path
from typing import Callable, Iterable, List

from renime.errors import ExternalToolError, NoMatchError
from renime.utils import logger, system_util
from renime.utils.constants import CONFIRM_ANSWER, FZF_BINARY


class Selector:
    """Interface of the external selector: ordered candidates in, ordered selection out."""

    def select(self, candidates: List[Path]) -> List[Path]:
        raise NotImplementedError


class FzfSelector(Selector):
    """Multi-selection through ``fzf -m``."""

    def __init__(self, binary: str = FZF_BINARY, extra_args: Iterable[str] = ()):
        self.binary = binary
        self.extra_args = list(extra_args)

    def select(self, candidates: List[Path]) -> List[Path]:
        listing = "\n".join(str(c) for c in candidates) + "\n"
        code, out, _ = system_util.run_cmd([self.binary, "-m", *self.extra_args], listing, capture_stderr=False)
        # 1: no match, 130: interrupted
        if code not in (0, 1, 130):
            raise ExternalToolError(f"{self.binary} exited with code {code}")
        selected = parse_selection(out)
        if not selected:
            raise NoMatchError("Nothing selected.")
        return selected


def parse_selection(output: str) -> List[Path]:
    """Parse newline-delimited selector output into paths, skipping blank lines."""
    return [Path(line.strip()) for line in output.splitlines() if line.strip()]


def confirm(question: str, lines: Iterable[str] = (), input_func: Callable[[str], str] = input) -> bool:
    """Show a preview and ask for confirmation. Only the exact answer ``Yes`` confirms."""
    logger.task(question)
    for line in lines:
        logger.safe_print(f"  {line}")
    try:
        answer = input_func(f"Type '{CONFIRM_ANSWER}' to continue: ")
    except EOFError:
        return False
    return answer == CONFIRM_ANSWER
