"""
Provides structured logging and styled console narration.

Structured events carry UTC timestamps, log levels and key-value pairs for
easier parsing. Narration for the interactive workflow goes through ``task``
(informational, stdout) and ``error`` (error-styled, stderr) so the two streams
stay distinct.
"""
import sys
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict

from tqdm import tqdm

from renime.utils.constants import BLUE, BOLD, RED_BOLD, RED_UNDERLINED, RESET

_separator = " | "


class LogLevel(Enum):
    """Log level enumeration."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


_current_level = LogLevel.INFO


def set_log_level(level: LogLevel) -> None:
    """Set the current log level."""
    global _current_level
    _current_level = level


def _format_kv(data: Dict[str, Any]) -> str:
    """Format key-value pairs for logging."""
    parts = []
    for key, value in data.items():
        if isinstance(value, str):
            # Escape quotes and newlines to keep log entries single-line.
            escaped = value.replace("\r", "\\r").replace("\n", "\\n")
            escaped = escaped.replace('"', '\\"')
            parts.append(f'{key}="{escaped}"')
        elif value is None:
            parts.append(f'{key}=null')
        elif isinstance(value, bool):
            parts.append(f'{key}={str(value).lower()}')
        else:
            parts.append(f'{key}={value}')
    return _separator.join(parts)


def _write_line(text: str, file=None) -> None:
    tqdm.write(text, file=file or sys.stdout)


def _style(text: str, codes: str, stream) -> str:
    """Wrap text in ANSI codes when the stream is a terminal."""
    if getattr(stream, "isatty", lambda: False)():
        return f"{codes}{text}{RESET}"
    return text


def _should_log(level: LogLevel) -> bool:
    """Check if a message at the given level should be logged."""
    return level.value >= _current_level.value


def log(event: str, level: LogLevel = LogLevel.INFO, **kwargs) -> None:
    """
    Structured logging function.

    Args:
        event: Event name (e.g., 'rename.plan', 'tvnamer.propose')
        level: Log level (TRACE, DEBUG, INFO, WARN, ERROR)
        **kwargs: Key-value pairs to log
    """
    if not _should_log(level):
        return

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    header = f"{timestamp}{_separator}[{level.name}]{_separator}{event}"
    kv_str = _format_kv(kwargs) if kwargs else ""
    stream = sys.stderr if level.value >= LogLevel.WARN.value else sys.stdout

    if kv_str:
        _write_line(f"{header}{_separator}{kv_str}", file=stream)
    else:
        _write_line(header, file=stream)


def safe_print(*args, **kwargs) -> None:
    """Print that plays well with active progress bars."""
    stream = kwargs.pop("file", None) or sys.stdout
    _write_line(" ".join(str(a) for a in args), file=stream)


def task(*args) -> None:
    """Announce a workflow step: ``==> message``."""
    stream = sys.stdout
    arrow = _style("==>", BLUE, stream)
    message = _style(" ".join(str(a) for a in args), BOLD, stream)
    _write_line(f"{arrow} {message}", file=stream)


def missing(name: str, *details) -> None:
    """Report an item that could not be processed: ``✘ name details``."""
    stream = sys.stdout
    mark = _style("\u2718", RED_BOLD, stream)
    text = " ".join([_style(name, BOLD, stream), *(str(d) for d in details)])
    _write_line(f"{mark} {text}", file=stream)


def error(*args) -> None:
    """Write an error message to stderr: ``Error: message``."""
    stream = sys.stderr
    label = _style("Error", RED_UNDERLINED, stream)
    message = " ".join(str(a) for a in args) if args else "Something wrong happened!"
    _write_line(f"{label}: {message}", file=stream)
