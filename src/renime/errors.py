"""
Exception hierarchy for the renaming workflow.

Fatal errors stop the command with exit code 1. Per-file errors
(``NoEpisodeMarkerError``, ``FilesystemMoveError``, ``ExternalToolError`` in the
tvnamer stage) are reported and the batch moves on to the next file.
"""


class RenimeError(Exception):
    """Base exception for all renime errors."""

    pass


class ValidationError(RenimeError):
    """Exception for malformed configuration or option values."""

    pass


class NoMatchError(RenimeError):
    """Exception for when no candidate files are found or selected."""

    pass


class NoEpisodeMarkerError(ValidationError):
    """Exception for a filename in which no episode number could be located."""

    def __init__(self, filename: str, message: str | None = None):
        self.filename = filename
        super().__init__(message or f"No episode number found in '{filename}'")


class FilesystemMoveError(RenimeError):
    """Exception for a single rename/move that failed."""

    def __init__(self, source, target, reason: str):
        self.source = source
        self.target = target
        self.reason = reason
        super().__init__(f"Failed to rename {source} -> {target}: {reason}")


class UserAbort(RenimeError):
    """Exception for a rejected confirmation prompt."""

    def __init__(self, message: str = "Aborted by user"):
        super().__init__(message)


class ExternalToolError(RenimeError):
    """Exception for a failed or unparsable external tool invocation."""

    pass
