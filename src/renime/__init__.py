"""
Batch renaming of television episode files into a canonical naming scheme.

This package turns noisy episode filenames into the ``Series - SxxEyy.ext``
form and hands the renamed files to ``tvnamer`` for a metadata-driven second
pass. The normalization pipeline is pure; filesystem moves only happen after
an explicit confirmation.

The package is organized into:
- rename: Sanitizing, parsing, formatting and batch renaming of filenames.
- tvnamer: The secondary renamer collaborator and its output parsing.
- utils: Constants, logging, subprocess and file helpers, interactive selection.
- cli: The command-line workflow tying the stages together.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
