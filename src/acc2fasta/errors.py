"""Exceptions raised by acc2fasta.

Every fatal condition of a run is an ``Acc2FastaError``; the CLI reports it
and exits with ``exit_code``. Non-fatal conditions (malformed input lines,
an unwritable incidence log) are logged as warnings instead.
"""

from typing import Optional


class Acc2FastaError(Exception):
    """Base class for fatal acc2fasta errors."""

    exit_code = 1

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class MissingFileError(Acc2FastaError):
    """A named input file does not exist."""

    def __init__(self, path: str):
        super().__init__(f"{path} was not found", path=path)


class InputReadError(Acc2FastaError):
    """An input file exists but could not be opened."""

    def __init__(self, path: str, reason: str = ""):
        message = f"{path} could not be opened"
        if reason:
            message += f" ({reason})"
        super().__init__(message, path=path)


class UnsupportedFileTypeError(Acc2FastaError):
    """The query file is neither CSV nor TXT."""

    def __init__(self, path: str):
        super().__init__(
            f"Please provide a CSV or TXT file of accession numbers (got {path})",
            path=path
        )


class UserRejectedParsing(Acc2FastaError):
    """The user answered "n" at a parse confirmation prompt."""


class OutputWriteError(Acc2FastaError):
    """The FASTA output file could not be opened or written."""

    def __init__(self, path: str, reason: str = ""):
        message = f"{path} could not be opened"
        if reason:
            message += f" ({reason})"
        super().__init__(message, path=path)
