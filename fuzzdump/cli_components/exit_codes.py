from enum import IntEnum
from typing import Optional

from fuzzdump.globals.errors import ErrorKind, is_error, is_validation_error


class ExitCode(IntEnum):
    """Exit status codes of the fuzzdump command."""

    SUCCESS = 0
    # Some files were invalid, but others could be dumped.
    SOFT = 1
    # No valid corpus files were found.
    EMPTY_CORPUS = 2
    # Another critical error occurred.
    HARD = 3


def exit_code_for(err: Optional[BaseException]) -> ExitCode:
    """Get the exit code for the error a corpus dump resulted in."""
    if err is None:
        return ExitCode.SUCCESS
    if is_error(err, ErrorKind.EMPTY_CORPUS):
        return ExitCode.EMPTY_CORPUS
    if is_validation_error(err):
        return ExitCode.SOFT
    return ExitCode.HARD
