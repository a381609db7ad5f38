"""CLI components for output formatting and exit status selection.

This module provides the building blocks for the CLI interface: formatters
that render the dumped corpus entries and the mapping of dump results to
process exit codes.
"""

from .exit_codes import ExitCode, exit_code_for
from .output_formatter import (
    DelimitedFormatter,
    EntryWriter,
    MultiArgFormatter,
    OutputFormatter,
    SingleArgFormatter,
    formatter_for,
)

__all__ = [
    "DelimitedFormatter",
    "EntryWriter",
    "ExitCode",
    "MultiArgFormatter",
    "OutputFormatter",
    "SingleArgFormatter",
    "exit_code_for",
    "formatter_for",
]
