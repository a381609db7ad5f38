"""Formatting of dumped corpus entries.

The output of a single-argument corpus is similar to a plain Go slice with
the type omitted, e.g.:

    {
    	int(2),
    	int(3),
    }

The output of a multiple-argument corpus is similar to a slice of structs,
again, with the type omitted, e.g.:

    {{
    	int(8),
    	string("foo"),
    }, {
    	int(13),
    	string("bar"),
    }}
"""

from abc import ABC, abstractmethod
from typing import BinaryIO

from fuzzdump.globals.corpus_entry import ENCODING, ERRORS, CorpusEntry
from fuzzdump.globals.errors import write_error


class OutputFormatter(ABC):
    """Interface for formatting dumped corpus entries."""

    @abstractmethod
    def format_open(self) -> str:
        """Format the opening delimiter of the dump."""
        pass

    @abstractmethod
    def format_separator(self) -> str:
        """Format the delimiter between two entries, if any."""
        pass

    @abstractmethod
    def format_value(self, value: str) -> str:
        """Format a single argument value."""
        pass

    @abstractmethod
    def format_close(self) -> str:
        """Format the closing delimiter of the dump."""
        pass


class DelimitedFormatter(OutputFormatter):
    """
    Formatter that wraps entries in fixed delimiter tokens.

    Each token is emitted on a line of its own, values are emitted verbatim,
    indented with a tab and followed by a comma.
    """

    OPEN = "{"
    SEPARATOR = ""
    CLOSE = "}"

    def format_open(self) -> str:
        return f"{self.OPEN}\n"

    def format_separator(self) -> str:
        if not self.SEPARATOR:
            return ""
        return f"{self.SEPARATOR}\n"

    def format_value(self, value: str) -> str:
        return f"\t{value},\n"

    def format_close(self) -> str:
        return f"{self.CLOSE}\n"


class SingleArgFormatter(DelimitedFormatter):
    """Formats all values of a single-argument corpus as one flat list."""


class MultiArgFormatter(DelimitedFormatter):
    """Formats each entry of a multiple-argument corpus as a group of its own."""

    OPEN = "{{"
    SEPARATOR = "}, {"
    CLOSE = "}}"


def formatter_for(arg_count: int) -> OutputFormatter:
    """Return the formatter suitable for entries of arg_count arguments."""
    if arg_count > 1:
        return MultiArgFormatter()
    return SingleArgFormatter()


class EntryWriter:
    """
    Writes formatted corpus entries to a binary sink.

    Values are encoded back to the exact bytes they were read from. Every
    failure to write to the sink, including a sink that was already closed,
    is raised as a WriteError.
    """

    def __init__(self, sink: BinaryIO, formatter: OutputFormatter) -> None:
        self.sink = sink
        self.formatter = formatter
        self.entries_written = 0

    def open(self) -> None:
        self._write(self.formatter.format_open())

    def write_entry(self, entry: CorpusEntry) -> None:
        separator = self.formatter.format_separator()
        if self.entries_written and separator:
            self._write(separator)
        for value in entry.values:
            self._write(self.formatter.format_value(value))
        self.entries_written += 1

    def close(self) -> None:
        self._write(self.formatter.format_close())

    def _write(self, text: str) -> None:
        try:
            self.sink.write(text.encode(ENCODING, errors=ERRORS))
        except (OSError, ValueError) as e:
            raise write_error(e) from e
