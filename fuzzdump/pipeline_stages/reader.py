from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from fuzzdump.globals.corpus_entry import ENCODING, ERRORS, CorpusEntry
from fuzzdump.globals.errors import CorpusError, ErrorKind, quote, read_error

# White space as trimmed by Go's bytes.TrimSpace, i.e. unicode.IsSpace.
SPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class EntryReader(ABC):
    """Interface for readers that decode a single fuzz corpus file."""

    @abstractmethod
    def read(self, path: Path) -> CorpusEntry:
        """Read and decode the corpus file at path.

        Args:
            path: Path to the corpus file.

        Returns:
            The decoded corpus entry.

        Raises:
            ReadError: If the file could not be read, or if it is not a valid
                corpus entry. In the latter case the wrapped error is a
                CorpusError.
        """
        pass


class VersionOneEntryReader(EntryReader):
    """
    Reader for corpus entries in the "go test fuzz v1" encoding.

    The first line of an entry is the version header, each of the following
    non-blank lines holds one fuzz argument value.
    """

    VERSION = "go test fuzz v1"

    def read(self, path: Path) -> CorpusEntry:
        try:
            data = path.read_bytes()
            return self.parse(path.name, data)
        except (OSError, CorpusError) as e:
            raise read_error(e, path.name) from e

    def parse(self, name: str, data: bytes) -> CorpusEntry:
        """Decode the contents of a corpus file.

        Raises:
            CorpusError: If data is not a valid version 1 corpus entry.
        """
        text = data.decode(ENCODING, errors=ERRORS)

        lines = text.split("\n")
        if len(lines) < 2:
            # Not enough lines, so no point checking the version.
            raise CorpusError(ErrorKind.MALFORMED_ENTRY)

        version = lines[0].removesuffix("\r")
        if version != self.VERSION:
            raise CorpusError(ErrorKind.UNSUPPORTED_VERSION, quote(version))

        values = self._values(lines[1:])
        if not values:
            raise CorpusError(ErrorKind.MALFORMED_ENTRY)
        return CorpusEntry(name=name, values=values)

    def _values(self, lines: List[str]) -> List[str]:
        values = (line.strip(SPACE) for line in lines)
        return [value for value in values if value]
