import logging
from pathlib import Path
from typing import List, Optional, Tuple

from fuzzdump.cli_components.output_formatter import EntryWriter
from fuzzdump.globals.corpus_entry import CorpusEntry
from fuzzdump.globals.errors import (
    CorpusError,
    CorpusErrors,
    ErrorKind,
    ReadError,
    read_error,
)
from fuzzdump.pipeline_stages.reader import EntryReader

logger = logging.getLogger(__name__)


class CorpusScanner:
    """
    Scans the files of a fuzz corpus directory.

    Recoverable errors are captured in the CorpusErrors passed to each scan
    phase. A phase returns an error only when the scan must be aborted.
    """

    def __init__(self, reader: EntryReader) -> None:
        self.reader = reader

    def corpus_files(self, directory: Path) -> List[Path]:
        """Return the regular files in directory, ordered by name.

        Raises:
            OSError: If the directory could not be listed.
            CorpusError: An ErrorKind.EMPTY_CORPUS one, if there are no files.
        """
        files = sorted(
            (p for p in directory.iterdir() if p.is_file() and not p.is_symlink()),
            key=lambda p: p.name,
        )
        logger.debug(f"Found {len(files)} files in {directory}")
        if not files:
            raise CorpusError(ErrorKind.EMPTY_CORPUS)
        return files

    def first_valid_entry(
        self, files: List[Path], errs: CorpusErrors
    ) -> Tuple[Optional[CorpusEntry], List[Path], Optional[BaseException]]:
        """Find the first valid corpus entry in files.

        Args:
            files: Corpus files, in the order to scan them.
            errs: Collects the errors of the files preceding the first valid one.

        Returns:
            The first valid entry, the files after the one it was read from,
            and None. If the scan must be aborted, no entry, no files and the
            error to abort with, which is errs itself when no valid entry was
            found.
        """
        for i, path in enumerate(files):
            try:
                entry = self.reader.read(path)
            except ReadError as e:
                if (signal := self._capture(errs, e)) is not None:
                    return None, [], signal
                continue
            logger.debug(f"Using {entry.arg_count} args per entry, as found in {entry.name}")
            return entry, files[i + 1 :], None

        logger.debug("No valid corpus entries found")
        return None, [], errs.capture(CorpusError(ErrorKind.EMPTY_CORPUS))

    def dump_entries(
        self,
        writer: EntryWriter,
        files: List[Path],
        arg_count: int,
        errs: CorpusErrors,
    ) -> Optional[BaseException]:
        """Write the entries of files that have arg_count arguments each.

        Entries with a different number of arguments are skipped and reported
        in errs.

        Returns:
            The error to abort with, or None.

        Raises:
            WriteError: If writing to the output failed.
        """
        for path in files:
            try:
                entry = self.reader.read(path)
            except ReadError as e:
                if (signal := self._capture(errs, e)) is not None:
                    return signal
                continue  # Move right on to the next file.
            if entry.arg_count != arg_count:
                err = CorpusError(
                    ErrorKind.INCONSISTENT_ARG_COUNT,
                    f"want {arg_count}, got {entry.arg_count}",
                )
                self._capture(errs, read_error(err, entry.name))
                continue  # Skip this file.
            writer.write_entry(entry)
        return None

    def _capture(self, errs: CorpusErrors, err: BaseException) -> Optional[BaseException]:
        signal = errs.capture(err)
        if signal is None:
            logger.debug(f"Skipping corpus file: {err}")
        else:
            logger.debug(f"Aborting corpus scan: {err}")
        return signal
