import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional, Union

from fuzzdump.cli_components.output_formatter import EntryWriter, formatter_for
from fuzzdump.globals.errors import CorpusError, CorpusErrors, WriteError
from fuzzdump.pipeline_stages.reader import EntryReader, VersionOneEntryReader
from fuzzdump.pipeline_stages.scanner import CorpusScanner

logger = logging.getLogger(__name__)


class Pipeline(ABC):
    """
    Interface for corpus dumping pipelines.

    Classes implementing this interface should provide a `process` method
    that dumps a corpus directory and returns the resulting error, if any.
    """

    @abstractmethod
    def process(
        self, writer: BinaryIO, root: Union[str, Path], directory: str = "."
    ) -> Optional[BaseException]:
        """
        Dump the entries of a fuzz corpus directory to writer.

        Args:
            writer: Binary sink the entries are written to.
            root: Root of the file tree the corpus directory is in.
            directory: Path of the corpus directory relative to root.

        Returns:
            None if all the files were dumped, otherwise the error that
            occurred. See :func:`dump_dir` for the details.
        """
        pass


class DefaultPipeline(Pipeline):
    def __init__(self, reader: Optional[EntryReader] = None) -> None:
        self.reader = reader or VersionOneEntryReader()
        self.scanner = CorpusScanner(self.reader)

    def process(
        self, writer: BinaryIO, root: Union[str, Path], directory: str = "."
    ) -> Optional[BaseException]:
        errs = CorpusErrors()

        try:
            files = self.scanner.corpus_files(Path(root) / directory)
        except (OSError, CorpusError) as e:
            return e

        first, files, err = self.scanner.first_valid_entry(files, errs)
        if err is not None:
            return err

        output = EntryWriter(writer, formatter_for(first.arg_count))
        try:
            output.open()
            output.write_entry(first)
            # The first entry has already been dumped, files only has the rest.
            err = self.scanner.dump_entries(output, files, first.arg_count, errs)
            if err is not None:
                return err
            output.close()
        except WriteError as e:
            logger.debug(f"Aborting corpus dump: {e}")
            return e

        return errs.as_error()


def dump_dir(
    writer: BinaryIO, root: Union[str, Path], directory: str = "."
) -> Optional[BaseException]:
    """Write the entries from a fuzz test corpus directory to writer.

    The first valid corpus entry encountered determines the number of fuzz
    arguments all entries should provide, and, consequently, whether to
    format the output as a single or multiple argument corpus.

    If the directory has no files, a CorpusError of ErrorKind.EMPTY_CORPUS is
    returned.

    An entry with a different number of arguments than initially detected is
    not dumped, but reported with an ErrorKind.INCONSISTENT_ARG_COUNT error in
    the CorpusErrors returned after all files in the directory have been
    processed.

    If any validation errors (ErrorKind.MALFORMED_ENTRY or
    ErrorKind.UNSUPPORTED_VERSION) occurred, a CorpusErrors listing them is
    returned after all files in the directory have been processed.

    If no valid corpus files were found, a CorpusErrors ending with an
    ErrorKind.EMPTY_CORPUS error is returned, along with all the validation
    errors that occurred.

    Any other error that occurred during an I/O operation is returned as an
    OSError, possibly wrapped in a ReadError or a WriteError. Writing to a
    closed writer is returned as a WriteError too.

    Values are written byte for byte as they were read, so writer must be a
    binary sink.

    Do use :func:`fuzzdump.is_error` when checking the returned errors.
    """
    return DefaultPipeline().process(writer, root, directory)
