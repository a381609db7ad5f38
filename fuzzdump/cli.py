import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional

from rich.console import Console

from fuzzdump.cli_components.exit_codes import exit_code_for
from fuzzdump.globals.cli_config import CLIConfig
from fuzzdump.pipeline import DefaultPipeline, Pipeline

logger = logging.getLogger(__name__)


class MissingCorpusDirError(Exception):
    """Raised when no corpus directory was given to dump."""

    def __init__(self) -> None:
        super().__init__("directory path argument required")


class CLI(ABC):
    """Interface for CLI implementations."""

    @abstractmethod
    def run(self) -> int:
        """
        Run the CLI and return exit code.

        Returns:
            int: Exit code (0=success, 1=some files invalid,
                2=no valid corpus files, 3=other errors)
        """
        pass


class StandardCLI(CLI):
    """
    Standard CLI implementation with separated concerns.

    Coordinates the corpus dump using pluggable components:
    - Pipeline: scans the corpus directory and formats its entries
    - stdout: binary sink the dumped entries are written to
    - console: rich console errors are reported on
    """

    def __init__(
        self,
        config: CLIConfig,
        pipeline: Optional[Pipeline] = None,
        stdout: Optional[BinaryIO] = None,
        console: Optional[Console] = None,
    ):
        """
        Initialize CLI with configuration and optional component overrides.

        Args:
            config: CLI configuration (corpus directory, program name)
            pipeline: Dump pipeline (defaults to DefaultPipeline)
            stdout: Output sink (defaults to the binary buffer of sys.stdout
                at the time of the run)
            console: Error console (defaults to a Console on stderr)
        """
        self.config = config
        self.pipeline = pipeline or DefaultPipeline()
        self.stdout = stdout
        self.console = console or Console(stderr=True, highlight=False)

    def run(self) -> int:
        """Main CLI execution method.

        Dumps the entries of the configured corpus directory to stdout and
        reports the resulting error, if any, to the console.

        Returns:
            int: Exit code indicating the dump results:
                - 0: Success
                - 1: Some files were invalid, but others could be dumped
                - 2: No valid corpus files were found
                - 3: Another critical error occurred
        """
        err = self._dump()
        if err is not None:
            self._display_error(err)
        exit_code = exit_code_for(err)
        logger.debug(f"Exiting with {exit_code.name}")
        return int(exit_code)

    def _dump(self) -> Optional[BaseException]:
        """Dump the corpus directory, returning the resulting error."""
        if not self.config.corpus_dir:
            return MissingCorpusDirError()
        stdout = self.stdout or sys.stdout.buffer
        return self.pipeline.process(stdout, Path(self.config.corpus_dir), ".")

    def _display_error(self, err: BaseException) -> None:
        """Report err on the console, prefixed with the program name."""
        self.console.print(
            f"{self.config.prog_name}: {err}",
            style="red",
            markup=False,
            soft_wrap=True,
        )
