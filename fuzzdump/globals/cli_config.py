from dataclasses import dataclass
from typing import Optional


@dataclass
class CLIConfig:
    """
    Configuration for CLI operations.

    Attributes:
        corpus_dir: Path to the fuzz test corpus directory to dump
        prog_name: Program name to prefix error reports with
        verbose: Whether to log the progress of the corpus scan
    """

    corpus_dir: Optional[str] = None
    prog_name: str = "fuzzdump"
    verbose: bool = False
