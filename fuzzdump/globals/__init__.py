"""Types shared across the fuzzdump stages: errors, entries and configuration."""

from .cli_config import CLIConfig
from .corpus_entry import CorpusEntry
from .errors import (
    CorpusError,
    CorpusErrors,
    ErrorKind,
    ReadError,
    WrappedError,
    WriteError,
    is_error,
    is_validation_error,
)

__all__ = [
    "CLIConfig",
    "CorpusEntry",
    "CorpusError",
    "CorpusErrors",
    "ErrorKind",
    "ReadError",
    "WrappedError",
    "WriteError",
    "is_error",
    "is_validation_error",
]
