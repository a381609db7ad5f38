"""fuzzdump: Go fuzz test corpus dumping CLI tool.

This package decodes a directory of "go test fuzz v1" corpus files into a
readable listing of the fuzz argument values each file encodes. It can be
used both as a CLI tool and as a Python library.

Example:
    CLI usage:
        $ fuzzdump testdata/fuzz/FuzzMyFunc

    Library usage:
        import sys
        from fuzzdump import ErrorKind, dump_dir, is_error

        err = dump_dir(sys.stdout.buffer, "testdata/fuzz/FuzzMyFunc")
        if is_error(err, ErrorKind.EMPTY_CORPUS):
            print("nothing to dump")
"""

from .cli import CLI, StandardCLI
from .globals import (
    CorpusEntry,
    CorpusError,
    CorpusErrors,
    ErrorKind,
    ReadError,
    WrappedError,
    WriteError,
    is_error,
    is_validation_error,
)
from .pipeline import DefaultPipeline, Pipeline, dump_dir

__all__ = [
    # Main dump function
    "dump_dir",

    # Core types
    "CorpusEntry",
    "CorpusError",
    "CorpusErrors",
    "ErrorKind",
    "ReadError",
    "WrappedError",
    "WriteError",
    "is_error",
    "is_validation_error",

    # CLI interface
    "CLI",
    "StandardCLI",

    # Pipeline
    "Pipeline",
    "DefaultPipeline",
]
