"""Helpers for building fuzz corpus directories and failing output sinks."""

from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

VERSION = "go test fuzz v1"

SINGLE_DATA_1 = "\n\nuint(3)\n\n"
SINGLE_DATA_2 = "uint(5)"
MULTI_DATA_1 = '\n\nstring("foo")\n\nuint(8)\n\n'
MULTI_DATA_2 = 'string("bar")\nuint(13)'

SINGLE_OUT = b"{\n\tuint(3),\n\tuint(5),\n}\n"
MULTI_OUT = b'{{\n\tstring("foo"),\n\tuint(8),\n}, {\n\tstring("bar"),\n\tuint(13),\n}}\n'


def corpus_file(contents: str) -> str:
    """Return the contents of a version 1 corpus file holding contents."""
    return VERSION + "\n" + contents + "\n"


def write_files(root: Path, files: Dict[str, Optional[Union[str, bytes]]]) -> Path:
    """
    Create files under root.

    Args:
        root: Directory to create the files in
        files: Maps relative paths to file contents, or to None for a directory.
            Text contents are written UTF-8 encoded.

    Returns:
        Path: root
    """
    for name, contents in files.items():
        path = root / name
        if contents is None:
            path.mkdir(parents=True, exist_ok=True)
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(contents, str):
            contents = contents.encode("utf-8")
        path.write_bytes(contents)
    return root


class PredicateErrWriter:
    """
    Binary sink that fails the writes for which predicate returns true.

    Successful writes are recorded in `written`.
    """

    def __init__(self, error: Exception, predicate: Callable[[bytes], bool]):
        self.error = error
        self.predicate = predicate
        self.written: List[bytes] = []

    def write(self, data: bytes) -> int:
        if self.predicate(data):
            raise self.error
        self.written.append(data)
        return len(data)

    def getvalue(self) -> bytes:
        return b"".join(self.written)
