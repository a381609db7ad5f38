"""Shared test configuration and fixtures for fuzzdump tests."""

from pathlib import Path

import pytest

from fuzzdump.pipeline_stages.reader import VersionOneEntryReader
from tests.helper import (
    MULTI_DATA_1,
    MULTI_DATA_2,
    SINGLE_DATA_1,
    SINGLE_DATA_2,
    VERSION,
    corpus_file,
    write_files,
)


@pytest.fixture
def corpus_root(tmp_path: Path) -> Path:
    """File tree with corpus directories of all the interesting shapes."""
    return write_files(
        tmp_path,
        {
            "empty": None,
            "bar": "",
            "bad/badVer": "foo\n",
            "bad/verOnly": VERSION,
            "bad/noArgs": VERSION + "\n",
            "bad/emptyArgs": corpus_file(""),
            "single/1": corpus_file(SINGLE_DATA_1),
            "single/2": corpus_file(SINGLE_DATA_2),
            "multi/1": corpus_file(MULTI_DATA_1),
            "multi/2": corpus_file(MULTI_DATA_2),
            "badMulti/1": corpus_file(""),
            "badMulti/2": corpus_file(MULTI_DATA_1),
            "badMulti/3": corpus_file(MULTI_DATA_2),
            "badMulti/4": corpus_file(""),
            "multi-in-single/1": corpus_file(SINGLE_DATA_1),
            "multi-in-single/2": corpus_file(MULTI_DATA_1),
            "multi-in-single/3": corpus_file(SINGLE_DATA_2),
            "single-in-multi/1": corpus_file(MULTI_DATA_1),
            "single-in-multi/2": corpus_file(SINGLE_DATA_1),
            "single-in-multi/3": corpus_file(MULTI_DATA_2),
        },
    )


@pytest.fixture
def reader() -> VersionOneEntryReader:
    """Version 1 corpus entry reader."""
    return VersionOneEntryReader()
