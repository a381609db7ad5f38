"""Pipeline stages for fuzz corpus processing.

This module provides the stages of a corpus dump: reading and validating
single corpus entries, and scanning a corpus directory.
"""

from .reader import EntryReader, VersionOneEntryReader
from .scanner import CorpusScanner

__all__ = [
    "CorpusScanner",
    "EntryReader",
    "VersionOneEntryReader",
]
