from dataclasses import dataclass, field
from typing import List

# Corpus files are decoded with surrogate escapes, so values that are not
# valid UTF-8 encode back to the bytes they were read from.
ENCODING = "utf-8"
ERRORS = "surrogateescape"


@dataclass
class CorpusEntry:
    """
    Argument values decoded from a single fuzz corpus file.

    Attributes:
        name: Name of the file the entry was read from
        values: Fuzz argument values, in the order they appear in the file.
            Bytes that are not valid UTF-8 are kept as surrogate escapes.
    """

    name: str
    values: List[str] = field(default_factory=list)

    @property
    def arg_count(self) -> int:
        return len(self.values)
