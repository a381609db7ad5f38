"""Error values produced while dumping a fuzz test corpus.

The corpus errors come in four well-known kinds (see :class:`ErrorKind`).
Each is raised as a :class:`CorpusError`, possibly wrapped with a file name
in a :class:`ReadError`. Recoverable errors found while scanning a directory
are collected in a :class:`CorpusErrors` aggregate.

Use :func:`is_error` when checking any of these errors, e.g.:

    err = dump_dir(sys.stdout.buffer, Path("testdata/fuzz/FuzzFoo"))
    if is_error(err, ErrorKind.EMPTY_CORPUS):
        ...
"""

import json
from enum import Enum
from typing import Iterator, List, Optional, Union


class ErrorKind(Enum):
    """Closed set of corpus error identities.

    The value of each member is the message of that kind of error.
    """

    MALFORMED_ENTRY = "must include version and at least one value"
    UNSUPPORTED_VERSION = "unsupported encoding version"
    # Should not occur in practice in corpus data generated by Go.
    INCONSISTENT_ARG_COUNT = "inconsistent arg count in corpus entry"
    EMPTY_CORPUS = "no valid fuzz corpus files in directory"


VALIDATION_KINDS = (
    ErrorKind.MALFORMED_ENTRY,
    ErrorKind.UNSUPPORTED_VERSION,
    ErrorKind.INCONSISTENT_ARG_COUNT,
)


class CorpusError(Exception):
    """An error of one of the well-known :class:`ErrorKind`'s.

    Attributes:
        kind: The identity used when matching this error.
        detail: Optional context appended to the kind message.
    """

    def __init__(self, kind: ErrorKind, detail: Optional[str] = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.detail is None:
            return self.kind.value
        return f"{self.kind.value}: {self.detail}"

    def __repr__(self) -> str:
        return f"CorpusError({self.kind.name}, {self.detail!r})"


class WrappedError(Exception):
    """Adds a context prefix to another error."""

    def __init__(self, context: str, err: BaseException) -> None:
        self.context = context
        self.err = err
        self.__cause__ = err
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.context}: {self.err}"

    def unwrap(self) -> BaseException:
        return self.err


class ReadError(WrappedError):
    """Failure to read or validate a corpus file."""


class WriteError(WrappedError):
    """Failure to write the dump output."""


def read_error(err: BaseException, file_name: str) -> ReadError:
    return ReadError(f"reading {quote(file_name)}", err)


def write_error(err: BaseException) -> WriteError:
    return WriteError("writing output", err)


def quote(text: str) -> str:
    """Double-quote text, escaping any special characters in it.

    Undecodable bytes kept as surrogate escapes are shown as \\x escapes.
    """
    quoted = json.dumps(text, ensure_ascii=False)
    return quoted.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


Target = Union[BaseException, ErrorKind]


class CorpusErrors(Exception):
    """A collection of errors found in the fuzz corpus while reading it.

    An empty collection means there are no errors, and is never returned to
    callers as an error (see :meth:`as_error`).

    The last error in the collection is the one a plain target is matched
    against, and :meth:`unwrap` drops it, so :func:`is_error` walks the
    collection from its most recent error backwards.
    """

    def __init__(self, errors: Optional[List[BaseException]] = None) -> None:
        self.errors: List[BaseException] = list(errors or [])
        super().__init__()

    def __str__(self) -> str:
        if self.empty():
            return "no fuzz corpus errors"
        return "\n\t".join(["fuzz corpus has errors:"] + [str(e) for e in self.errors])

    def __repr__(self) -> str:
        return f"CorpusErrors({self.errors!r})"

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self.errors)

    def empty(self) -> bool:
        return not self.errors

    def last(self) -> Optional[BaseException]:
        """Return the last error, or None if there are no errors."""
        if self.empty():
            return None
        return self.errors[-1]

    def append(self, err: BaseException) -> None:
        self.errors.append(err)

    def as_error(self) -> Optional["CorpusErrors"]:
        """Return self if errors are present, otherwise None."""
        if self.empty():
            return None
        return self

    def matches(self, target: Target) -> bool:
        """Report whether target matches these errors.

        When target is a :class:`CorpusErrors`, it matches if both are empty,
        or if every error in target matches these errors. Any other target
        matches only when it matches the last error.
        """
        if isinstance(target, CorpusErrors):
            if self.empty() or target.empty():
                # TODO Consider matching an empty target against any errors.
                return self.empty() and target.empty()
            return all(is_error(self, err) for err in target.errors)
        if self.empty():
            return False
        return is_error(self.last(), target)

    def unwrap(self) -> Optional["CorpusErrors"]:
        """Return these errors without the last one, or None if that leaves none."""
        if self.empty():
            return None
        return CorpusErrors(self.errors[:-1]).as_error()

    def capture(self, err: Optional[BaseException]) -> Optional[BaseException]:
        """Capture non-critical errors, pass critical ones.

        Args:
            err: Error produced while scanning the corpus, or None.

        Returns:
            None when err is None or a validation error (see
            :func:`is_validation_error`), which gets appended to self.

            Self when err is an :attr:`ErrorKind.EMPTY_CORPUS` error. It is
            appended too, but the corpus is not usable, so the whole
            collection is returned as the error to abort with.

            For a :class:`CorpusErrors` err, each of its errors is captured
            as above, stopping at the first one that yields an error.

            Any other err is returned as it is.
        """
        if err is None:
            return None
        if isinstance(err, CorpusErrors):
            for e in err.errors:
                signal = self.capture(e)
                if signal is not None:
                    return signal
            return None
        if is_validation_error(err):
            self.append(err)
            return None
        if is_error(err, ErrorKind.EMPTY_CORPUS):
            self.append(err)
            return self.as_error()
        return err


def unwrap(err: BaseException) -> Optional[BaseException]:
    """Return the next error in the chain of err, if any."""
    if isinstance(err, (WrappedError, CorpusErrors)):
        return err.unwrap()
    return None


def is_error(err: Optional[BaseException], target: Optional[Target]) -> bool:
    """Report whether any error in the chain of err matches target.

    Target may be an error instance or an :class:`ErrorKind`. A
    :class:`CorpusError` matches by kind, regardless of its detail, so it is
    found even after being wrapped with a file name.
    """
    if err is None or target is None:
        return err is None and target is None
    while err is not None:
        if _same(err, target):
            return True
        if isinstance(err, CorpusErrors) and err.matches(target):
            return True
        err = unwrap(err)
    return False


def _same(err: BaseException, target: Target) -> bool:
    if err is target:
        return True
    if not isinstance(err, CorpusError):
        return False
    if isinstance(target, ErrorKind):
        return err.kind is target
    if isinstance(target, CorpusError):
        return err.kind is target.kind
    return False


def is_validation_error(err: Optional[BaseException]) -> bool:
    """Report whether err is one of the entry validation errors."""
    return any(is_error(err, kind) for kind in VALIDATION_KINDS)
