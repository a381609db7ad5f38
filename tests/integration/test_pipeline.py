"""Integration tests for dumping corpus directories."""

import io
from pathlib import Path

import pytest

from fuzzdump import CorpusError, CorpusErrors, ErrorKind, WriteError, dump_dir, is_error
from fuzzdump.pipeline import DefaultPipeline
from tests.helper import MULTI_OUT, SINGLE_OUT, PredicateErrWriter, corpus_file, write_files


class TestDumpDir:
    """Integration tests for dump_dir on the shared corpus tree."""

    def test_absent(self, corpus_root: Path):
        """Test that listing failures are returned unchanged."""
        out = io.BytesIO()

        err = dump_dir(out, corpus_root, "foo")

        assert isinstance(err, FileNotFoundError)
        assert out.getvalue() == b""

    def test_no_files(self, corpus_root: Path):
        """Test that a directory without files is an empty corpus."""
        out = io.BytesIO()

        err = dump_dir(out, corpus_root, "empty")

        assert isinstance(err, CorpusError)
        assert is_error(err, ErrorKind.EMPTY_CORPUS)
        assert out.getvalue() == b""

    def test_not_a_corpus_dir(self, corpus_root: Path):
        """Test that a directory without valid files reports every invalid one."""
        out = io.BytesIO()

        err = dump_dir(out, corpus_root, ".")

        assert isinstance(err, CorpusErrors)
        assert is_error(err, ErrorKind.EMPTY_CORPUS)
        assert is_error(err, ErrorKind.MALFORMED_ENTRY)
        assert [str(e) for e in err] == [
            'reading "bar": must include version and at least one value',
            "no valid fuzz corpus files in directory",
        ]
        assert out.getvalue() == b""

    def test_all_files_invalid(self, corpus_root: Path):
        """Test that an all-invalid corpus keeps every validation error."""
        err = dump_dir(io.BytesIO(), corpus_root, "bad")

        assert isinstance(err, CorpusErrors)
        assert len(err.errors) == 5
        assert is_error(err, ErrorKind.EMPTY_CORPUS)
        assert is_error(err, ErrorKind.UNSUPPORTED_VERSION)
        assert 'reading "badVer": unsupported encoding version: "foo"' in str(err)

    def test_single_arg(self, corpus_root: Path):
        """Test dumping a single-argument corpus."""
        out = io.BytesIO()

        err = dump_dir(out, corpus_root, "single")

        assert err is None
        assert out.getvalue() == SINGLE_OUT

    def test_multi_arg(self, corpus_root: Path):
        """Test dumping a multiple-argument corpus."""
        out = io.BytesIO()

        err = dump_dir(out, corpus_root / "multi")

        assert err is None
        assert out.getvalue() == MULTI_OUT

    def test_bad_files_in_multi_arg(self, corpus_root: Path):
        """Test that valid entries are dumped along with the errors of invalid ones."""
        out = io.BytesIO()

        err = dump_dir(out, str(corpus_root), "badMulti")

        assert isinstance(err, CorpusErrors)
        assert is_error(err, ErrorKind.MALFORMED_ENTRY)
        assert err
        assert not is_error(err, ErrorKind.EMPTY_CORPUS)
        assert len(err.errors) == 2
        assert out.getvalue() == MULTI_OUT

    @pytest.mark.parametrize(
        "directory, detail, expected_out",
        [
            pytest.param("multi-in-single", "want 1, got 2", SINGLE_OUT, id="multi arg in single arg"),
            pytest.param("single-in-multi", "want 2, got 1", MULTI_OUT, id="single arg in multi arg"),
        ],
    )
    def test_inconsistent_arg_count(self, corpus_root: Path, directory, detail, expected_out):
        """Test that entries with another arg count than the first are not dumped."""
        out = io.BytesIO()

        err = dump_dir(out, corpus_root, directory)

        assert is_error(err, ErrorKind.INCONSISTENT_ARG_COUNT)
        assert detail in str(err)
        assert out.getvalue() == expected_out


class TestDumpDirOutputErrors:
    """Integration tests for write failures during a dump."""

    @pytest.mark.parametrize(
        "fail_on",
        [b"{{\n", b"}, {\n", b"}}\n", b'\tstring("foo"),\n', b'\tstring("bar"),\n'],
    )
    def test_write_failure(self, corpus_root: Path, fail_on: bytes):
        """Test that any write failure aborts the dump."""
        out = PredicateErrWriter(OSError("snap"), lambda data: data == fail_on)

        err = dump_dir(out, corpus_root, "multi")

        assert isinstance(err, WriteError)
        assert str(err) == "writing output: snap"

    def test_write_failure_drops_validation_errors(self, corpus_root: Path):
        """Test that a write failure is returned instead of the errors found so far."""
        out = PredicateErrWriter(OSError("snap"), lambda data: data == b"}}\n")

        err = DefaultPipeline().process(out, corpus_root, "badMulti")

        assert isinstance(err, WriteError)
        assert not is_error(err, ErrorKind.MALFORMED_ENTRY)
        assert out.getvalue() == MULTI_OUT[: -len(b"}}\n")]

    def test_closed_writer(self, corpus_root: Path):
        """Test that writing to a closed sink is a write failure."""
        out = io.BytesIO()
        out.close()

        err = dump_dir(out, corpus_root, "single")

        assert isinstance(err, WriteError)
        assert isinstance(err.unwrap(), ValueError)
        assert str(err).startswith("writing output: ")


class TestDumpDirRawValues:
    """Integration tests for corpus values that are not valid UTF-8."""

    def test_values_dumped_byte_for_byte(self, tmp_path: Path):
        """Test that bytes which are not valid UTF-8 are dumped unchanged."""
        write_files(
            tmp_path,
            {
                "a": corpus_file("uint(3)"),
                "b": b'go test fuzz v1\n[]byte("\xff\xfe")\n',
            },
        )
        out = io.BytesIO()

        err = dump_dir(out, tmp_path)

        assert err is None
        assert out.getvalue() == b'{\n\tuint(3),\n\t[]byte("\xff\xfe"),\n}\n'

    def test_control_characters_are_values(self, tmp_path: Path):
        """Test that only white space is trimmed from value lines."""
        write_files(tmp_path, {"a": b"go test fuzz v1\n \x1f\t\n"})
        out = io.BytesIO()

        err = dump_dir(out, tmp_path)

        assert err is None
        assert out.getvalue() == b"{\n\t\x1f,\n}\n"

    def test_raw_version_is_quoted(self, tmp_path: Path):
        """Test that an undecodable version header is reported with escapes."""
        write_files(tmp_path, {"a": b"go test fuzz \xff\nuint(3)\n"})

        err = dump_dir(io.BytesIO(), tmp_path)

        assert is_error(err, ErrorKind.UNSUPPORTED_VERSION)
        assert 'reading "a": unsupported encoding version: "go test fuzz \\xff"' in str(err)
