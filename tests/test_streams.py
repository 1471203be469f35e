"""Tests for magicsig.streams."""

import io

import pytest

from magicsig.errors import InvalidStateError, NullInputError
from magicsig.streams import get_file_extension, try_read_buffer, validate_stream


class TestValidateStream:
    def test_valid(self):
        validate_stream(io.BytesIO(b"abc"))

    def test_none(self):
        with pytest.raises(NullInputError):
            validate_stream(None)

    def test_not_seekable(self, non_seekable_stream):
        with pytest.raises(InvalidStateError):
            validate_stream(non_seekable_stream)

    def test_not_readable(self, write_only_stream):
        with pytest.raises(InvalidStateError):
            validate_stream(write_only_stream)

    def test_closed(self):
        stream = io.BytesIO(b"abc")
        stream.close()
        with pytest.raises(InvalidStateError):
            validate_stream(stream)

    def test_plain_object(self):
        with pytest.raises(InvalidStateError):
            validate_stream(object())


class TestTryReadBuffer:
    def test_read(self):
        stream = io.BytesIO(b"0123456789")
        assert try_read_buffer(stream, 2, 3) == b"234"
        assert stream.tell() == 5

    def test_read_to_end(self):
        assert try_read_buffer(io.BytesIO(b"0123"), 1, 3) == b"123"

    def test_negative_offset(self):
        assert try_read_buffer(io.BytesIO(b"0123"), -1, 2) is None

    def test_past_end(self):
        assert try_read_buffer(io.BytesIO(b"0123"), 3, 2) is None

    def test_offset_beyond_stream(self):
        assert try_read_buffer(io.BytesIO(b"0123"), 100, 1) is None

    def test_closed_stream(self):
        stream = io.BytesIO(b"0123")
        stream.close()
        assert try_read_buffer(stream, 0, 1) is None

    def test_zero_length(self):
        assert try_read_buffer(io.BytesIO(b""), 0, 0) == b""


class TestGetFileExtension:
    def test_file(self, tmp_path):
        p = tmp_path / "archive.tar.gz"
        p.write_bytes(b"\x1f\x8b")
        with open(p, "rb") as fh:
            assert get_file_extension(fh) == ".tar.gz"

    def test_no_extension(self, tmp_path):
        p = tmp_path / "README"
        p.write_bytes(b"x")
        with open(p, "rb") as fh:
            assert get_file_extension(fh) == ""

    def test_dotted_directory_ignored(self, tmp_path):
        d = tmp_path / "dir.d"
        d.mkdir()
        p = d / "plain"
        p.write_bytes(b"x")
        with open(p, "rb") as fh:
            assert get_file_extension(fh) == ""

    def test_memory_stream(self):
        assert get_file_extension(io.BytesIO(b"abc")) == ""

    def test_integer_name(self):
        class FdStream(io.BytesIO):
            name = 3

        assert get_file_extension(FdStream()) == ""
