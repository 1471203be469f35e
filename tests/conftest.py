"""Shared test fixtures for magicsig."""

import io

import pytest

from magicsig.signature import FileSignature


PNG_HEADER = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def png_bytes():
    """Build the first bytes of a PNG image."""
    return PNG_HEADER + b"\x00\x00\x00\rIHDR" + b"\x00" * 32


@pytest.fixture
def png_file(tmp_path, png_bytes):
    """Write PNG bytes to a temp file and return its path."""
    p = tmp_path / "image.png"
    p.write_bytes(png_bytes)
    return p


@pytest.fixture
def tar_bytes():
    """Build a minimal POSIX tar header block."""
    return b"\x00" * 257 + b"ustar\x0000" + b"\x00" * 247


@pytest.fixture
def gzip_file(tmp_path):
    p = tmp_path / "archive.tar.gz"
    p.write_bytes(b"\x1f\x8b\x08\x00" + b"\x00" * 16)
    return p


@pytest.fixture
def simple_signatures():
    """A small hand-written catalog."""
    return [
        FileSignature(name="Two", extensions="two", signature="AA BB"),
        FileSignature(name="Four", extensions="four", signature="AA BB CC DD"),
        FileSignature(name="Offset", extensions="off", offset=3, signature="58 59 5A"),
    ]


class NonSeekableStream(io.RawIOBase):
    """Readable stream that refuses to seek."""

    def __init__(self, data=b""):
        self._inner = io.BytesIO(data)

    def readable(self):
        return True

    def seekable(self):
        return False

    def readinto(self, b):
        chunk = self._inner.read(len(b))
        b[:len(chunk)] = chunk
        return len(chunk)


class WriteOnlyStream(io.RawIOBase):
    """Seekable stream without read access."""

    def readable(self):
        return False

    def seekable(self):
        return True


@pytest.fixture
def non_seekable_stream():
    return NonSeekableStream(b"\xAA\xBB")


@pytest.fixture
def write_only_stream():
    return WriteOnlyStream()
