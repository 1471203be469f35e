"""Helpers for reading binary streams during signature analysis."""

from __future__ import annotations

import io
import logging
import os
from typing import BinaryIO

from magicsig.errors import InvalidStateError, NullInputError
from magicsig.signature import EXTENSION_SEPARATOR

logger = logging.getLogger(__name__)


def _has_capability(stream: BinaryIO, name: str) -> bool:
    check = getattr(stream, name, None)
    if check is None:
        return False
    try:
        return bool(check())
    except (ValueError, OSError):
        # Closed file objects raise instead of answering.
        return False


def validate_stream(stream: BinaryIO | None) -> None:
    """Ensure *stream* exists and supports both reading and seeking.

    Raises
    ------
    NullInputError
        If *stream* is None.
    InvalidStateError
        If *stream* is not readable or not seekable.
    """
    if stream is None:
        raise NullInputError("The 'stream' must not be None.")
    if not _has_capability(stream, "readable"):
        raise InvalidStateError("The 'stream' must have read access.")
    if not _has_capability(stream, "seekable"):
        raise InvalidStateError("The 'stream' must have seek access.")


def try_read_buffer(stream: BinaryIO, offset: int, length: int) -> bytes | None:
    """Read exactly *length* bytes at *offset*.

    Returns None instead of raising when the range lies outside the
    stream or the underlying read fails.
    """
    if offset < 0:
        logger.debug("Stream offset %d is less than zero.", offset)
        return None
    try:
        size = stream.seek(0, io.SEEK_END)
        if offset + length > size:
            logger.debug(
                "Length to read (offset: %d, length: %d) exceeds stream length of %d.",
                offset, length, size,
            )
            return None
        stream.seek(offset)
        data = stream.read(length)
    except (OSError, ValueError) as exc:
        logger.debug("Reading %d bytes at offset %d failed: %s", length, offset, exc)
        return None
    if data is None or len(data) != length:
        return None
    return bytes(data)


def get_file_extension(stream: BinaryIO) -> str:
    """Return the extension of the file behind *stream*.

    Everything from the first dot of the base name is returned, so
    ``archive.tar.gz`` yields ``.tar.gz``.  Streams without a file name
    (e.g. :class:`io.BytesIO`) yield an empty string.
    """
    name = getattr(stream, "name", None)
    if not isinstance(name, (str, os.PathLike)):
        return ""
    name = os.fspath(name)
    if not isinstance(name, str) or not name.strip():
        return ""
    filename = os.path.basename(name)
    index = filename.find(EXTENSION_SEPARATOR)
    if index < 0:
        return ""
    return filename[index:]
