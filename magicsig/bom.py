"""Byte-order-mark detection.

Text files may start with a byte-order-mark (BOM).  Signature offsets are
relative to the content after the BOM, so the analyzer skips it first.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from magicsig.streams import try_read_buffer, validate_stream

logger = logging.getLogger(__name__)

# Order matters: the UTF-16 marks are prefixes of the UTF-32 ones.
BYTE_ORDER_MARKS: tuple[tuple[str, bytes], ...] = (
    ("UTF-8", b"\xEF\xBB\xBF"),
    ("UTF-32 LE", b"\xFF\xFE\x00\x00"),
    ("UTF-32 BE", b"\x00\x00\xFE\xFF"),
    ("UTF-16 LE", b"\xFF\xFE"),
    ("UTF-16 BE", b"\xFE\xFF"),
)


class ByteOrderMarkProcessor:
    """Position a stream after its byte-order-mark, if it has one."""

    def process(self, stream: BinaryIO) -> BinaryIO:
        """Skip a leading BOM.

        On return the stream is positioned directly after the BOM, or at
        offset 0 when none was found.

        Raises
        ------
        NullInputError
            If *stream* is None.
        InvalidStateError
            If *stream* cannot be read or seeked.
        """
        self.detect(stream)
        return stream

    def detect(self, stream: BinaryIO) -> str | None:
        """Like :meth:`process` but return the label of the BOM found."""
        validate_stream(stream)
        for label, mark in BYTE_ORDER_MARKS:
            if self._has_preamble(stream, mark):
                logger.debug("Found BOM of type '%s'", label)
                return label
        return None

    @staticmethod
    def _has_preamble(stream: BinaryIO, mark: bytes) -> bool:
        stream.seek(0)
        data = try_read_buffer(stream, 0, len(mark))
        if data is not None and data == mark:
            stream.seek(len(mark))
            return True
        stream.seek(0)
        return False
