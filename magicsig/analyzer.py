"""Magic number based file type analysis.

Compares bytes at signature specific offsets of a stream against a set of
known file signatures to determine the file type, independent of its
extension.  The extension is only used to confirm a byte match.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Iterable

from magicsig.bom import ByteOrderMarkProcessor
from magicsig.errors import InvalidArgumentError, NullInputError
from magicsig.matching import get_confirmed, is_equal, sort_by_length
from magicsig.result import UNKNOWN, AnalysisResult
from magicsig.signature import FileSignature
from magicsig.streams import get_file_extension, try_read_buffer, validate_stream

logger = logging.getLogger(__name__)


def _validate_signatures(signatures: Iterable[FileSignature] | None) -> list[FileSignature]:
    if signatures is None:
        raise InvalidArgumentError("Parameter 'signatures' must not be None or empty.")
    signatures = list(signatures)
    if not signatures:
        raise InvalidArgumentError("Parameter 'signatures' must not be None or empty.")
    if any(sig is None for sig in signatures):
        raise InvalidArgumentError("Parameter 'signatures' contains at least one None signature.")
    return signatures


class SignatureAnalyzer:
    """Identify streams and files using file signatures.

    Parameters
    ----------
    processor : ByteOrderMarkProcessor
        Object whose ``process(stream)`` method positions a stream after
        its byte-order-mark.

    Raises
    ------
    NullInputError
        If *processor* is None.
    """

    def __init__(self, processor: ByteOrderMarkProcessor):
        if processor is None:
            raise NullInputError("The 'processor' must not be None.")
        self.processor = processor

    def analyze(
        self, stream: BinaryIO, signatures: Iterable[FileSignature]
    ) -> list[AnalysisResult]:
        """Analyze an open binary stream.

        Parameters
        ----------
        stream : BinaryIO
            Readable and seekable stream.  Its position is changed.
        signatures : iterable of FileSignature
            Signatures to test, in any order.

        Returns
        -------
        list[AnalysisResult]
            One result per matching signature, longest pattern first, or a
            single :data:`~magicsig.result.UNKNOWN` when nothing matched.

        Raises
        ------
        NullInputError
            If *stream* is None.
        InvalidStateError
            If *stream* cannot be read or seeked.
        InvalidArgumentError
            If *signatures* is None, empty or contains None.
        """
        validate_stream(stream)
        signatures = _validate_signatures(signatures)

        stream.seek(0)
        self.processor.process(stream)
        base_offset = stream.tell()

        results: list[AnalysisResult] = []
        extension: str | None = None

        for signature in sort_by_length(signatures):
            offset = base_offset + signature.offset
            buffer = try_read_buffer(stream, offset, signature.length)
            if buffer is None:
                logger.debug("Skipping signature %r at offset %d", signature.name, offset)
                continue
            if not is_equal(signature, buffer):
                continue

            if extension is None:
                extension = get_file_extension(stream)
            results.append(
                AnalysisResult(
                    confirmed=get_confirmed(signature, extension),
                    name=signature.name,
                    remarks=signature.remarks,
                    extension=extension,
                    offset=offset,
                    signature_bytes=buffer,
                    match=signature,
                )
            )

        if not results:
            return [UNKNOWN]
        return results

    def analyze_file(
        self, path: str | Path, signatures: Iterable[FileSignature]
    ) -> list[AnalysisResult]:
        """Analyze a file on disk.

        The file is opened read-only and closed again before returning,
        whatever the outcome.
        """
        with open(Path(path), "rb") as fh:
            return self.analyze(fh, signatures)

    def analyze_bytes(
        self, data: bytes, signatures: Iterable[FileSignature]
    ) -> list[AnalysisResult]:
        """Analyze an in-memory buffer.  No extension is available."""
        return self.analyze(io.BytesIO(data), signatures)
