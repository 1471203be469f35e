"""Pattern comparison and ordering helpers for file signatures."""

from __future__ import annotations

import functools
import logging
from typing import Iterable

from magicsig.errors import NullInputError
from magicsig.signature import (
    EXTENSION_DELIMITER,
    PLACEHOLDER,
    FileSignature,
    merge_bytes,
)

logger = logging.getLogger(__name__)


def is_equal(signature: FileSignature, buffer: bytes) -> bool:
    """Compare *buffer* against the wildcard pattern of *signature*.

    Matching is done per nibble: a ``?`` in either half of a token matches
    any hex digit in that half of the corresponding byte.

    Raises
    ------
    NullInputError
        If *signature* or *buffer* is None.
    """
    if signature is None:
        raise NullInputError("Value of 'signature' must not be None.")
    if buffer is None:
        raise NullInputError("Value of 'buffer' must not be None.")

    if signature.length != len(buffer):
        return False

    logger.debug("Compare: %s <=> %s", signature.signature, merge_bytes(buffer))

    for token, byte in zip(signature.digits, buffer):
        upper, lower = token[0], token[1]
        rendered = f"{byte:02X}"
        if upper != PLACEHOLDER and upper != rendered[0]:
            return False
        if lower != PLACEHOLDER and lower != rendered[1]:
            return False
    return True


def get_confirmed(signature: FileSignature | None, extension: str | None) -> bool:
    """Return True if *extension* ends with one of the signature's extensions.

    Candidates are tried longest first so compound suffixes such as
    ``.tar.z`` are checked before ``.z``.
    """
    if signature is None or not signature.extensions.strip():
        return False
    if extension is None or not extension.strip():
        return False

    folded = extension.casefold()
    candidates = sorted(signature.extensions.split(EXTENSION_DELIMITER), key=len, reverse=True)
    for candidate in candidates:
        if folded.endswith(candidate.casefold()):
            return True
    return False


def _compare_length(x: FileSignature | None, y: FileSignature | None) -> int:
    # Descending; None sorts last.
    if x is None and y is None:
        return 0
    if x is None:
        return 1
    if y is None:
        return -1
    if x.length < y.length:
        return 1
    if x.length > y.length:
        return -1
    return 0


def sort_by_length(signatures: Iterable[FileSignature | None]) -> list[FileSignature | None]:
    """Return a new list ordered by descending pattern length.

    The sort is stable, so signatures of equal length keep their
    relative input order.
    """
    return sorted(signatures, key=functools.cmp_to_key(_compare_length))
