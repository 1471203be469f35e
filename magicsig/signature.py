"""File signature model and signature text helpers.

A signature is written as a list of two-character hex tokens, one per byte,
e.g. ``"FF D8 FF E1 ?? ?? 45 78 69 66"``.  Either nibble of a token may be
the ``?`` placeholder, which matches any hex digit at that position.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Mapping

from magicsig.errors import InvalidArgumentError

PLACEHOLDER = "?"
SIGNATURE_SEPARATOR = " "
EXTENSION_DELIMITER = ","
EXTENSION_SEPARATOR = "."

_SIGNATURE_DELIMITERS = re.compile(r"[ \-,;]")
_HEX_DIGITS = frozenset("0123456789ABCDEFabcdef")


def split_signature(text: str | None) -> list[str]:
    """Split signature text into uppercased tokens.

    Tokens are separated by any of space, dash, comma or semicolon.
    Whitespace-only fragments are dropped.  Never raises.
    """
    if not isinstance(text, str) or not text.strip():
        return []
    return [part.strip().upper() for part in _SIGNATURE_DELIMITERS.split(text) if part.strip()]


def _is_nibble(char: str) -> bool:
    return char == PLACEHOLDER or char in _HEX_DIGITS


def check_signature(tokens: Iterable[str] | None) -> bool:
    """Return True if every token is a two-character nibble pair."""
    if tokens is None:
        return False
    tokens = list(tokens)
    if not tokens:
        return False
    for token in tokens:
        if token is None or len(token) != 2:
            return False
        if not (_is_nibble(token[0]) and _is_nibble(token[1])):
            return False
    return True


def merge_signature(tokens: Iterable[str] | None, limit: int = 0) -> str:
    """Join tokens into the canonical ``"AA BB CC"`` form.

    When *limit* is positive only the first *limit* tokens are joined.
    """
    if tokens is None:
        return ""
    tokens = list(tokens)
    if limit > 0:
        tokens = tokens[:limit]
    return SIGNATURE_SEPARATOR.join(token.upper() for token in tokens)


def merge_bytes(data: bytes | None, limit: int = 0) -> str:
    """Render raw bytes in the same form as :func:`merge_signature`."""
    if not data:
        return ""
    if limit > 0:
        data = data[:limit]
    return SIGNATURE_SEPARATOR.join(f"{byte:02X}" for byte in data)


def normalize_extensions(value: str | Iterable[str] | None) -> str:
    """Normalize a comma separated extension list.

    Each non-blank entry is trimmed and prefixed with exactly one dot.
    Order, case and duplicates are preserved::

        >>> normalize_extensions(" .ext, .eXT ,  ext ")
        '.ext,.eXT,.ext'

    Raises
    ------
    InvalidArgumentError
        If *value* is neither a string nor an iterable of strings.
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        if isinstance(value, (bytes, bytearray)) or not isinstance(value, Iterable):
            raise InvalidArgumentError(f"Extensions {value!r} are not a string or a list.")
        value = list(value)
        if not all(isinstance(v, str) for v in value):
            raise InvalidArgumentError(f"Extensions {value!r} must all be strings.")
        value = EXTENSION_DELIMITER.join(value)
    if not value.strip():
        return ""
    pieces = (
        EXTENSION_SEPARATOR + piece.strip().lstrip(EXTENSION_SEPARATOR)
        for piece in value.split(EXTENSION_DELIMITER)
        if piece.strip()
    )
    return EXTENSION_DELIMITER.join(pieces)


def _blank_to_empty(value: str | None) -> str:
    if value is None or not str(value).strip():
        return ""
    return str(value)


@dataclass(frozen=True)
class FileSignature:
    """A named byte pattern identifying a file format.

    Parameters
    ----------
    name, remarks : str
        Free text.  ``None`` or whitespace becomes an empty string.
    extensions : str or iterable of str
        Comma separated list of file extensions, normalized on construction.
    offset : int
        Byte offset (after any byte-order-mark) where the pattern starts.
    signature : str
        Hex token text, see :func:`split_signature`.  When empty the
        signature has no digits and a length of zero.

    Raises
    ------
    InvalidArgumentError
        If *offset* is negative or *signature* is not valid token text.
    """

    name: str = ""
    remarks: str = ""
    extensions: str = ""
    offset: int = 0
    signature: str = ""
    digits: tuple[str, ...] = field(default=(), init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _blank_to_empty(self.name))
        object.__setattr__(self, "remarks", _blank_to_empty(self.remarks))
        object.__setattr__(self, "extensions", normalize_extensions(self.extensions))

        if isinstance(self.offset, bool) or not isinstance(self.offset, int):
            raise InvalidArgumentError(f"Offset {self.offset!r} is not an integer.")
        if self.offset < 0:
            raise InvalidArgumentError(f"Offset {self.offset} must not be less than zero.")

        if self.signature is not None and not isinstance(self.signature, str):
            raise InvalidArgumentError(
                f"Signature {self.signature!r} is not a string; quote it in catalogs."
            )
        if not self.signature:
            object.__setattr__(self, "signature", "")
            return
        tokens = split_signature(self.signature)
        if not check_signature(tokens):
            raise InvalidArgumentError(
                f"Value {self.signature!r} does not contain a valid signature."
            )
        object.__setattr__(self, "digits", tuple(tokens))
        object.__setattr__(self, "signature", merge_signature(tokens))

    @property
    def length(self) -> int:
        """Number of bytes covered by the pattern."""
        return len(self.digits)

    @property
    def extension_list(self) -> tuple[str, ...]:
        if not self.extensions:
            return ()
        return tuple(self.extensions.split(EXTENSION_DELIMITER))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FileSignature":
        """Build a signature from a catalog entry."""
        return cls(
            name=data.get("name", ""),
            remarks=data.get("remarks", ""),
            extensions=data.get("extensions", ""),
            offset=data.get("offset", 0),
            signature=data.get("signature", ""),
        )

    def __str__(self) -> str:
        count = 10
        text = self.signature
        if self.length > count:
            text = merge_signature(self.digits, count) + "..."
        return f'Offset={self.offset}; Length={self.length}; Signature="{text}"'
