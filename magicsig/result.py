"""Analysis result model."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from magicsig.signature import FileSignature, merge_bytes


class ResultKind(enum.Enum):
    """Whether a result carries a match or is the unknown sentinel."""

    MATCH = "match"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class AnalysisResult:
    """A single signature determination for a stream."""

    kind: ResultKind = field(default=ResultKind.MATCH, init=False)
    confirmed: bool = False
    name: str = ""
    remarks: str = ""
    extension: str = ""
    offset: int = -1
    signature_bytes: bytes = b""
    match: FileSignature | None = None

    @property
    def is_unknown(self) -> bool:
        return self.kind is ResultKind.UNKNOWN

    @property
    def length(self) -> int:
        """Number of bytes read from the stream for this match."""
        return len(self.signature_bytes)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable representation."""
        return {
            "name": self.name,
            "unknown": self.is_unknown,
            "confirmed": self.confirmed,
            "extension": self.extension,
            "offset": self.offset,
            "length": self.length,
            "signature": merge_bytes(self.signature_bytes),
            "pattern": self.match.signature if self.match is not None else "",
            "remarks": self.remarks,
        }

    def __str__(self) -> str:
        return (
            f'Confirmed: "{self.confirmed}"; Name: "{self.name}"; '
            f'Extension: "{self.extension}"; Offset: {self.offset:,}; '
            f"Length: {self.length:,}; Signature: [{merge_bytes(self.signature_bytes)}]; "
            f'Remarks: "{self.remarks}"'
        )


def _make_unknown() -> AnalysisResult:
    result = AnalysisResult(name="Unknown")
    object.__setattr__(result, "kind", ResultKind.UNKNOWN)
    return result


# The only result whose kind is UNKNOWN.
UNKNOWN = _make_unknown()
