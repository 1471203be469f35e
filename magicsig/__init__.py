"""magicsig - identify file types by magic number signatures."""

__version__ = "0.1.0"

from magicsig.errors import (
    MagicSigError,
    NullInputError,
    InvalidStateError,
    InvalidArgumentError,
    ConfigError,
)
from magicsig.signature import (
    FileSignature,
    split_signature,
    check_signature,
    merge_signature,
    merge_bytes,
    normalize_extensions,
)
from magicsig.matching import is_equal, get_confirmed, sort_by_length
from magicsig.bom import ByteOrderMarkProcessor, BYTE_ORDER_MARKS
from magicsig.result import AnalysisResult, ResultKind, UNKNOWN
from magicsig.analyzer import SignatureAnalyzer
from magicsig.config import SignatureFactory, create_analyzer, load_signatures
from magicsig.scanner import DirectoryScanner, FileReport

__all__ = [
    "MagicSigError",
    "NullInputError",
    "InvalidStateError",
    "InvalidArgumentError",
    "ConfigError",
    "FileSignature",
    "split_signature",
    "check_signature",
    "merge_signature",
    "merge_bytes",
    "normalize_extensions",
    "is_equal",
    "get_confirmed",
    "sort_by_length",
    "ByteOrderMarkProcessor",
    "BYTE_ORDER_MARKS",
    "AnalysisResult",
    "ResultKind",
    "UNKNOWN",
    "SignatureAnalyzer",
    "SignatureFactory",
    "create_analyzer",
    "load_signatures",
    "DirectoryScanner",
    "FileReport",
]
