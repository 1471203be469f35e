"""Signature catalog configuration.

Loads YAML-based signature catalogs describing the magic numbers, offsets
and expected extensions of known file formats.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from magicsig.analyzer import SignatureAnalyzer
from magicsig.bom import ByteOrderMarkProcessor
from magicsig.errors import ConfigError, InvalidArgumentError
from magicsig.signature import FileSignature

DEFAULT_CATALOG = Path(__file__).parent / "configs" / "default_signatures.yaml"


def _parse_signature(data: Any, index: int) -> FileSignature:
    """Build a :class:`FileSignature` from one catalog entry."""
    if not isinstance(data, dict):
        raise ConfigError(f"Signature entry #{index} is not a mapping.")
    try:
        return FileSignature.from_dict(data)
    except InvalidArgumentError as exc:
        raise InvalidArgumentError(
            f"Signature entry #{index} ({data.get('name', '')!r}): {exc}"
        ) from exc


def parse_signatures(data: Any) -> list[FileSignature]:
    """Build signatures from an already parsed catalog document."""
    if not isinstance(data, dict) or not isinstance(data.get("signatures"), list):
        raise ConfigError("Catalog must contain a top-level 'signatures' list.")
    return [_parse_signature(entry, i) for i, entry in enumerate(data["signatures"])]


def load_signatures(path: str | Path | None = None) -> list[FileSignature]:
    """Load file signatures from a YAML catalog.

    Parameters
    ----------
    path : str or Path, optional
        Path to a YAML catalog.  When *None* the built-in
        ``default_signatures.yaml`` shipped with the package is used.

    Returns
    -------
    list[FileSignature]
        Parsed signatures in catalog order.

    Raises
    ------
    ConfigError
        If the file is not valid YAML or lacks a ``signatures`` list.
    InvalidArgumentError
        If an entry has invalid signature text or a negative offset.
    """
    path = DEFAULT_CATALOG if path is None else Path(path)

    with open(path, "r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Cannot parse catalog {path}: {exc}") from exc

    return parse_signatures(data)


class SignatureFactory:
    """Supply the default signature catalog."""

    def __init__(self, path: str | Path | None = None):
        self.path = path

    def create_default_signatures(self) -> list[FileSignature]:
        return load_signatures(self.path)


def create_analyzer(processor: ByteOrderMarkProcessor | None = None) -> SignatureAnalyzer:
    """Return a :class:`~magicsig.analyzer.SignatureAnalyzer` ready for use.

    A new :class:`ByteOrderMarkProcessor` is created when *processor* is
    not given.
    """
    if processor is None:
        processor = ByteOrderMarkProcessor()
    return SignatureAnalyzer(processor)
