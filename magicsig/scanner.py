"""Directory scanner for batch signature analysis.

Walks a folder, runs the signature analyzer on every file and collects a
report per file.  Problems with individual files are recorded on the
report instead of aborting the scan.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from magicsig.analyzer import SignatureAnalyzer
from magicsig.config import create_analyzer, load_signatures
from magicsig.result import AnalysisResult
from magicsig.signature import FileSignature

logger = logging.getLogger(__name__)


@dataclass
class FileReport:
    """Analysis report for a single file."""

    path: str
    size: int = 0
    results: list[AnalysisResult] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def identified_formats(self) -> list[str]:
        return [r.name for r in self.results if not r.is_unknown]


class DirectoryScanner:
    """Scan files and directories with a set of signatures.

    Parameters
    ----------
    signatures : list[FileSignature] or None
        Signatures to test.  Defaults to the built-in catalog.
    extensions : set[str] or None
        Restrict scanning to these file extensions (e.g. ``{".png", ".zip"}``).
        When *None* all files are considered.
    analyzer : SignatureAnalyzer or None
        Analyzer to use, mainly for tests.
    """

    def __init__(
        self,
        signatures: list[FileSignature] | None = None,
        extensions: set[str] | None = None,
        analyzer: SignatureAnalyzer | None = None,
    ):
        self.signatures = signatures if signatures is not None else load_signatures()
        self.extensions = {e.lower() for e in extensions} if extensions else None
        self.analyzer = analyzer if analyzer is not None else create_analyzer()

    def scan_file(self, path: str | Path) -> FileReport:
        """Analyse a single file."""
        path = Path(path)
        report = FileReport(path=str(path))

        if not path.is_file():
            report.errors.append("Not a file")
            return report

        report.size = path.stat().st_size
        if report.size == 0:
            report.errors.append("Empty file")
            return report

        try:
            report.results = self.analyzer.analyze_file(path, self.signatures)
        except OSError as exc:
            logger.warning("Cannot analyse %s: %s", path, exc)
            report.errors.append(f"Analysis error: {exc}")

        return report

    def scan_directory(self, root: str | Path, recursive: bool = True) -> list[FileReport]:
        """Scan a directory tree.

        Parameters
        ----------
        root : str or Path
            Root directory to scan.
        recursive : bool
            Whether to recurse into subdirectories.

        Returns
        -------
        list[FileReport]
            Reports for every file examined, sorted by path.
        """
        root = Path(root)
        reports: list[FileReport] = []

        if not root.is_dir():
            return reports

        iterator = root.rglob("*") if recursive else root.glob("*")

        for entry in sorted(iterator):
            if not entry.is_file():
                continue
            if self.extensions is not None:
                if entry.suffix.lower() not in self.extensions:
                    continue
            reports.append(self.scan_file(entry))

        return reports
