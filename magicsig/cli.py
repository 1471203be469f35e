"""Command-line interface for magicsig."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from magicsig.config import create_analyzer, load_signatures
from magicsig.errors import MagicSigError
from magicsig.scanner import DirectoryScanner
from magicsig.signature import merge_bytes


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="magicsig",
        description="Identify file types by their magic number signatures.",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    # --- identify ---
    id_p = sub.add_parser("identify", help="Identify a single file")
    id_p.add_argument("file", help="File to identify")
    id_p.add_argument("-c", "--config", default=None,
                      help="Path to a YAML signature catalog")
    id_p.add_argument("--json", dest="output_json", action="store_true",
                      help="Output results as JSON")

    # --- scan ---
    scan_p = sub.add_parser("scan", help="Identify every file below a directory")
    scan_p.add_argument("path", help="File or directory to scan")
    scan_p.add_argument("-r", "--recursive", action="store_true", default=True,
                        help="Recurse into subdirectories (default: True)")
    scan_p.add_argument("--no-recursive", dest="recursive", action="store_false")
    scan_p.add_argument("-e", "--extensions", nargs="*",
                        help="Restrict to these extensions (e.g. .png .zip)")
    scan_p.add_argument("-c", "--config", default=None,
                        help="Path to a YAML signature catalog")
    scan_p.add_argument("--json", dest="output_json", action="store_true",
                        help="Output results as JSON")

    # --- signatures ---
    sig_p = sub.add_parser("signatures", help="List the signature catalog")
    sig_p.add_argument("-c", "--config", default=None,
                       help="Path to a YAML signature catalog")
    sig_p.add_argument("--json", dest="output_json", action="store_true")

    return parser


def _print_result(result) -> None:
    if result.is_unknown:
        print("  Unknown format")
        return
    confirmed = "confirmed" if result.confirmed else "unconfirmed"
    print(f"  {result.name} at offset {result.offset} "
          f"[{merge_bytes(result.signature_bytes, 16)}] ({confirmed})")


def _report_to_dict(report) -> dict:
    """Convert a FileReport to a JSON-serialisable dict."""
    return {
        "path": report.path,
        "size": report.size,
        "identified_formats": report.identified_formats,
        "results": [r.to_dict() for r in report.results],
        "errors": report.errors,
    }


def cmd_identify(args) -> int:
    """Execute the ``identify`` subcommand."""
    path = Path(args.file)
    if not path.is_file():
        print(f"Error: {args.file} is not a valid file", file=sys.stderr)
        return 1

    signatures = load_signatures(args.config)
    results = create_analyzer().analyze_file(path, signatures)

    if args.output_json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        print(f"File: {path}")
        for r in results:
            _print_result(r)
    return 0


def cmd_scan(args) -> int:
    """Execute the ``scan`` subcommand."""
    signatures = load_signatures(args.config)
    extensions = {e if e.startswith(".") else f".{e}" for e in (args.extensions or [])} or None
    scanner = DirectoryScanner(signatures=signatures, extensions=extensions)

    target = Path(args.path)
    if target.is_file():
        reports = [scanner.scan_file(target)]
    elif target.is_dir():
        reports = scanner.scan_directory(target, recursive=args.recursive)
    else:
        print(f"Error: {args.path} is not a valid file or directory", file=sys.stderr)
        return 1

    if args.output_json:
        print(json.dumps([_report_to_dict(r) for r in reports], indent=2))
    else:
        for r in reports:
            _print_report(r)
    return 0


def _print_report(report) -> None:
    """Pretty-print a FileReport to stdout."""
    print(f"\n{'='*60}")
    print(f"File: {report.path}")
    print(f"Size: {report.size} bytes")
    for r in report.results:
        _print_result(r)
    for e in report.errors:
        print(f"  ERROR: {e}")


def cmd_signatures(args) -> int:
    """Execute the ``signatures`` subcommand."""
    signatures = load_signatures(args.config)

    if args.output_json:
        d = [
            {
                "name": s.name,
                "remarks": s.remarks,
                "extensions": list(s.extension_list),
                "offset": s.offset,
                "signature": s.signature,
            }
            for s in signatures
        ]
        print(json.dumps(d, indent=2))
    else:
        for s in signatures:
            print(f"{s.name:<30} offset={s.offset:<4} {s.signature}")
            if s.extensions:
                print(f"{'':<30} {s.extensions}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    dispatch = {
        "identify": cmd_identify,
        "scan": cmd_scan,
        "signatures": cmd_signatures,
    }
    handler = dispatch.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    try:
        return handler(args)
    except (MagicSigError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
