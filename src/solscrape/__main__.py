"""CLI entry-point for solscrape.

Usage:
    python -m solscrape <git-url> [destination]
    python -m solscrape <dir> --local [-o NAME] [destination]
    python -m solscrape <source> --include-lib --include-test --include-script
    python -m solscrape <source> --ext rs --no-headers
    python -m solscrape <source> --quiet          # print only the output path
    python -m solscrape <source> --json           # print the run summary JSON
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from solscrape import __version__
from solscrape.api import scrape_source
from solscrape.contracts.load import validate_instance
from solscrape.core.config import DEFAULT_EXTENSION, ScanConfig
from solscrape.errors import ScrapeError
from solscrape.model.result import ScrapeResult
from solscrape.utils.exit_codes import ExitCode
from solscrape.utils.json_norm import stable_json_dump

# File lists longer than this are summarized by count only.
_MAX_LISTED_FILES = 25

_RULE = "═" * 64


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="solscrape",
        description="Consolidate a project's source files into one comment-free file.",
        epilog=(
            "examples:\n"
            "  solscrape https://github.com/OpenZeppelin/openzeppelin-contracts.git ./output\n"
            "  solscrape https://github.com/uniswap/v3-core.git -o uniswap_v3\n"
            "  solscrape ./my-local-project --local -o my_contracts\n"
            "  solscrape https://github.com/example/repo.git --include-lib --include-test"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "source",
        help="Git repository URL, or a local directory path with --local.",
    )
    p.add_argument(
        "destination",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Output directory (default: current directory).",
    )
    p.add_argument(
        "-o",
        "--output",
        dest="output_name",
        metavar="NAME",
        default=None,
        help="Output filename stem; '_scraped.<ext>' is appended.",
    )
    p.add_argument(
        "-l",
        "--local",
        action="store_true",
        default=False,
        help="Treat source as a local directory path.",
    )
    p.add_argument(
        "--ext",
        dest="file_extension",
        default=DEFAULT_EXTENSION.lstrip("."),
        help="File extension to collect (default: %(default)s).",
    )
    p.add_argument("--include-lib", action="store_true", help="Include lib/ dependencies.")
    p.add_argument("--include-test", action="store_true", help="Include test/ files.")
    p.add_argument("--include-script", action="store_true", help="Include script/ files.")
    p.add_argument(
        "--no-headers",
        dest="emit_headers",
        action="store_false",
        default=True,
        help="Omit file separator headers in the output.",
    )
    p.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Suppress progress output; print only the output path.",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the run summary JSON to stdout.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _configure_logging(quiet: bool) -> None:
    logging.basicConfig(
        level=logging.ERROR if quiet else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _print_banner(source: str, destination: Path) -> None:
    title = f"SOLSCRAPE v{__version__}  -  Source Scraper"
    print(f"\n╔{_RULE}╗", file=sys.stderr)
    print(f"║{title:^64}║", file=sys.stderr)
    print(f"╚{_RULE}╝\n", file=sys.stderr)
    print(f"Source:      {source}", file=sys.stderr)
    print(f"Destination: {destination}", file=sys.stderr)
    print("", file=sys.stderr)


def _print_human(result: ScrapeResult) -> None:
    """Pretty-print the success summary to stderr."""
    print(f"\n{_RULE}", file=sys.stderr)
    print("✅ Success!", file=sys.stderr)
    print(f"   Files processed: {result.file_count}", file=sys.stderr)
    print(f"   Total lines:     {result.line_count}", file=sys.stderr)
    print(f"   Output:          {result.output_path}", file=sys.stderr)
    if result.warnings:
        print(f"   Skipped:         {len(result.warnings)}", file=sys.stderr)
    print(_RULE, file=sys.stderr)

    if result.file_count <= _MAX_LISTED_FILES:
        print("\nFiles included:", file=sys.stderr)
        for rel in result.files_processed:
            print(f"  • {rel}", file=sys.stderr)
    print("", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Entry-point; returns an exit code (0 = written, 2 = error)."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.quiet)

    try:
        config = ScanConfig(
            file_extension=args.file_extension,
            include_lib=args.include_lib,
            include_test=args.include_test,
            include_script=args.include_script,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    show_progress = not args.quiet and not args.json_out
    if show_progress:
        _print_banner(args.source, args.destination)
        print(
            "Scanning local directory..." if args.local else "Cloning repository...",
            file=sys.stderr,
        )

    try:
        result = scrape_source(
            args.source,
            local=args.local,
            destination=args.destination,
            output_name=args.output_name,
            config=config,
            emit_headers=args.emit_headers,
        )
    except ScrapeError as e:
        print(f"❌ error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if args.json_out:
        result_dict = result.to_dict()
        validate_instance(result_dict, "scrape_result.schema.json")
        stable_json_dump(result_dict, sys.stdout)
    elif args.quiet:
        print(result.output_path)
    else:
        _print_human(result)

    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
