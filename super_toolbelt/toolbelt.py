"""Command-line entry point for the Ruby class toolbelt.

Lists fully-qualified class declarations in Ruby sources, prints the name
declared on a given line, and opens a fuzzy file finder narrowed by a copied
class name.
"""

import argparse
import logging
from pathlib import Path

from super_toolbelt.run_toolbelt import run_copy, run_open, run_scan


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per action."""
    ap = argparse.ArgumentParser(
        description="Qualified class names and file finder queries for Ruby code.",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML settings file",
    )
    ap.add_argument(
        "--no-cache",
        action="store_true",
        help="Scan every document without reading or writing the cache",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress information",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="List class declarations")
    scan.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Ruby files or directories to scan",
    )
    scan.add_argument(
        "--json",
        help="Write a JSON report of the scan to this path",
    )
    scan.set_defaults(handler=run_scan)

    copy = sub.add_parser("copy", help="Print the class name declared on a line")
    copy.add_argument("file", type=Path, help="Ruby file")
    copy.add_argument("line", type=int, help="1-based line number")
    copy.set_defaults(handler=run_copy)

    open_ = sub.add_parser("open", help="Open the file finder for a class name")
    open_.add_argument(
        "text",
        nargs="?",
        help="Copied class name (read from stdin when omitted)",
    )
    open_.set_defaults(handler=run_open)

    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the selected command."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
