"""
Command-line interface for mediainform.

Usage:
  mediainform movie.mkv                 # Default report
  mediainform -q *.mkv                  # One line per file
  mediainform --json movie.mkv          # JSON to stdout
  mediainform -o report.json *.mkv      # JSON export
  mediainform --status                  # Provider availability
"""

from __future__ import annotations

import argparse
import logging
import sys

from mediainform._version import __version__
from mediainform.analyze import inform
from mediainform.config import get_config
from mediainform.exceptions import MediaInfoError
from mediainform.formatters import format_default, format_json, format_json_list, format_quiet_list
from mediainform.providers import get_provider, get_provider_status


def main(argv: list[str] | None = None) -> int:
    """Main entry point for mediainform CLI."""
    parser = argparse.ArgumentParser(
        prog="mediainform",
        description="Typed media metadata (tracks and chapters) from MediaInfo.",
    )
    parser.add_argument("files", nargs="*", help="Media file(s) to analyze")
    parser.add_argument("-o", "--output", help="Save report to JSON file")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--provider",
        metavar="NAME",
        help="Provider to use (mediainfo-cli, pymediainfo); default: first available",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("-q", "--quiet", action="store_true", help="Quick summary only")
    mode_group.add_argument("--json", action="store_true", help="Print JSON instead of text")
    mode_group.add_argument(
        "--status",
        action="store_true",
        help="Show provider availability status",
    )

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else get_config().logging.level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.status:
        print("mediainform providers:")
        print("-" * 40)
        for name, available in sorted(get_provider_status().items()):
            icon = "✓" if available else "✗"
            print(f"  {icon} {name}")
        return 0

    if not args.files:
        parser.error("the following arguments are required: files")

    try:
        provider = get_provider(args.provider)
    except MediaInfoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    all_info = []
    errors = 0

    for file_path in args.files:
        try:
            info = inform(file_path, provider=provider)
        except MediaInfoError as e:
            print(f"Error analyzing {file_path}: {e}", file=sys.stderr)
            errors += 1
            continue

        all_info.append(info)
        if args.quiet:
            continue
        if args.json:
            print(format_json(info))
        else:
            print(format_default(info))
            print()

    if args.quiet and all_info:
        print(format_quiet_list(all_info))

    if args.output and all_info:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(format_json_list(all_info))
        print(f"Report saved to: {args.output}")

    return 1 if errors > 0 else 0


if __name__ == "__main__":
    sys.exit(main())
