"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from occurrence_mapper import __version__
from occurrence_mapper.config import get_settings
from occurrence_mapper.datasources.gbif import GbifClient
from occurrence_mapper.errors import OccurrenceMapperError
from occurrence_mapper.flows.occurrence_map import build_occurrence_map

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="occurrence-mapper",
        description="Map GBIF species occurrence records on an interactive Leaflet map",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'map' command - fetch occurrences and write the map
    map_parser = subparsers.add_parser("map", help="Fetch occurrences and write an HTML map")
    taxon = map_parser.add_mutually_exclusive_group()
    taxon.add_argument(
        "--taxon-key",
        type=int,
        default=None,
        help="GBIF taxon key (default: default_taxon_key from settings)",
    )
    taxon.add_argument(
        "--name",
        type=str,
        default=None,
        help='Scientific name to resolve to a taxon key, e.g. "Bombus"',
    )
    map_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of occurrences (default: default_limit from settings)",
    )
    map_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output HTML file (default: output_path from settings)",
    )
    map_parser.add_argument("--title", type=str, default=None, help="Map title")

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def configure_logging(debug: bool) -> None:
    """Send log records to stderr at INFO, or DEBUG when requested."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_map(args: argparse.Namespace) -> int:
    """Handle the 'map' command."""
    settings = get_settings()
    limit = args.limit if args.limit is not None else settings.default_limit
    output = args.output if args.output is not None else settings.output_path

    if limit <= 0:
        print(f"Error: --limit must be positive, got {limit}", file=sys.stderr)
        return 1
    if args.taxon_key is not None and args.taxon_key <= 0:
        print(f"Error: --taxon-key must be positive, got {args.taxon_key}", file=sys.stderr)
        return 1

    try:
        if args.name:
            client = GbifClient(api_base=settings.gbif_api_base)
            taxon_key = client.match_name(args.name)
        elif args.taxon_key is not None:
            taxon_key = args.taxon_key
        else:
            taxon_key = settings.default_taxon_key

        result = build_occurrence_map(
            taxon_key=taxon_key,
            limit=limit,
            output_path=output,
            title=args.title,
            api_base=settings.gbif_api_base,
        )
    except OccurrenceMapperError as exc:
        logger.debug("map command failed", exc_info=True)
        print(f"Error [{exc.error_code}]: {exc}", file=sys.stderr)
        return 1

    print(f"Success: {result['occurrences']} occurrences mapped to {result['output']}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"GBIF API: {settings.gbif_api_base}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug or get_settings().debug)

    commands = {
        "map": cmd_map,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
