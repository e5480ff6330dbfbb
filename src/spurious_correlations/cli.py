"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys

from spurious_correlations import __version__
from spurious_correlations.config import get_settings
from spurious_correlations.datasources.registry import ADAPTERS
from spurious_correlations.flows.correlate import correlate_all
from spurious_correlations.schemas import Granularity
from spurious_correlations.timekeys import MAX_MONTHS_BACK, MIN_MONTHS_BACK


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="spurious-correlations",
        description="Correlate random pairs of public time series",
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
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'run' command - one batch of pairs
    run_parser = subparsers.add_parser("run", help="Fetch and correlate random pairs")
    run_parser.add_argument(
        "--months",
        type=int,
        default=None,
        help=f"Months to look back, clamped to {MIN_MONTHS_BACK}-{MAX_MONTHS_BACK} "
        "(default: months_back from settings)",
    )
    run_parser.add_argument(
        "--granularity",
        choices=[g.value for g in Granularity],
        default=None,
        help="Requested granularity; pairs fall back to monthly when a source lacks daily data",
    )
    run_parser.add_argument(
        "--pairs",
        type=int,
        default=None,
        help="Number of pairs (default: pair_count from settings)",
    )
    run_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible pair selection",
    )

    subparsers.add_parser("info", help="Show application info")
    subparsers.add_parser("providers", help="List data providers and their granularities")

    return parser


def cmd_run(args: argparse.Namespace) -> int:
    """Handle the 'run' command."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    granularity = Granularity(args.granularity) if args.granularity else None
    results = correlate_all(
        months_back=args.months,
        granularity=granularity,
        pair_count=args.pairs,
        seed=args.seed,
    )

    for result in results:
        if result.ok:
            print(f"r = {result.r_display:>6}  [{result.granularity.value}]  {result.title}")
        else:
            print(f"failed     {result.title}: {result.error}", file=sys.stderr)

    if results and not any(r.ok for r in results):
        print("Error: every pair failed", file=sys.stderr)
        return 1
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Months back: {settings.months_back}")
    print(f"Granularity: {settings.granularity.value}")
    print(f"Pairs: {settings.pair_count}")
    return 0


def cmd_providers(_args: argparse.Namespace) -> int:
    """Handle the 'providers' command."""
    for provider, adapter in ADAPTERS.items():
        caps = adapter.capabilities
        granularities = [g.value for g in Granularity if caps.supports(g)]
        print(f"{provider.value:<14} {adapter.name:<22} {', '.join(granularities)}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "run": cmd_run,
        "info": cmd_info,
        "providers": cmd_providers,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
