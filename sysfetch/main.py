#!/usr/bin/env python3
"""
Main entry point for sysfetch.
"""

import sys
import argparse
import logging

from .modules import get_all_probes
from .ui.report import ReportGenerator

logger = logging.getLogger("sysfetch")


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Print a summary of this Linux host")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log probe activity to stderr")
    parser.add_argument("--version", action="store_true", help="Show version information")
    return parser.parse_args(argv)


def setup_logging(verbose: bool = False):
    """Send log records to stderr so the report on stdout stays clean."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr
    )


def show_version():
    """Show version information."""
    from . import __version__
    print(f"sysfetch version {__version__}")


def main(argv=None):
    """Main function."""
    args = parse_arguments(argv)

    if args.version:
        show_version()
        return 0

    setup_logging(args.verbose)

    probes = get_all_probes()
    logger.debug(f"Running {len(probes)} probes")
    ReportGenerator(probes).print_report()
    return 0


if __name__ == "__main__":
    sys.exit(main())
