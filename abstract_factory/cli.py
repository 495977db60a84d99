"""
Abstract Factory Demo - command line entry point.

Runs the same client code against each registered product family factory
and prints what the products produced.

Usage:
    python -m abstract_factory                  # Run every family
    python -m abstract_factory --variant 2      # Run a specific family only
    python -m abstract_factory --format json    # Output as JSON
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import AppConfig, load_environment, setup_logging
from .formatters import DemoFormatter
from .repositories import FactoryRegistry
from .services import DemoService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abstract-factory-demo",
        description=AppConfig.APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the client against every factory
  abstract-factory-demo

  # Run only the second family
  abstract-factory-demo --variant 2

  # Show results as JSON
  abstract-factory-demo --json

  # Verbose logging (to stderr)
  abstract-factory-demo --verbose
        """
    )

    parser.add_argument(
        "--variant", "-V",
        action="append",
        choices=FactoryRegistry.get_supported_variants(),
        help="Run a specific family variant only (can be repeated). "
             "Can also be set via DEMO_VARIANTS env var."
    )

    parser.add_argument(
        "--format", "-f",
        choices=list(AppConfig.OUTPUT_FORMATS),
        default=AppConfig.get_default_output_format(),
        help="Output format: text (default) or json"
    )

    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON (shortcut for --format json)"
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s ({AppConfig.APP_NAME}) {AppConfig.APP_VERSION}"
    )

    return parser


def _preload_env_file(argv: Optional[List[str]]):
    """Load --env-file before anything reads the environment"""
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--env-file", "-e")
    known, _ = pre_parser.parse_known_args(argv)
    if known.env_file:
        load_environment(known.env_file)


def main(argv: Optional[List[str]] = None) -> int:
    _preload_env_file(argv)

    args = build_parser().parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        results = DemoService(variants=args.variant).run()
        output_format = "json" if args.json else args.format
        print(DemoFormatter(output_format=output_format).format(results))
    except KeyboardInterrupt:
        print("\n\nDemo cancelled by user.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.error(f"Demo failed: {e}", exc_info=True)
        print(f"\n❌ Demo failed: {e}", file=sys.stderr)
        return 1

    return 0
