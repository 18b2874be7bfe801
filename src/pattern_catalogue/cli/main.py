"""
Main CLI module with argument parsing and command execution.

This module provides:
- ``list`` to show the available demonstrations
- ``run`` to execute one or more demonstrations in order
"""
import argparse
import os
import sys
from typing import List, Optional

from pattern_catalogue._package import DESCRIPTION, __version__
from pattern_catalogue.cli.catalogue import (
    DEMOS,
    FAMILIES,
    DemoEntry,
    find_demo,
    list_demos,
    load_main,
)
from pattern_catalogue.cli.formatters import format_output
from pattern_catalogue.config import AppConfig, ConfigurationManager
from pattern_catalogue.domain.base.exceptions import DomainException
from pattern_catalogue.infrastructure.logging.logger import get_logger, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pattern-catalogue",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                         # List all demos
  %(prog)s list --family structural     # List one family
  %(prog)s run observer decorator       # Run two demos
  %(prog)s run --all                    # Run every demo
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List available demos")
    list_parser.add_argument("--family", choices=FAMILIES, help="Filter by pattern family")
    list_parser.add_argument(
        "--format", choices=["table", "json", "yaml"], default="table", help="Output format"
    )

    run_parser = subparsers.add_parser("run", help="Run demos")
    run_parser.add_argument("names", nargs="*", help="Demo names to run, in order")
    run_parser.add_argument("--all", action="store_true", help="Run every demo")

    return parser.parse_args(argv)


def load_app_config(args: argparse.Namespace) -> AppConfig:
    manager = ConfigurationManager(args.config)
    if args.log_level:
        manager.update_config({"logging": {"level": args.log_level}})
    return manager.get_typed()


def run_demo(entry: DemoEntry, config: AppConfig) -> int:
    """Import a demo's module and call its ``main``."""
    demo_main = load_main(entry)
    if entry.configurable:
        return demo_main(config.demos)
    return demo_main()


def execute_command(args: argparse.Namespace, config: AppConfig) -> int:
    logger = get_logger(__name__)

    if args.command == "list":
        print(format_output(list_demos(args.family), args.format))
        return 0

    if args.all:
        entries = list(DEMOS)
    elif args.names:
        entries = [find_demo(name) for name in args.names]
    else:
        print("Error: No demos specified. Name one or more demos, or use --all.")
        return 1

    exit_code = 0
    for index, entry in enumerate(entries):
        if len(entries) > 1:
            if index:
                print()
            print(f"##### {entry.family}/{entry.name} #####")
        logger.info(f"Running demo {entry.name}")
        result = run_demo(entry, config)
        if result != 0:
            logger.warning(f"Demo {entry.name} exited with {result}")
            exit_code = result
    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        if not args.command:
            print("Error: No command specified. Use --help for usage information.")
            return 1

        try:
            config = load_app_config(args)
        except DomainException as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        setup_logging(config.logging)
        logger = get_logger(__name__)

        try:
            return execute_command(args, config)
        except DomainException as e:
            logger.error(f"Domain error: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except Exception as e:
            logger.exception(f"Unexpected error: {e}")
            print(f"Unexpected error: {e}", file=sys.stderr)
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
