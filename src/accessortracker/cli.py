"""Main CLI entry point for accessortracker using command pattern."""

import argparse
import logging
import sys
from typing import Optional

from .accessor import AccessorClassifier
from .commands import COMMAND_REGISTRY, CommandContext
from .exceptions import AccessorTrackerError
from .services import ConfigurationService, FileScanService


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="accessortracker",
        description="accessortracker - find trivial getters and setters in Java code"
    )
    parser.add_argument(
        "--config",
        help="Path to a JSON configuration file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(
        title="Available commands",
        dest="command",
        required=True
    )

    for name, command_class in COMMAND_REGISTRY.items():
        subparser = subparsers.add_parser(name, help=command_class.help())
        command_class.add_arguments(subparser)

    return parser


def setup_logging(level: str = "WARNING", verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.WARNING),
        format='%(message)s'
    )


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = ConfigurationService(args.config).get_config()
    except AccessorTrackerError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level, args.verbose)

    context = CommandContext(
        config=config,
        scan_service=FileScanService(
            classifier=AccessorClassifier(config.accessor),
            config=config.scan,
        ),
        args=args,
    )

    command = COMMAND_REGISTRY[args.command](context)

    try:
        return command.execute()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 1
    except AccessorTrackerError as e:
        logging.error(f"❌ {e}")
        return 1


def cli_main():
    """Synchronous CLI entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
