"""
Command-line interface for replaying pose scripts.

Usage:
    rigidpose script.yaml [--decimal-places N] [-v]
"""

import argparse
import logging
import sys

from .config import Config
from .session import PoseSession


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def main(argv=None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description='Replay a pose script and print object and follow-camera transforms',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
    # Replay a script with its own display precision
    rigidpose script.yaml

    # Print matrices with 5 decimal places
    rigidpose script.yaml --decimal-places 5

    # Verbose output
    rigidpose script.yaml -v
'''
    )

    parser.add_argument(
        'config',
        type=str,
        help='Path to YAML pose script'
    )

    parser.add_argument(
        '--decimal-places', '-d',
        type=int,
        default=None,
        help='Decimal places for printed matrices (default: from the script)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = Config.from_yaml(args.config)

        decimal_places = args.decimal_places
        if decimal_places is None:
            decimal_places = config.display_decimal_places

        session = PoseSession(config)
        report = session.run()

        print("\n" + "=" * 60)
        print("POSE SESSION")
        print("=" * 60)
        print(report.render(decimal_places))
        print("=" * 60)

        if report.invalid_steps:
            logger.error(f"Object rotation invalid after steps {report.invalid_steps}")
            return 1
        return 0

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
