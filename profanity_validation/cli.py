#!/usr/bin/env python3
"""
profanity-check command line entry point.

Usage:
    profanity-check [--config profanity.yaml] [TEXT ...]

Example:
    profanity-check -b fuck "f u c k you"
    echo "fu(_)ck" | profanity-check -b fuck --obfuscate

Exit status is 0 when every input is clean, 1 when any input is profane and
2 when the configuration cannot be loaded.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .config import Config, ConfigurationError
from .detector import ProfanityDetector
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_PROFANE = 1
EXIT_CONFIG_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="profanity-check",
        description="Detect obfuscated profanity in text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  profanity-check -b fuck "have a nice day"
  profanity-check --config profanity.yaml "f4ck off"
  profanity-check --defaults --obfuscate < comments.txt
        """
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Text to check (reads lines from stdin when omitted)"
    )

    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration YAML file"
    )

    parser.add_argument(
        "--blacklist", "-b",
        action="append",
        default=[],
        metavar="WORD",
        help="Add a word to ban (repeatable)"
    )

    parser.add_argument(
        "--whitelist", "-w",
        action="append",
        default=[],
        metavar="TOKEN",
        help="Add a token to always allow (repeatable)"
    )

    parser.add_argument(
        "--defaults",
        action="store_true",
        help="Merge the bundled default word lists"
    )

    parser.add_argument(
        "--scan-all",
        action="store_true",
        help="Keep scanning after a whitelisted match"
    )

    parser.add_argument(
        "--obfuscate",
        action="store_true",
        help="Print masked text instead of profane/clean"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors"
    )

    return parser.parse_args(argv)


def _inputs(args: argparse.Namespace) -> Iterable[str]:
    if args.text:
        return args.text
    return (line.rstrip("\r\n") for line in sys.stdin)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = Config.load(args.config)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    level = config.logging.level
    if args.quiet:
        level = "ERROR"
    setup_logging(
        level=level,
        log_file=config.logging.log_file or None,
        force=True,
        debug_mode=args.verbose,
    )

    # Apply CLI overrides to config
    config.profanity.blacklist.extend(args.blacklist)
    config.profanity.whitelist.extend(args.whitelist)
    if args.defaults:
        config.profanity.use_default_lists = True
    if args.scan_all:
        config.profanity.short_circuit = False

    try:
        detector = ProfanityDetector.from_config(config)
    except ConfigurationError as e:
        logger.error(f"Failed to build detector: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    exit_code = EXIT_CLEAN
    for text in _inputs(args):
        profane = detector.has_profanity(text)
        if profane:
            exit_code = EXIT_PROFANE

        if args.obfuscate:
            print(detector.obfuscate_if_profane(text))
        else:
            print("profane" if profane else "clean")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
