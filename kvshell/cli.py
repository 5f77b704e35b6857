#!/usr/bin/env python3
"""
kv-shell Entry Point

This is the main entry point for the interactive key-value shell.

Usage:
    python -m kvshell                         # Default settings
    python -m kvshell --file data.txt         # Load a snapshot at startup
    python -m kvshell --load-mode replace     # load replaces the store
    python -m kvshell --debug                 # Enable debug logging
    python -m kvshell --self-test             # Check the store, then start

Environment Variables:
    KV_SHELL_LOAD_MODE  - merge or replace
    KV_SHELL_PROMPT     - Prompt shown before each command
    KV_SHELL_DEBUG      - Enable debug mode (true/false)
    KV_SHELL_LOG_LEVEL  - Log level when not in debug mode
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config.settings import LOAD_MODES, settings
from .shell import run_shell
from .store.store import KVStore


class MaxLevelFilter(logging.Filter):
    """Pass only records below a given level."""

    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="kv-shell: Interactive In-Memory Key-Value Store",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--load-mode",
        choices=LOAD_MODES,
        default=settings.LOAD_MODE,
        help="Whether load merges into or replaces the store",
    )

    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Snapshot file to load at startup",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    parser.add_argument(
        "--self-test",
        action="store_true",
        help="Run a store self-check before starting the shell",
    )

    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not log the welcome banner",
    )

    args = parser.parse_args(argv)

    # argparse does not check a default (here from the environment) against choices
    if args.load_mode not in LOAD_MODES:
        parser.error(
            f"invalid load mode {args.load_mode!r} (choose from {', '.join(LOAD_MODES)})"
        )

    return args


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging based on debug flag.

    Records below WARNING go to stdout, WARNING and above to stderr.
    """
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    info_handler = logging.StreamHandler(sys.stdout)
    info_handler.addFilter(MaxLevelFilter(logging.WARNING))

    error_handler = logging.StreamHandler(sys.stderr)
    error_handler.setLevel(logging.WARNING)

    logging.basicConfig(
        level=level,
        format=settings.LOG_FORMAT,
        datefmt=settings.LOG_DATE_FORMAT,
        handlers=[info_handler, error_handler],
        force=True,
    )


def run_self_test() -> bool:
    """Exercise the basic store operations on a scratch store."""
    store = KVStore()
    store.set("username", "abhishek")
    store.set("lang", "Python")

    checks = [
        store.get("username") == "abhishek",
        store.exists("lang"),
    ]
    store.remove("lang")
    checks.append(not store.exists("lang"))
    store.clear()
    checks.append(not store.exists("username"))
    checks.append(store.get("username") is None)

    return all(checks)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the shell."""
    args = parse_args(argv)

    setup_logging(debug=args.debug)
    logger = logging.getLogger(__name__)

    if args.self_test:
        logger.info("Running self-tests...")
        if not run_self_test():
            logger.error("Self-tests failed")
            return 1
        logger.info("All self-tests passed")

    store = KVStore(load_mode=args.load_mode)

    if args.file:
        store.load(args.file)

    if not args.no_banner:
        logger.info("Welcome to the Key-Value CLI Store")
        logger.info("Type 'exit' to quit")

    prompt = settings.PROMPT if sys.stdin.isatty() else ""

    try:
        status = run_shell(store=store, prompt=prompt)
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")
        status = 0

    logger.debug(f"Shell exited with status {status}")
    return status


if __name__ == "__main__":
    sys.exit(main())
