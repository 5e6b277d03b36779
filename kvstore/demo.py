#!/usr/bin/env python3
"""
KV-Store Demo Entry Point

Walks through the store's operations and the ownership contract each
one makes with its caller.

Usage:
    python -m kvstore.demo                     # Default settings
    python -m kvstore.demo --debug             # Enable debug logging
    python -m kvstore.demo --log-level WARNING

Environment Variables:
    KV_STORE_DEBUG      - Enable debug mode (true/false)
    KV_STORE_LOG_LEVEL  - Log level when not in debug mode
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config.settings import settings
from .store.codec import load, save
from .store.store import BorrowError, KeyValueStore

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="KV-Store: In-Process Key-Value Store Demo",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level when --debug is not given",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False, level: str = "INFO") -> None:
    """Configure logging based on debug flag."""
    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def run_demo(store: KeyValueStore) -> None:
    """Exercise every store operation, logging what happens."""
    # Basic set and get
    store.set("name", "Alice")
    store.set("city", "Seattle")
    logger.info(f"get('name') -> {store.get('name')!r}")
    logger.info(f"get('city') -> {store.get('city')!r}")
    logger.info(f"Store size: {store.size()}")

    # Overwrite keeps the size
    store.set("name", "Bob")
    logger.info(f"After overwrite get('name') -> {store.get('name')!r}, size {store.size()}")

    # Delete hands the value back
    deleted_city = store.delete("city")
    logger.info(f"delete('city') -> {deleted_city!r}")
    logger.info(f"get('city') after delete -> {store.get('city')!r}, size {store.size()}")

    # Multiple entries
    store.set("language", "Python")
    store.set("year", "2026")
    store.set("level", "Senior")
    logger.info(f"Store now contains {store.size()} entries")

    # Borrows can overlap; mutation waits until they are gone
    with store.borrow("language") as first, store.borrow("language") as second:
        logger.info(f"Borrow 1: {first!r}, borrow 2: {second!r}")
        try:
            store.set("language", "Rust")
        except BorrowError as e:
            logger.info(f"Mutation rejected while borrowed: {e}")
    store.set("language", "Python 3")
    logger.info(f"Updated language: {store.get('language')!r}")

    # Missing keys are absent, not errors
    logger.info(f"get('missing_key') -> {store.get('missing_key')!r}")
    logger.info(f"delete('nonexistent') -> {store.delete('nonexistent')!r}")

    # Snapshot round trip
    restored = load(save(store))
    logger.info(f"Snapshot restored {restored.size()} entries")

    logger.info(f"Total entries: {store.size()}, empty: {store.is_empty()}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the demo."""
    args = parse_args(argv)

    setup_logging(debug=args.debug, level=args.log_level)

    logger.info("Starting KV-Store demo")
    try:
        run_demo(KeyValueStore.create())
    except Exception as e:
        logger.error(f"Demo error: {e}")
        raise
    logger.info("Demo complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
