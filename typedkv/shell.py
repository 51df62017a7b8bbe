#!/usr/bin/env python3
"""
TypedKV Shell Entry Point

Reads commands line by line from standard input, runs each one against a
single in-memory Store, and prints the result.

Usage:
    python -m typedkv                    # Read commands from stdin
    python -m typedkv --prompt '> '      # Show a prompt before each line
    python -m typedkv --debug            # Enable debug logging

Environment Variables:
    TYPEDKV_PROMPT      - Prompt printed before each line
    TYPEDKV_DEBUG       - Enable debug mode (true/false)
    TYPEDKV_LOG_LEVEL   - Log level when debug is off
"""

import argparse
import logging
import sys
from typing import TextIO

from .config.settings import settings
from .processor import CommandProcessor
from .storage.store import Store

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="TypedKV: Type-Aware In-Memory Key-Value Store",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--prompt",
        type=str,
        default=settings.PROMPT,
        help="Prompt printed before reading each command",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def resolve_log_level(debug: bool = False, name: str = None) -> int:
    """
    Pick the numeric log level.

    Args:
        debug: Force DEBUG when set
        name: Level name (default from settings.LOG_LEVEL)

    Returns:
        The level for the name, or WARNING if the name is not a known level
    """
    if debug:
        return logging.DEBUG

    name = (name if name is not None else settings.LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = resolve_log_level(debug)

    # Logs go to stderr so stdout only carries command results
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def is_quit(line: str) -> bool:
    """Check if a line asks the shell to stop reading."""
    return line.strip().upper() in settings.QUIT_COMMANDS


def run(
        input_stream: TextIO,
        output_stream: TextIO,
        store: Store = None,
        processor: CommandProcessor = None,
        prompt: str = "",
) -> Store:
    """
    Drive the read-process-print loop until input is exhausted.

    Args:
        input_stream: Stream to read command lines from
        output_stream: Stream to write results to
        store: Store to operate on (creates a new one if not provided)
        processor: CommandProcessor to use (creates one if not provided)
        prompt: Text written before each line is read

    Returns:
        The Store the session ran against
    """
    store = store if store is not None else Store()
    processor = processor if processor is not None else CommandProcessor()

    while True:
        if prompt:
            output_stream.write(prompt)
            output_stream.flush()

        line = input_stream.readline()
        if not line:
            logger.debug("End of input")
            break

        if is_quit(line):
            logger.debug("Quit requested")
            break

        result = processor.process(line, store)
        if not result:
            continue

        output_stream.write(result + "\n")
        output_stream.flush()

    return store


def main(argv=None) -> None:
    """Main entry point for the shell."""
    args = parse_args(argv)

    setup_logging(debug=args.debug)

    logger.info("Starting TypedKV shell")
    logger.info(f"  Debug: {args.debug}")

    store = Store()
    try:
        run(sys.stdin, sys.stdout, store=store, prompt=args.prompt)
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")
    finally:
        logger.info(f"Shell stopped with {store.size()} keys")


if __name__ == "__main__":
    main()
