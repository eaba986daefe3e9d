"""Command-line interface for generating Go helper methods from an API description."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence

from api_helper_generator.emitter import DEFAULT_PACKAGE
from api_helper_generator.errors import GenerationError
from api_helper_generator.run import DEFAULT_INPUT, DEFAULT_OUTPUT, run

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Setup for the parser.

    Returns:
        argparse.ArgumentParser: The parser after setup.
    """
    parser = argparse.ArgumentParser(description="Generate Go helper methods for the types of an API description.")

    parser.add_argument(
        "-i",
        "--input",
        type=str,
        default=DEFAULT_INPUT,
        help="path to the JSON API description.",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=DEFAULT_OUTPUT,
        help="path of the generated Go file; it is fully overwritten.",
    )

    parser.add_argument(
        "--package",
        type=str,
        default=DEFAULT_PACKAGE,
        help="Go package name of the generated file.",
    )

    parser.add_argument(
        "--no-format",
        dest="skip_format",
        default=False,
        action="store_true",
        help="skip gofmt formatting of the generated file.",
    )

    parser.add_argument(
        "--check",
        default=False,
        action="store_true",
        help="do not write; exit with 1 if the generated file is missing or out of date.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        default=False,
        action="store_true",
        help="log every generated helper.",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the helper generator.

    Args:
        argv (Sequence[str] | None, optional): Run arguments. Defaults to None.

    Returns:
        int: Error code.
    """
    parser = setup_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    root_directory = os.getcwd()
    logger.info("Working from root directory: %s", root_directory)

    try:
        return run(args, root_directory)
    except GenerationError as e:
        logger.error("Generation failed: %s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
