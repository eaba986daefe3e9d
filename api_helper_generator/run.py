"""Top-level module for helper generation."""

from __future__ import annotations

import argparse
import logging
import os
import stat
import subprocess

from api_helper_generator.emitter import DEFAULT_PACKAGE
from api_helper_generator.schema import APIDescription, load_api_description
from api_helper_generator.writer import Writer

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "api.json"
DEFAULT_OUTPUT = "gen_helpers.go"


def format_outputs(raw_input: str) -> str:
    """Formats raw Go source using gofmt.

    Args:
        raw_input (str): The unformatted input.

    Returns:
        str: The formatted outputs, or the input unchanged if gofmt is unavailable or fails.
    """
    try:
        result = subprocess.run(
            ["gofmt"],
            input=raw_input,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout

    except FileNotFoundError:
        logger.warning("gofmt not found, skipping formatting of generated helpers")
        return raw_input
    except subprocess.CalledProcessError as e:
        logger.error(f"gofmt formatting failed: {e}")
        logger.error(f"Stderr: {e.stderr}")
        return raw_input


def generate_helpers(api: APIDescription, package: str = DEFAULT_PACKAGE) -> str:
    """Entry-point for generating the helper file contents from an API description.

    Everything is rendered in memory; nothing is written here.

    Args:
        api (APIDescription): The API description.
        package (str): The Go package of the generated file.

    Raises:
        GenerationError: If any helper cannot be synthesized or rendered.

    Returns:
        str: The complete, unformatted file contents.
    """
    writer = Writer(api, package=package)
    writer.generate_all()
    return writer.dumps()


def write_atomically(output_path: str, content: str) -> None:
    """Write a file so that readers only ever see the old or the complete new contents.

    The temp file is created like any other file, so the published file gets the usual umask permissions.
    An existing file keeps its mode.

    Args:
        output_path (str): The file to (over)write.
        content (str): The new contents.
    """
    directory = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(directory, exist_ok=True)

    tmp_path = f"{output_path}.tmp.{os.getpid()}"
    try:
        with open(tmp_path, "w", encoding="utf8", newline="\n") as f:
            f.write(content)
        if os.path.exists(output_path):
            os.chmod(tmp_path, stat.S_IMODE(os.stat(output_path).st_mode))
        os.replace(tmp_path, output_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def is_up_to_date(output_path: str, content: str) -> bool:
    """Whether the file on disk holds exactly the given contents."""
    if not os.path.isfile(output_path):
        return False

    with open(output_path, encoding="utf8", newline="") as f:
        return f.read() == content


def run(args: argparse.Namespace, root_directory: str) -> int:
    """Run the helper generator on an API description file.

    Args:
        args (argparse.Namespace): The arguments that were passed when calling the generator.
        root_directory (str): The directory, from which the generator is executed.

    Raises:
        GenerationError: If the description cannot be loaded or a helper cannot be generated.

    Returns:
        int: The exit code; 1 if `--check` found the output out of date.
    """
    input_path = os.path.join(root_directory, args.input)
    output_path = os.path.join(root_directory, args.output)
    package: str = getattr(args, "package", DEFAULT_PACKAGE)
    skip_format: bool = getattr(args, "skip_format", False)
    check: bool = getattr(args, "check", False)

    api = load_api_description(input_path)
    output = generate_helpers(api, package=package)

    if not skip_format:
        output = format_outputs(output)

    if check:
        if is_up_to_date(output_path, output):
            logger.info("'%s' is up to date.", output_path)
            return 0

        logger.error("'%s' is missing or out of date; regenerate it.", output_path)
        return 1

    write_atomically(output_path, output)
    logger.info("Wrote helpers to '%s'.", output_path)
    return 0
