"""Command-line argument parsing for jsonreflow.

This module defines the command-line interface for jsonreflow, handling argument
parsing, validation, and the mapping of flags onto a ``FormatConfig``.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, NoReturn, Optional

from jsonreflow import __version__
from jsonreflow.config import DEFAULT_CONFIG, FormatConfig

# Exit status for argument errors; argparse would use 2
USAGE_ERROR_STATUS = 1

# Flag destinations that map 1:1 onto FormatConfig fields
CONFIG_FIELDS = (
    "indent",
    "width",
    "comment_line",
    "comment_block_start",
    "comment_block_end",
    "trailing_comma",
    "strip_comments",
    "max_depth",
)


class JsonreflowArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(USAGE_ERROR_STATUS, f"{self.prog}: error: {message}\n")


def non_negative_int(value: str) -> int:
    """Parse a non-negative integer argument.

    Raises:
        argparse.ArgumentTypeError: If the value is not a non-negative integer.
    """
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {value!r}")
    return number


def positive_int(value: str) -> int:
    number = non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError(f"invalid positive integer: {value!r}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Option defaults are None so that only flags given on the command line override
    a configuration file; ``build_config`` fills in the rest.

    Returns:
        An ArgumentParser instance configured with jsonreflow's options.
    """
    description = f"""
    jsonreflow: a permissive JSON formatter.

    Reads JSON-like text from stdin and writes the formatted text to stdout. The input
    may contain comments, missing or broken punctuation, trailing commas and several
    concatenated documents. Objects and arrays are kept on one line while they fit
    within the width limit and laid out over several lines otherwise.

    Defaults: indent {DEFAULT_CONFIG.indent!r}, width {DEFAULT_CONFIG.width}, line comments
    {DEFAULT_CONFIG.comment_line!r}, block comments {DEFAULT_CONFIG.comment_block_start!r} ...
    {DEFAULT_CONFIG.comment_block_end!r}, no trailing commas, comments kept.

    Values that begin with "-" must be attached with "=", as in -l=-- or
    --comment-line=--, or they are read as options.
    """

    epilog = """
    Examples:
      # Format a file
      jsonreflow < settings.json > settings.fmt.json

      # Four-space indentation, wider lines, trailing commas
      jsonreflow -i "    " -w 120 -t < settings.json

      # Always multi-line
      jsonreflow -w 0 < settings.json

      # Compact single-line output without comments
      jsonreflow -i "" -s < settings.json

      # Shell-style line comments, no block comments
      jsonreflow -l "#" -b "" < config.jsonc

      # SQL-style line comments: attach values starting with "-" using "="
      jsonreflow -l=-- < query.jsonc

      # Settings from a file, overridden by flags
      jsonreflow -c jsonreflow.json -t < settings.json

      # Show this help
      jsonreflow help
    """

    parser = JsonreflowArgumentParser(
        prog="jsonreflow",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"jsonreflow {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "extra",
        nargs="*",
        metavar="help",
        help="Print this help and exit. Any other positional argument is an error.",
    )
    parser.add_argument("-i", "--indent", metavar="STR", help="Indentation unit. Empty forces single-line output.")
    parser.add_argument(
        "-w",
        "--width",
        type=non_negative_int,
        metavar="N",
        help="Line width limit for single-line objects and arrays. 0 always lays them out multi-line.",
    )
    parser.add_argument(
        "-l",
        "--comment-line",
        metavar="STR",
        help="Line comment prefix. Empty disables line comments. A prefix starting with '-' needs -l=STR.",
    )
    parser.add_argument(
        "-b",
        "--comment-block-start",
        metavar="STR",
        help="Block comment opening delimiter. Empty disables block comments.",
    )
    parser.add_argument(
        "-e",
        "--comment-block-end",
        metavar="STR",
        help="Block comment closing delimiter. Empty disables block comments.",
    )
    parser.add_argument(
        "-t",
        "--trailing-comma",
        action=argparse.BooleanOptionalAction,
        help="Add a trailing comma after the last element of multi-line objects and arrays.",
    )
    parser.add_argument(
        "-s",
        "--strip-comments",
        action=argparse.BooleanOptionalAction,
        help="Remove comments from the output.",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        type=positive_int,
        metavar="N",
        help=f"Maximum nesting depth of objects and arrays (default: {DEFAULT_CONFIG.max_depth}).",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="FILE",
        help="Read settings from a JSON file (comments allowed) before applying flags.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debugging information to stderr.",
    )

    return parser


def wants_help(args: argparse.Namespace) -> bool:
    return args.extra == ["help"]


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If unexpected positional arguments were given.
    """
    if args.extra and not wants_help(args):
        raise ValueError(f"unexpected arguments {args.extra!r}")


def build_config(args: argparse.Namespace, base: Optional[FormatConfig] = None) -> FormatConfig:
    """Build the formatter configuration from parsed arguments.

    Settings come from, in increasing precedence: ``base`` (``DEFAULT_CONFIG`` if
    omitted), the ``--config`` file, and the individual flags.

    Args:
        args: Parsed command-line arguments.
        base: Starting configuration.

    Returns:
        The resulting configuration.

    Raises:
        ConfigError: If the configuration file or a flag value is invalid.
        OSError: If the configuration file cannot be read.
    """
    config = base or DEFAULT_CONFIG
    if args.config is not None:
        config = FormatConfig.from_file(args.config, base=config)

    overrides: Dict[str, Any] = {}
    for name in CONFIG_FIELDS:
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    return config.with_overrides(**overrides)
