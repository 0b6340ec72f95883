"""Command-line interface for jsonreflow.

This module provides the ``jsonreflow`` command. It reads all of stdin, formats it
with the configuration given by flags (and optionally a configuration file), and
writes the result to stdout.

Signal Handling Notes:
    - SIGPIPE: Handled when the output pipe is closed (e.g., when piping to `head`) on Unix-like systems
    - SIGINT: Handled for clean exit on Ctrl+C

Exit Codes:
    0: Successful completion, or help/version displayed
    1: Argument error, invalid configuration, or read/write failure
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Format a file with the default settings
    $ jsonreflow < settings.json

    # Display version information
    $ jsonreflow --version
"""

import logging
import sys
from typing import Optional, Sequence

from jsonreflow.cli.argparser import build_config, create_parser, validate_args, wants_help
from jsonreflow.cli.safe_writer import SafeWriter
from jsonreflow.cli.signal_handler import exit_status, setup_signal_handling
from jsonreflow.exceptions import ConfigError, NestingDepthError
from jsonreflow.jsonreflow import format_bytes
from jsonreflow.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def read_input() -> bytes:
    """Read all of stdin as bytes.

    Raises:
        OSError: If reading fails.
    """
    return sys.stdin.buffer.read()


def write_output(data: bytes) -> None:
    """Write all of data to stdout.

    Raises:
        BrokenPipeError: If the reader went away or a signal interrupted the write.
        OSError: If writing fails otherwise.
    """
    with SafeWriter(sys.stdout.fileno()) as safe_writer:
        safe_writer.write(data)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the jsonreflow command-line interface.

    Args:
        argv: Command-line arguments, excluding the program name. Defaults to ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion, or help/version displayed
        1: Argument error, invalid configuration, or read/write failure
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    parser = create_parser()
    # argparse exits on its own for --help, --version and malformed options
    args = parser.parse_args(argv)

    if wants_help(args):
        parser.print_help(sys.stderr)
        sys.exit(0)

    try:
        validate_args(args)
    except ValueError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        sys.exit(1)

    setup_logging(logging.DEBUG if args.verbose else None)

    try:
        config = build_config(args)
        logger.debug("Using %s", config)

        try:
            source = read_input()
        except OSError as e:
            print(f"Error: failed to read: {str(e)}", file=sys.stderr)
            sys.exit(1)

        output = format_bytes(source, config)

        try:
            write_output(output)
        except BrokenPipeError:
            pass
        except OSError as e:
            print(f"Error: failed to write: {str(e)}", file=sys.stderr)
            sys.exit(1)

    except (ConfigError, NestingDepthError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    status = exit_status()
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
