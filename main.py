"""Entry point module for the pngsecret command line tool."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional

from config import APP_DESCRIPTION, APP_NAME, APP_VERSION
from utils.logger import set_console_level, setup_logger

logger = setup_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=f"{APP_DESCRIPTION} v{APP_VERSION}",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"{APP_NAME} v{APP_VERSION}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show log output on stderr",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="command")

    # ------------------------------------------------------------------
    # Encode command
    # ------------------------------------------------------------------
    encode = subparsers.add_parser(
        "encode",
        help="Insert a chunk carrying a message",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    encode.add_argument("file", help="PNG file to read")
    encode.add_argument("chunk_type", help="Four-letter chunk type, e.g. ruSt")
    encode.add_argument("message", help="Text to store in the chunk")
    encode.add_argument("-o", "--output", help="Where to write the result (default: <name>_encoded.png)")
    encode.add_argument(
        "--append",
        action="store_true",
        help="Append the chunk at the very end instead of before IEND",
    )

    # ------------------------------------------------------------------
    # Decode command
    # ------------------------------------------------------------------
    decode = subparsers.add_parser(
        "decode",
        help="Print the message stored in a chunk",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    decode.add_argument("file", help="PNG file to read")
    decode.add_argument("chunk_type", help="Four-letter chunk type to look up")

    # ------------------------------------------------------------------
    # Remove command
    # ------------------------------------------------------------------
    remove = subparsers.add_parser(
        "remove",
        help="Remove the first chunk of a type",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    remove.add_argument("file", help="PNG file to read")
    remove.add_argument("chunk_type", help="Four-letter chunk type to remove")
    remove.add_argument("-o", "--output", help="Where to write the result (default: <name>_removed.png)")

    # ------------------------------------------------------------------
    # Print command
    # ------------------------------------------------------------------
    print_cmd = subparsers.add_parser(
        "print",
        help="List the chunks of a PNG file",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    print_cmd.add_argument("file", help="PNG file to read")
    print_cmd.add_argument(
        "-f",
        "--flags",
        dest="show_flags",
        action="store_true",
        help="Include the critical/public/safe-to-copy flags of each chunk type",
    )

    return parser


def parse_arguments(argv: Optional[Iterable[str]] = None):
    """Return parsed command line arguments."""

    return build_parser().parse_args(args=list(argv) if argv is not None else None)


def run_cli(args) -> int:
    """Execute a CLI command and return the process exit code."""

    from cli import PngSecretCLI

    cli = PngSecretCLI(args)
    return 0 if cli.run() else 1


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Main entry point used by ``python -m`` and the console script."""

    args = parse_arguments(argv)
    if args.verbose:
        set_console_level("DEBUG")

    if getattr(args, "command", None) is None:
        build_parser().print_help(sys.stderr)
        return 2

    logger.debug("Running command %s", args.command)
    return run_cli(args)


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
