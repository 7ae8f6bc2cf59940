"""Command line interface for pngsecret.

This module implements the command dispatcher used by :mod:`main`. Each
sub-command reads the whole input file, parses it into a :class:`Png`,
performs exactly one chunk operation and then either writes the new file or
prints text. Output is only written once the complete result is available,
so a failed command never leaves a partial file behind.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Optional

from config import OUTPUT_SETTINGS, PNG_SETTINGS
from png_codec.chunk import Chunk
from png_codec.chunk_type import ChunkType
from png_codec.errors import ChunkNotFound, PngChunkError
from png_codec.png import Png
from utils.logger import log_operation, setup_logger
from utils.validators import (
    default_output_path,
    read_file_bytes,
    validate_input_path,
    write_file_bytes,
)

logger = setup_logger(__name__)


class CLIError(RuntimeError):
    """Custom error raised for recoverable CLI failures."""


def _ensure_exists(path: Path, description: str) -> Path:
    result = validate_input_path(path)
    if not result.valid:
        raise CLIError(f"{description}: {result.message}")
    return path


def _read_png(path: Path) -> Png:
    raw = read_file_bytes(path)
    logger.debug("Read %d bytes from %s", len(raw), path)
    return Png.parse(raw)


class PngSecretCLI:
    """CLI dispatcher for pngsecret."""

    def __init__(self, args) -> None:
        self.args = args
        self.command = getattr(args, "command", None)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------
    def run(self) -> bool:
        try:
            if self.command == "encode":
                self._handle_encode()
            elif self.command == "decode":
                self._handle_decode()
            elif self.command == "remove":
                self._handle_remove()
            elif self.command == "print":
                self._handle_print()
            else:
                raise CLIError("No command specified. Use --help for usage information.")
        except (CLIError, PngChunkError) as exc:
            logger.error("CLI error: %s", exc)
            print(f"Error: {exc}", file=sys.stderr)
            return False
        except OSError as exc:
            logger.error("I/O error: %s", exc)
            print(f"Error: {exc}", file=sys.stderr)
            return False
        except KeyboardInterrupt:
            print("Operation cancelled by user.", file=sys.stderr)
            return False

        return True

    # ------------------------------------------------------------------
    # Encode command
    # ------------------------------------------------------------------
    @log_operation("Encode")
    def _handle_encode(self) -> None:
        args = self.args

        # Reject a bad type before touching the filesystem.
        chunk = Chunk.from_strings(args.chunk_type, args.message)
        source = _ensure_exists(Path(args.file), "Input file")

        png = _read_png(source)
        before_type = None if getattr(args, "append", False) else PNG_SETTINGS["terminator_type"]
        index = png.insert_chunk(chunk, before_type=before_type)

        output_path = self._output_path(source, OUTPUT_SETTINGS["encode_suffix"])
        write_file_bytes(output_path, png.to_bytes())

        log_operation(logger, "Encode", details=f"{chunk} at index {index} -> {output_path}")
        print(f"Encoded {chunk.length} bytes into chunk {chunk.chunk_type} (index {index})")
        print(f"Output : {output_path}")

    # ------------------------------------------------------------------
    # Decode command
    # ------------------------------------------------------------------
    @log_operation("Decode")
    def _handle_decode(self) -> None:
        args = self.args

        chunk_type = ChunkType.from_str(args.chunk_type)
        source = _ensure_exists(Path(args.file), "Input file")

        png = _read_png(source)
        chunk = png.chunk_by_type(str(chunk_type))
        if chunk is None:
            raise ChunkNotFound(f"no chunk of type {str(chunk_type)!r} in {source}")

        print(chunk.data_as_text())

    # ------------------------------------------------------------------
    # Remove command
    # ------------------------------------------------------------------
    @log_operation("Remove")
    def _handle_remove(self) -> None:
        args = self.args

        chunk_type = ChunkType.from_str(args.chunk_type)
        source = _ensure_exists(Path(args.file), "Input file")

        png = _read_png(source)
        removed = png.remove_chunk(str(chunk_type))

        output_path = self._output_path(source, OUTPUT_SETTINGS["remove_suffix"])
        write_file_bytes(output_path, png.to_bytes())

        log_operation(logger, "Remove", details=f"{removed} -> {output_path}")
        print(f"Removed chunk {removed.chunk_type} ({removed.length} bytes)")
        print(f"Output : {output_path}")

    # ------------------------------------------------------------------
    # Print command
    # ------------------------------------------------------------------
    @log_operation("Print")
    def _handle_print(self) -> None:
        args = self.args

        source = _ensure_exists(Path(args.file), "Input file")
        png = _read_png(source)
        print(png.describe(verbose=getattr(args, "show_flags", False)))

    def _output_path(self, source: Path, suffix: str) -> Path:
        output = getattr(self.args, "output", None)
        if output:
            return Path(output)
        return default_output_path(source, suffix)


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point used by unit tests."""

    from main import main as _main  # Lazy import to avoid circular dependency.

    return _main(list(argv) if argv is not None else None)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    sys.exit(main(sys.argv[1:]))
