"""Error types raised by the PNG chunk codec."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "PngChunkError",
    "InvalidChunkType",
    "TruncatedChunk",
    "TruncatedFile",
    "CrcMismatch",
    "LengthMismatch",
    "BadSignature",
    "ChunkNotFound",
    "InvalidUtf8",
    "PayloadTooLarge",
]


class PngChunkError(ValueError):
    """Base class for every codec failure.

    ``offset`` is the byte position inside the file being parsed when the
    failure can be tied to one, otherwise ``None``.
    """

    def __init__(self, message: str, offset: Optional[int] = None) -> None:
        if offset is not None:
            message = f"{message} (at byte offset {offset})"
        super().__init__(message)
        self.offset = offset


class InvalidChunkType(PngChunkError):
    """Raised when a chunk type is not four ASCII letters."""


class TruncatedChunk(PngChunkError):
    """Raised when fewer than 12 bytes are available for a chunk."""


class TruncatedFile(PngChunkError):
    """Raised when a file is too short to hold the PNG signature."""


class CrcMismatch(PngChunkError):
    """Raised when a stored CRC does not match the chunk contents."""


class LengthMismatch(PngChunkError):
    """Raised when the declared chunk length disagrees with the bytes available."""


class BadSignature(PngChunkError):
    """Raised when the data does not start with the PNG signature."""


class ChunkNotFound(PngChunkError):
    """Raised when no chunk of the requested type exists."""


class InvalidUtf8(PngChunkError):
    """Raised when a chunk payload cannot be decoded as UTF-8 text."""


class PayloadTooLarge(PngChunkError):
    """Raised when a payload does not fit the 31-bit PNG length field."""
