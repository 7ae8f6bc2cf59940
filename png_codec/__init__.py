"""PNG chunk codec: chunk types, chunks and whole chunk streams."""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "ChunkType",
    "Chunk",
    "Png",
    "PNG_SIGNATURE",
    "TERMINATOR_TYPE",
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

_ERROR_NAMES = {
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
}


if TYPE_CHECKING:  # pragma: no cover - only for typing
    from .chunk import Chunk
    from .chunk_type import ChunkType
    from .errors import (
        BadSignature,
        ChunkNotFound,
        CrcMismatch,
        InvalidChunkType,
        InvalidUtf8,
        LengthMismatch,
        PayloadTooLarge,
        PngChunkError,
        TruncatedChunk,
        TruncatedFile,
    )
    from .png import PNG_SIGNATURE, TERMINATOR_TYPE, Png


def __getattr__(name: str) -> Any:
    if name == "ChunkType":
        return import_module(".chunk_type", __name__).ChunkType
    if name == "Chunk":
        return import_module(".chunk", __name__).Chunk
    if name in {"Png", "PNG_SIGNATURE", "TERMINATOR_TYPE"}:
        module = import_module(".png", __name__)
        return getattr(module, name)
    if name in _ERROR_NAMES:
        module = import_module(".errors", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
