"""Length-prefixed, CRC-protected PNG chunk records."""

from __future__ import annotations

import struct
import zlib
from dataclasses import dataclass, field
from typing import Union

from .chunk_type import ChunkType
from .errors import CrcMismatch, InvalidUtf8, LengthMismatch, PayloadTooLarge, TruncatedChunk

__all__ = ["Chunk", "MAX_DATA_LENGTH", "CHUNK_OVERHEAD"]

_CHUNK_HEADER = struct.Struct(">I4s")
_CRC_STRUCT = struct.Struct(">I")

CHUNK_OVERHEAD = _CHUNK_HEADER.size + _CRC_STRUCT.size
"""Bytes taken by the length, type and CRC fields of every chunk."""

MAX_DATA_LENGTH = 2**31 - 1
"""Largest payload the PNG length field may declare."""


def _crc32(type_bytes: bytes, data: bytes) -> int:
    return zlib.crc32(data, zlib.crc32(type_bytes)) & 0xFFFFFFFF


@dataclass(frozen=True)
class Chunk:
    """A single PNG chunk.

    The CRC is always computed from ``chunk_type`` and ``data``; it cannot be
    supplied by the caller. Use :meth:`parse` to read a chunk from raw bytes.
    """

    chunk_type: ChunkType
    data: bytes = b""
    crc: int = field(init=False)

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) > MAX_DATA_LENGTH:
            raise PayloadTooLarge(
                f"chunk payload of {len(data)} bytes exceeds the {MAX_DATA_LENGTH} byte limit"
            )
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "crc", _crc32(self.chunk_type.bytes(), data))

    @classmethod
    def from_strings(cls, chunk_type: str, message: str) -> "Chunk":
        """Build a chunk from a type code and a text message (UTF-8 encoded)."""

        return cls(ChunkType.from_str(chunk_type), message.encode("utf-8"))

    @classmethod
    def parse(cls, raw: Union[bytes, bytearray, memoryview]) -> "Chunk":
        """Decode exactly one serialized chunk.

        ``raw`` must hold the complete record and nothing else:
        ``length | type | data | crc``, all integers big-endian.
        """

        raw = bytes(raw)
        if len(raw) < CHUNK_OVERHEAD:
            raise TruncatedChunk(
                f"chunk needs at least {CHUNK_OVERHEAD} bytes, got {len(raw)}"
            )

        length, type_bytes = _CHUNK_HEADER.unpack_from(raw, 0)
        if CHUNK_OVERHEAD + length != len(raw):
            raise LengthMismatch(
                f"chunk declares {length} data bytes but {len(raw) - CHUNK_OVERHEAD} are available"
            )

        data_start = _CHUNK_HEADER.size
        data = raw[data_start : data_start + length]
        (stored_crc,) = _CRC_STRUCT.unpack_from(raw, data_start + length)

        calculated_crc = _crc32(type_bytes, data)
        if calculated_crc != stored_crc:
            raise CrcMismatch(
                f"CRC mismatch for chunk {type_bytes!r}: "
                f"stored {stored_crc:#010x}, calculated {calculated_crc:#010x}"
            )

        return cls(ChunkType.from_bytes(type_bytes), data)

    @property
    def length(self) -> int:
        return len(self.data)

    def data_as_text(self) -> str:
        try:
            return self.data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidUtf8(f"chunk {self.chunk_type} does not hold UTF-8 text: {exc}") from exc

    def to_bytes(self) -> bytes:
        return (
            _CHUNK_HEADER.pack(self.length, self.chunk_type.bytes())
            + self.data
            + _CRC_STRUCT.pack(self.crc)
        )

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return f"{self.chunk_type} length={self.length} crc={self.crc:#010x}"
