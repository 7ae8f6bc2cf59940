"""Four-letter PNG chunk type codes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import InvalidChunkType

__all__ = ["ChunkType"]

_FLAG_BIT = 0x20


def _is_ascii_letter(value: int) -> bool:
    return 65 <= value <= 90 or 97 <= value <= 122


@dataclass(frozen=True)
class ChunkType:
    """A validated chunk type such as ``IHDR`` or ``ruSt``.

    Bit 5 of each byte carries a property flag: ancillary, private,
    reserved and safe-to-copy, in that order.
    """

    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, (bytes, bytearray, memoryview)):
            raise InvalidChunkType("chunk type must be a bytes-like object")
        raw = bytes(self.raw)
        if len(raw) != 4:
            raise InvalidChunkType(f"chunk type must be exactly 4 bytes, got {len(raw)}")
        if not all(_is_ascii_letter(c) for c in raw):
            raise InvalidChunkType(f"chunk type must contain ASCII letters only: {raw!r}")
        object.__setattr__(self, "raw", raw)

    @classmethod
    def from_bytes(cls, raw: Union[bytes, bytearray, memoryview]) -> "ChunkType":
        return cls(bytes(raw))

    @classmethod
    def from_str(cls, text: str) -> "ChunkType":
        try:
            raw = text.encode("ascii")
        except (AttributeError, UnicodeEncodeError) as exc:
            raise InvalidChunkType(f"chunk type must be ASCII text: {text!r}") from exc
        return cls(raw)

    def bytes(self) -> bytes:
        return self.raw

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return self.raw.decode("ascii", errors="replace")

    def is_critical(self) -> bool:
        return not self.raw[0] & _FLAG_BIT

    def is_public(self) -> bool:
        return not self.raw[1] & _FLAG_BIT

    def is_reserved_bit_valid(self) -> bool:
        return not self.raw[2] & _FLAG_BIT

    def is_safe_to_copy(self) -> bool:
        return bool(self.raw[3] & _FLAG_BIT)

    def is_valid(self) -> bool:
        # Letters are guaranteed by __post_init__.
        return self.is_reserved_bit_valid()

    def flags(self) -> str:
        """Return a compact summary such as ``critical,public,unsafe``."""

        parts = [
            "critical" if self.is_critical() else "ancillary",
            "public" if self.is_public() else "private",
            "safe" if self.is_safe_to_copy() else "unsafe",
        ]
        if not self.is_reserved_bit_valid():
            parts.append("reserved-bit-set")
        return ",".join(parts)
