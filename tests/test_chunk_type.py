from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from png_codec.chunk_type import ChunkType
from png_codec.errors import InvalidChunkType


def test_from_bytes_keeps_raw_code() -> None:
    chunk_type = ChunkType.from_bytes(bytes([82, 117, 83, 116]))
    assert chunk_type.bytes() == b"RuSt"
    assert bytes(chunk_type) == b"RuSt"


def test_from_str_matches_from_bytes() -> None:
    assert ChunkType.from_str("RuSt") == ChunkType.from_bytes(b"RuSt")
    assert ChunkType.from_str("RuSt") != ChunkType.from_str("ruSt")


def test_str_renders_the_four_letters() -> None:
    assert str(ChunkType.from_str("RuSt")) == "RuSt"


def test_flags_of_rust() -> None:
    chunk_type = ChunkType.from_str("RuSt")
    assert chunk_type.is_critical()
    assert not chunk_type.is_public()
    assert chunk_type.is_reserved_bit_valid()
    assert chunk_type.is_safe_to_copy()
    assert chunk_type.is_valid()


@pytest.mark.parametrize(
    "code, query, expected",
    [
        ("ruSt", "is_critical", False),
        ("RUSt", "is_public", True),
        ("RuST", "is_safe_to_copy", False),
        ("IEND", "is_critical", True),
        ("tEXt", "is_critical", False),
    ],
)
def test_individual_flag_bits(code: str, query: str, expected: bool) -> None:
    assert getattr(ChunkType.from_str(code), query)() is expected


def test_reserved_bit_set_constructs_but_is_invalid() -> None:
    chunk_type = ChunkType.from_str("Rust")
    assert not chunk_type.is_reserved_bit_valid()
    assert not chunk_type.is_valid()


@pytest.mark.parametrize("code", ["Ru1t", "Ru t", "RuS", "RuSty", "", "Rüst"])
def test_from_str_rejects_bad_codes(code: str) -> None:
    with pytest.raises(InvalidChunkType):
        ChunkType.from_str(code)


def test_from_bytes_rejects_non_letters() -> None:
    with pytest.raises(InvalidChunkType):
        ChunkType.from_bytes(b"Ru\x00t")


def test_chunk_type_is_immutable_and_hashable() -> None:
    chunk_type = ChunkType.from_str("IHDR")
    with pytest.raises(AttributeError):
        chunk_type.raw = b"IEND"  # type: ignore[misc]
    assert {chunk_type, ChunkType.from_str("IHDR")} == {chunk_type}


def test_flag_summary() -> None:
    assert ChunkType.from_str("IHDR").flags() == "critical,public,unsafe"
    assert ChunkType.from_str("ruSt").flags() == "ancillary,private,safe"
    assert ChunkType.from_str("Rust").flags().endswith("reserved-bit-set")
