"""Tests for validator and file helpers."""
from __future__ import annotations

from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from utils.validators import (
    ValidationError,
    default_output_path,
    read_file_bytes,
    validate_input_path,
    write_file_bytes,
)


def test_validate_input_path_accepts_file(tmp_path: Path) -> None:
    sample = tmp_path / "sample.png"
    sample.write_bytes(b"data")
    result = validate_input_path(sample)
    assert result.valid


def test_validate_input_path_rejects_missing(tmp_path: Path) -> None:
    result = validate_input_path(tmp_path / "missing.png")
    assert not result.valid
    assert "not found" in result.message


def test_validate_input_path_rejects_directory(tmp_path: Path) -> None:
    result = validate_input_path(tmp_path)
    assert not result.valid
    assert "Not a regular file" in result.message


def test_default_output_path_keeps_directory_and_extension(tmp_path: Path) -> None:
    assert default_output_path(tmp_path / "cover.png", "_encoded") == tmp_path / "cover_encoded.png"
    assert default_output_path("image", "_removed") == Path("image_removed")


def test_default_output_path_requires_suffix(tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        default_output_path(tmp_path / "cover.png", "")


def test_write_then_read_bytes(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "out.bin"
    assert write_file_bytes(target, b"first") == target
    write_file_bytes(str(target), b"second")
    assert read_file_bytes(target) == b"second"


def test_read_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_file_bytes(tmp_path / "missing.bin")
