"""Path validation and whole-file byte I/O shared by the commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class ValidationError(ValueError):
    """Raised when validation cannot be completed."""


@dataclass(frozen=True)
class ValidationResult:
    """Simple structure describing a validation outcome."""

    valid: bool
    message: str = ""


def _ensure_path(path: Path | str) -> Path:
    if isinstance(path, Path):
        return path
    return Path(path)


def validate_input_path(path: Path | str) -> ValidationResult:
    """Check whether *path* refers to a readable regular file."""

    candidate = _ensure_path(path)
    if not candidate.exists():
        return ValidationResult(False, f"File not found: {candidate}")
    if not candidate.is_file():
        return ValidationResult(False, f"Not a regular file: {candidate}")
    return ValidationResult(True, "OK")


def default_output_path(path: Path | str, suffix: str) -> Path:
    """Return ``<stem><suffix><ext>`` next to *path*."""

    if not suffix:
        raise ValidationError("Output suffix must not be empty")
    source = _ensure_path(path)
    return source.with_name(source.stem + suffix + source.suffix)


def read_file_bytes(path: Path | str) -> bytes:
    """Return the complete contents of *path*; ``OSError`` on failure."""

    return _ensure_path(path).read_bytes()


def write_file_bytes(path: Path | str, data: bytes) -> Path:
    """Write *data* to *path*, replacing any existing file."""

    destination = _ensure_path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(data)
    return destination
