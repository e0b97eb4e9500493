from __future__ import annotations

import re

from northcheck.errors import ValidationError

_SHA256_RE = re.compile(r"[a-fA-F0-9]{64}")
_SIZE_RE = re.compile(r"[+-]?[0-9]+")


def validate_hash(value: str) -> bool:
    return _SHA256_RE.fullmatch(value) is not None


def parse_hash(value: str, hint: str | None = None) -> str:
    if not validate_hash(value):
        raise ValidationError(
            "Invalid SHA256 hash format. Hash must be 64 hexadecimal characters.",
            hint=hint,
        )
    return value


def validate_size(value: str) -> int:
    """Parse a base-10 byte count, rejecting anything negative or non-numeric."""
    cleaned = value.strip()
    if not _SIZE_RE.fullmatch(cleaned):
        raise ValidationError(f"Size must be a non-negative integer, got {value!r}")
    size = int(cleaned)
    if size < 0:
        raise ValidationError(f"Size must be a non-negative integer, got {value!r}")
    return size


def require_size(value: str | None) -> int:
    if value is None:
        raise ValidationError(
            "--size option is required when using --hash",
            hint="Example: northcheck file dummy --hash abc123... --size 1024 --name example.exe",
        )
    return validate_size(value)
