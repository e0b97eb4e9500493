from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path

from northcheck.errors import FileAccessError, FileNotFound, FilePermissionDenied
from northcheck.models import FileCheck

LOGGER = logging.getLogger(__name__)


def _resolve(path: str | os.PathLike[str]) -> Path:
    return Path(os.path.normpath(os.path.abspath(os.fspath(path))))


def _hash_sha256(path: Path) -> tuple[str, int]:
    digest = hashlib.sha256()
    size = 0
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(1024 * 1024), b""):
            digest.update(chunk)
            size += len(chunk)
    return digest.hexdigest(), size


def hash_file(path: str | os.PathLike[str]) -> tuple[str, int, str]:
    """Hash a local file.

    Returns the lowercase hex SHA-256 digest, the number of bytes hashed and
    the file's base name. The size is taken from the content actually read so
    it always matches the digest.
    """
    resolved = _resolve(path)
    LOGGER.debug("Hashing %s", resolved)
    try:
        if not resolved.is_file():
            raise FileNotFound(str(resolved))
        sha256, size = _hash_sha256(resolved)
    except FileNotFoundError as exc:
        raise FileNotFound(str(resolved)) from exc
    except PermissionError as exc:
        raise FilePermissionDenied(str(resolved)) from exc
    except OSError as exc:
        raise FileAccessError(str(resolved), exc.strerror or exc.__class__.__name__) from exc
    return sha256, size, resolved.name


def build_file_request(path: str | os.PathLike[str]) -> FileCheck:
    sha256, size, name = hash_file(path)
    LOGGER.info("File info: %s (%d bytes, SHA256: %s...)", name, size, sha256[:8])
    return FileCheck(sha256=sha256, size=size, name=name)
