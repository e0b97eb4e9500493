from __future__ import annotations

from typing import Any, Literal

ErrorKind = Literal[
    "validation",
    "not_found",
    "permission_denied",
    "io_failure",
    "timeout",
    "network",
    "api",
    "unexpected",
]


class CheckError(Exception):
    """Base class for every failure that ends a check invocation."""

    kind: ErrorKind = "unexpected"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CheckError):
    kind = "validation"

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class FileNotFound(CheckError):
    kind = "not_found"

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found at {path}")
        self.path = path


class FilePermissionDenied(CheckError):
    kind = "permission_denied"

    def __init__(self, path: str) -> None:
        super().__init__(f"Permission denied accessing {path}")
        self.path = path


class FileAccessError(CheckError):
    kind = "io_failure"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot access file at {path}: {reason}")
        self.path = path
        self.reason = reason


class RequestTimeout(CheckError):
    kind = "timeout"


class NetworkError(CheckError):
    kind = "network"


class APIError(CheckError):
    kind = "api"

    def __init__(self, status_code: int, reason: str, body: Any = None) -> None:
        super().__init__(f"API Error ({status_code}): {reason}")
        self.status_code = status_code
        self.reason = reason
        self.body = body


class UnexpectedResponse(CheckError):
    kind = "unexpected"
