"""Errors raised while decoding device path nodes."""

from __future__ import annotations


class DevicePathError(ValueError):
    """Raised when a device path node cannot be decoded."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TruncatedInputError(DevicePathError, EOFError):
    """The byte source ended before a field was filled."""

    def __init__(self, field: str, expected: int, received: int) -> None:
        super().__init__(f"Truncated input reading {field}: expected {expected} bytes, got {received}")
        self.field = field
        self.expected = expected
        self.received = received


class MalformedLengthError(DevicePathError):
    """The declared node length cannot hold the node's payload."""
