"""The 4-byte header shared by every device path node."""

from __future__ import annotations

import msgspec
from construct import ConstructError  # type: ignore

from . import protocol
from .errors import DevicePathError, MalformedLengthError, TruncatedInputError


class Head(msgspec.Struct, frozen=True):
    """Node header: type, subtype and total length including the header."""

    type: int
    sub_type: int
    length: int

    @property
    def payload_length(self) -> int:
        """Bytes following the header, derived from the declared length."""
        if self.length < protocol.HEADER_SIZE:
            raise MalformedLengthError(
                f"Declared length {self.length} is smaller than the {protocol.HEADER_SIZE}-byte header"
            )
        return self.length - protocol.HEADER_SIZE

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> "Head":
        """Parse the first four bytes of *data* as a node header."""
        raw = bytes(data)
        if len(raw) < protocol.HEADER_SIZE:
            raise TruncatedInputError("header", protocol.HEADER_SIZE, len(raw))
        container = protocol.HEADER_STRUCT.parse(raw[: protocol.HEADER_SIZE])
        return cls(type=container.type, sub_type=container.sub_type, length=container.length)

    def to_bytes(self) -> bytes:
        try:
            return protocol.HEADER_STRUCT.build({"type": self.type, "sub_type": self.sub_type, "length": self.length})
        except ConstructError as exc:
            raise DevicePathError(f"Header fields out of range: {exc}") from exc
