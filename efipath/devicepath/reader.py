"""Sequential field reader over a binary byte source.

Fields are construct subcons with a fixed width (``"name" / Int16ul``).
Each field is read from the stream in full before it is parsed, so a short
read fails on that field and nothing is parsed into later ones.
"""

from __future__ import annotations

import io
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, BinaryIO

from construct import Bytes, Construct, ConstructError  # type: ignore

from .errors import DevicePathError, MalformedLengthError, TruncatedInputError

ByteSource = BinaryIO | bytes | bytearray | memoryview


class FieldReader:
    """Read typed fields in order and count the bytes consumed."""

    def __init__(self, source: ByteSource) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self._stream: BinaryIO = source
        self._bytes_read = 0
        self._recorders: list[bytearray] = []

    @property
    def bytes_read(self) -> int:
        return self._bytes_read

    @contextmanager
    def recording(self, enabled: bool = True) -> Iterator[bytearray | None]:
        """Collect the raw bytes consumed inside the block.

        Yields None when *enabled* is false so callers can skip the copy.
        """
        if not enabled:
            yield None
            return
        buffer = bytearray()
        self._recorders.append(buffer)
        try:
            yield buffer
        finally:
            self._recorders.pop()

    def read_fields(self, *fields: Construct[Any]) -> list[Any]:
        """Parse *fields* in declaration order and return their values."""
        values: list[Any] = []
        for field in fields:
            name = getattr(field, "name", None) or type(field).__name__
            try:
                size = field.sizeof()
            except ConstructError as exc:
                raise DevicePathError(f"Field {name} has no fixed size: {exc}") from exc
            data = self._read_exact(name, size)
            try:
                values.append(field.parse(data))
            except ConstructError as exc:
                raise DevicePathError(f"Field {name} parsing failed: {exc}") from exc
            self._bytes_read += size
            for buffer in self._recorders:
                buffer += data
        return values

    def read_bytes(self, size: int, name: str = "bytes") -> bytes:
        """Read an exact-size raw byte slice."""
        if size < 0:
            raise MalformedLengthError(f"Negative read size {size} for {name}")
        (value,) = self.read_fields(name / Bytes(size))
        return value

    def _read_exact(self, name: str, size: int) -> bytes:
        chunks: list[bytes] = []
        remaining = size
        while remaining > 0:
            chunk = self._stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        data = b"".join(chunks)
        if len(data) < size:
            raise TruncatedInputError(name, size, len(data))
        return data
