"""Tests for the sequential field reader."""

from __future__ import annotations

import io

import pytest
from construct import Bytes, Flag, GreedyBytes, Int8ul, Int16ul

from efipath.devicepath import DevicePathError, FieldReader, MalformedLengthError, TruncatedInputError


class _TrickleStream(io.RawIOBase):
    """Return at most one byte per read call."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        chunk = self._data[self._pos : self._pos + 1]
        self._pos += len(chunk)
        return chunk


def test_read_fields_in_order_and_count_bytes() -> None:
    reader = FieldReader(b"\x01\x34\x12\x01abcd")

    values = reader.read_fields("a" / Int8ul, "b" / Int16ul, "c" / Flag, "d" / Bytes(4))

    assert values == [1, 0x1234, True, b"abcd"]
    assert reader.bytes_read == 8


def test_counter_accumulates_across_calls() -> None:
    reader = FieldReader(io.BytesIO(b"\x01\x02\x03\x04"))

    reader.read_fields("a" / Int16ul)
    reader.read_fields("b" / Int8ul)

    assert reader.bytes_read == 3


def test_short_read_stops_before_later_fields() -> None:
    stream = io.BytesIO(b"\x01\x02\x03")
    reader = FieldReader(stream)

    with pytest.raises(TruncatedInputError) as excinfo:
        reader.read_fields("first" / Int16ul, "second" / Int16ul, "third" / Int8ul)

    assert excinfo.value.field == "second"
    assert (excinfo.value.expected, excinfo.value.received) == (2, 1)
    assert reader.bytes_read == 2


def test_empty_source_raises_truncated() -> None:
    with pytest.raises(TruncatedInputError, match="expected 1 bytes, got 0"):
        FieldReader(b"").read_fields("x" / Int8ul)


def test_reads_through_partial_stream_reads() -> None:
    reader = FieldReader(_TrickleStream(b"\x10\x20\x30"))

    (value,) = reader.read_fields("v" / Bytes(3))

    assert value == b"\x10\x20\x30"


def test_read_bytes_exact() -> None:
    reader = FieldReader(bytearray(b"hello world"))

    assert reader.read_bytes(5) == b"hello"
    assert reader.bytes_read == 5


def test_read_bytes_rejects_negative_size() -> None:
    with pytest.raises(MalformedLengthError):
        FieldReader(b"abc").read_bytes(-1)


def test_variable_size_field_is_rejected() -> None:
    with pytest.raises(DevicePathError, match="no fixed size"):
        FieldReader(b"abc").read_fields("rest" / GreedyBytes)


def test_recording_collects_bytes_of_block_only() -> None:
    reader = FieldReader(memoryview(b"\xde\xad\xbe\xef\x01"))
    reader.read_fields("skipped" / Int8ul)

    with reader.recording() as recorded:
        reader.read_fields("a" / Int16ul)
    reader.read_fields("after" / Int8ul)

    assert recorded == b"\xad\xbe"
    assert reader.bytes_read == 4


def test_nested_recordings_share_reads() -> None:
    reader = FieldReader(b"\x01\x02\x03")

    with reader.recording() as outer:
        reader.read_fields("a" / Int8ul)
        with reader.recording() as inner:
            reader.read_fields("b" / Int16ul)

    assert outer == b"\x01\x02\x03"
    assert inner == b"\x02\x03"


def test_disabled_recording_yields_none() -> None:
    reader = FieldReader(b"\x00")

    with reader.recording(False) as recorded:
        reader.read_fields("a" / Int8ul)

    assert recorded is None


def test_recording_stops_on_error() -> None:
    stream = io.BytesIO(b"\x01")
    reader = FieldReader(stream)

    with pytest.raises(TruncatedInputError):
        with reader.recording() as failed:
            reader.read_fields("a" / Int16ul)

    stream.seek(0)
    reader.read_fields("b" / Int8ul)
    assert failed == b""
