"""Tests for the device path node header."""

from __future__ import annotations

import pytest

from efipath.devicepath import DevicePathError, Head, MalformedLengthError, TruncatedInputError, protocol


def test_from_bytes_little_endian_length() -> None:
    head = Head.from_bytes(b"\x03\x0b\x25\x00trailing")

    assert head.type == protocol.DeviceType.MESSAGING
    assert head.sub_type == protocol.MessagingSubType.MAC_ADDRESS
    assert head.length == 37
    assert head.payload_length == 33


def test_to_bytes_round_trip() -> None:
    head = Head(type=3, sub_type=18, length=10)

    assert head.to_bytes() == b"\x03\x12\x0a\x00"
    assert Head.from_bytes(head.to_bytes()) == head


def test_from_bytes_rejects_short_input() -> None:
    with pytest.raises(TruncatedInputError):
        Head.from_bytes(b"\x03\x0b\x25")


@pytest.mark.parametrize("length", [0, 3])
def test_payload_length_rejects_undersized_length(length: int) -> None:
    with pytest.raises(MalformedLengthError):
        _ = Head(type=3, sub_type=10, length=length).payload_length


def test_to_bytes_rejects_out_of_range_length() -> None:
    with pytest.raises(DevicePathError):
        Head(type=3, sub_type=10, length=protocol.MAX_NODE_LENGTH + 1).to_bytes()


def test_head_is_immutable() -> None:
    head = Head(type=3, sub_type=10, length=4)

    with pytest.raises(AttributeError):
        head.length = 8  # type: ignore[misc]
