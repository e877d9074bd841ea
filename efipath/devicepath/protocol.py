"""UEFI Device Path wire constants and binary schemas.

All integers on the wire are little-endian. Every node starts with a
4-byte header (type, subtype, total length including the header) followed
by a subtype-specific payload.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

from construct import Bytes, Flag, Int8ul, Int16ul, Struct as BinStruct  # type: ignore

HEADER_SIZE: Final[int] = 4
MAX_NODE_LENGTH: Final[int] = 0xFFFF

MAC_ADDRESS_BUFFER_SIZE: Final[int] = 32
ETHERNET_ADDRESS_SIZE: Final[int] = 6
IPV4_ADDRESS_SIZE: Final[int] = 4

# UEFI 2.0 defined the IPv4 node up to the static flag; 2.3 added
# gateway and subnet.
IPV4_LEGACY_NODE_LENGTH: Final[int] = 19
IPV4_NODE_LENGTH: Final[int] = 27


class DeviceType(IntEnum):
    HARDWARE = 0x01
    ACPI = 0x02
    MESSAGING = 0x03
    MEDIA = 0x04
    BBS = 0x05
    END = 0x7F


class MessagingSubType(IntEnum):
    URI = 10
    MAC_ADDRESS = 11
    IPV4 = 12
    SATA = 18
    # Known on the wire but not decoded; dispatched as unrecognized.
    VENDOR = 24


HEADER_STRUCT: Final = BinStruct(
    "type" / Int8ul,
    "sub_type" / Int8ul,
    "length" / Int16ul,
)

MAC_ADDRESS_FIELDS: Final = (
    "mac" / Bytes(MAC_ADDRESS_BUFFER_SIZE),
    "addr_type" / Int8ul,
)

IPV4_FIELDS: Final = (
    "local_ip" / Bytes(IPV4_ADDRESS_SIZE),
    "remote_ip" / Bytes(IPV4_ADDRESS_SIZE),
    "local_port" / Int16ul,
    "remote_port" / Int16ul,
)

IPV4_LEGACY_TAIL_FIELDS: Final = (
    "protocol" / Int16ul,
    "static" / Flag,
)

IPV4_ADDRESSING_TAIL_FIELDS: Final = (
    "gateway_ip" / Bytes(IPV4_ADDRESS_SIZE),
    "subnet_mask" / Bytes(IPV4_ADDRESS_SIZE),
)

SATA_FIELDS: Final = (
    "hba_port_number" / Int16ul,
    "port_multiplier_port_number" / Int16ul,
    "lun" / Int16ul,
)


def fields_size(fields: tuple) -> int:
    """Return the total wire width of a tuple of fixed-size fields."""
    return sum(field.sizeof() for field in fields)


MAC_ADDRESS_PAYLOAD_SIZE: Final[int] = fields_size(MAC_ADDRESS_FIELDS)
IPV4_PAYLOAD_SIZE: Final[int] = fields_size(IPV4_FIELDS)
SATA_PAYLOAD_SIZE: Final[int] = fields_size(SATA_FIELDS)
