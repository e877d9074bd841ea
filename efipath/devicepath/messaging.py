"""Messaging device path nodes (type 0x03).

The messaging class describes communication endpoints: network addresses,
storage fabric ports and URIs. :func:`parse_messaging_device_path` picks a
node variant by subtype and decodes its payload from a byte source that is
positioned right after the 4-byte header.

Subtypes without a decoder produce :class:`UnrecognizedDevicePath`, which
reads nothing so the caller can skip the node using ``head.length``.
"""

from __future__ import annotations

import logging
from ipaddress import IPv4Address
from typing import Any, ClassVar, Self

import msgspec

from ..common import log_hexdump
from ..config.model import DecoderConfig
from . import protocol
from .protocol import IPV4_PAYLOAD_SIZE, MAC_ADDRESS_PAYLOAD_SIZE, SATA_PAYLOAD_SIZE
from .errors import MalformedLengthError
from .head import Head
from .reader import ByteSource, FieldReader

logger = logging.getLogger(__name__)

_ZERO_IPV4 = IPv4Address(0)


class DevicePath(msgspec.Struct, frozen=True, tag_field="kind"):
    """Base class for decoded device path nodes."""

    head: Head

    # Fixed payload width in bytes; None for data-driven widths.
    FIXED_SIZE: ClassVar[int | None] = None

    def text(self) -> str:
        raise NotImplementedError

    def get_head(self) -> Head:
        return self.head

    @classmethod
    def wire_size(cls, head: Head, config: DecoderConfig) -> int:
        """Return the payload bytes this variant consumes for *head*."""
        return cls.FIXED_SIZE or 0

    @classmethod
    def read_from(cls, head: Head, reader: FieldReader, config: DecoderConfig) -> Self:
        raise NotImplementedError


class MacAddressDevicePath(DevicePath, frozen=True, tag="mac_address"):
    """MAC address node; the address is padded to 32 bytes on the wire."""

    mac: bytes
    addr_type: int

    FIXED_SIZE = MAC_ADDRESS_PAYLOAD_SIZE

    @property
    def address(self) -> bytes:
        """The significant Ethernet address bytes."""
        return self.mac[: protocol.ETHERNET_ADDRESS_SIZE]

    def text(self) -> str:
        return f"MAC Address: {self.address.hex(':')} Type: {self.addr_type}"

    @classmethod
    def read_from(cls, head: Head, reader: FieldReader, config: DecoderConfig) -> Self:
        mac, addr_type = reader.read_fields(*protocol.MAC_ADDRESS_FIELDS)
        return cls(head=head, mac=mac, addr_type=addr_type)


class IPv4DevicePath(DevicePath, frozen=True, tag="ipv4"):
    """IPv4 endpoint node.

    Only the addresses and ports are read by default. ``protocol``,
    ``static``, ``gateway_ip`` and ``subnet_mask`` are part of the UEFI
    layout but stay zero unless ``ipv4_extended_fields`` is enabled and the
    declared length covers them.
    """

    local_ip: IPv4Address
    remote_ip: IPv4Address
    local_port: int
    remote_port: int
    protocol: int = 0
    static: bool = False
    gateway_ip: IPv4Address = _ZERO_IPV4
    subnet_mask: IPv4Address = _ZERO_IPV4

    FIXED_SIZE = IPV4_PAYLOAD_SIZE

    def text(self) -> str:
        return f"IPv4 Local:{self.local_ip} Remote:{self.remote_ip}"

    @classmethod
    def wire_size(cls, head: Head, config: DecoderConfig) -> int:
        size = IPV4_PAYLOAD_SIZE
        if not config.ipv4_extended_fields:
            return size
        if head.length >= protocol.IPV4_LEGACY_NODE_LENGTH:
            size += protocol.fields_size(protocol.IPV4_LEGACY_TAIL_FIELDS)
        if head.length >= protocol.IPV4_NODE_LENGTH:
            size += protocol.fields_size(protocol.IPV4_ADDRESSING_TAIL_FIELDS)
        return size

    @classmethod
    def read_from(cls, head: Head, reader: FieldReader, config: DecoderConfig) -> Self:
        local_ip, remote_ip, local_port, remote_port = reader.read_fields(*protocol.IPV4_FIELDS)
        extra: dict[str, Any] = {}
        if config.ipv4_extended_fields and head.length >= protocol.IPV4_LEGACY_NODE_LENGTH:
            extra["protocol"], extra["static"] = reader.read_fields(*protocol.IPV4_LEGACY_TAIL_FIELDS)
            if head.length >= protocol.IPV4_NODE_LENGTH:
                gateway_ip, subnet_mask = reader.read_fields(*protocol.IPV4_ADDRESSING_TAIL_FIELDS)
                extra["gateway_ip"] = IPv4Address(gateway_ip)
                extra["subnet_mask"] = IPv4Address(subnet_mask)
        return cls(
            head=head,
            local_ip=IPv4Address(local_ip),
            remote_ip=IPv4Address(remote_ip),
            local_port=local_port,
            remote_port=remote_port,
            **extra,
        )


class SataDevicePath(DevicePath, frozen=True, tag="sata"):
    hba_port_number: int
    port_multiplier_port_number: int
    lun: int

    FIXED_SIZE = SATA_PAYLOAD_SIZE

    def text(self) -> str:
        return f"SATA Port: {self.hba_port_number} PortMul: {self.port_multiplier_port_number} LUN: {self.lun}"

    @classmethod
    def read_from(cls, head: Head, reader: FieldReader, config: DecoderConfig) -> Self:
        hba_port_number, port_multiplier_port_number, lun = reader.read_fields(*protocol.SATA_FIELDS)
        return cls(
            head=head,
            hba_port_number=hba_port_number,
            port_multiplier_port_number=port_multiplier_port_number,
            lun=lun,
        )


class UriDevicePath(DevicePath, frozen=True, tag="uri"):
    """URI node; the payload is the raw URI with no terminator."""

    uri: bytes

    @property
    def uri_text(self) -> str:
        return self.uri.decode("utf-8", errors="replace")

    def text(self) -> str:
        return f"URI: {self.uri_text}"

    @classmethod
    def wire_size(cls, head: Head, config: DecoderConfig) -> int:
        size = head.payload_length
        if size > config.max_uri_length:
            raise MalformedLengthError(f"URI length {size} exceeds max {config.max_uri_length}")
        return size

    @classmethod
    def read_from(cls, head: Head, reader: FieldReader, config: DecoderConfig) -> Self:
        size = cls.wire_size(head, config)
        return cls(head=head, uri=reader.read_bytes(size, "uri"))


class UnrecognizedDevicePath(DevicePath, frozen=True, tag="unrecognized"):
    """Placeholder for subtypes without a decoder; carries the header only."""

    def text(self) -> str:
        return f"Unrecognized Type: {self.head.type} SubType: {self.head.sub_type} Length: {self.head.length}"

    @classmethod
    def read_from(cls, head: Head, reader: FieldReader, config: DecoderConfig) -> Self:
        return cls(head=head)


MessagingDevicePath = (
    MacAddressDevicePath | IPv4DevicePath | SataDevicePath | UriDevicePath | UnrecognizedDevicePath
)

MESSAGING_DEVICE_PATHS: dict[
    int,
    type[MacAddressDevicePath] | type[IPv4DevicePath] | type[SataDevicePath] | type[UriDevicePath],
] = {
    protocol.MessagingSubType.URI: UriDevicePath,
    protocol.MessagingSubType.MAC_ADDRESS: MacAddressDevicePath,
    protocol.MessagingSubType.IPV4: IPv4DevicePath,
    protocol.MessagingSubType.SATA: SataDevicePath,
}


def parse_messaging_device_path(
    head: Head,
    source: ByteSource | FieldReader,
    config: DecoderConfig | None = None,
) -> tuple[MessagingDevicePath, int]:
    """Decode one messaging node payload.

    *source* must be positioned at the first payload byte. Returns the node
    and the number of payload bytes consumed. Errors from the field reader
    propagate unchanged.
    """
    if config is None:
        config = DecoderConfig()

    node_cls: (
        type[MacAddressDevicePath]
        | type[IPv4DevicePath]
        | type[SataDevicePath]
        | type[UriDevicePath]
        | type[UnrecognizedDevicePath]
    ) = MESSAGING_DEVICE_PATHS.get(head.sub_type, UnrecognizedDevicePath)
    if node_cls is UnrecognizedDevicePath:
        logger.debug("No decoder for messaging subtype %d; node spans %d bytes", head.sub_type, head.length)
    elif config.strict_length and node_cls.FIXED_SIZE is not None:
        required = node_cls.wire_size(head, config)
        available = head.length - protocol.HEADER_SIZE
        if required > available:
            raise MalformedLengthError(
                f"{node_cls.__name__} needs {required} payload bytes, header declares {available}"
            )

    reader = source if isinstance(source, FieldReader) else FieldReader(source)
    start = reader.bytes_read
    with reader.recording(config.debug_logging) as recorded:
        node = node_cls.read_from(head, reader, config)
    consumed = reader.bytes_read - start

    if recorded is not None:
        log_hexdump(logger, logging.DEBUG, node_cls.__name__, bytes(recorded))
    logger.debug(
        "Decoded %s (%d payload bytes)",
        node_cls.__name__,
        consumed,
        extra={"head": head, "consumed": consumed},
    )
    return node, consumed


def to_dict(node: DevicePath) -> dict[str, Any]:
    """Return a JSON-ready representation of *node*.

    Addresses render as strings and raw byte fields as lowercase hex.
    """
    data = msgspec.to_builtins(node, builtin_types=(bytes,), enc_hook=str)
    return {key: value.hex() if isinstance(value, bytes) else value for key, value in data.items()}
