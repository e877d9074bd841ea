"""UEFI Device Path node decoding."""

from . import protocol
from .errors import DevicePathError, MalformedLengthError, TruncatedInputError
from .head import Head
from .messaging import (
    MESSAGING_DEVICE_PATHS,
    DevicePath,
    IPv4DevicePath,
    MacAddressDevicePath,
    MessagingDevicePath,
    SataDevicePath,
    UnrecognizedDevicePath,
    UriDevicePath,
    parse_messaging_device_path,
    to_dict,
)
from .reader import FieldReader

__all__ = [
    "DevicePath",
    "DevicePathError",
    "FieldReader",
    "Head",
    "IPv4DevicePath",
    "MESSAGING_DEVICE_PATHS",
    "MacAddressDevicePath",
    "MalformedLengthError",
    "MessagingDevicePath",
    "SataDevicePath",
    "TruncatedInputError",
    "UnrecognizedDevicePath",
    "UriDevicePath",
    "parse_messaging_device_path",
    "protocol",
    "to_dict",
]
