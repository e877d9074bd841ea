"""Data model for decoder configuration."""

from __future__ import annotations

from dataclasses import dataclass

from ..const import (
    DEFAULT_DEBUG_LOGGING,
    DEFAULT_IPV4_EXTENDED_FIELDS,
    DEFAULT_MAX_URI_LENGTH,
    DEFAULT_STRICT_LENGTH,
)


@dataclass(slots=True)
class DecoderConfig:
    """Strongly typed configuration for node decoding."""

    strict_length: bool = DEFAULT_STRICT_LENGTH
    ipv4_extended_fields: bool = DEFAULT_IPV4_EXTENDED_FIELDS
    debug_logging: bool = DEFAULT_DEBUG_LOGGING
    max_uri_length: int = DEFAULT_MAX_URI_LENGTH

    def __post_init__(self) -> None:
        if self.max_uri_length <= 0:
            raise ValueError("max_uri_length must be a positive integer")
