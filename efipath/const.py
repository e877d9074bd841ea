"""Configuration defaults for the efipath decoder."""

from __future__ import annotations

from typing import Final

ENV_PREFIX: Final[str] = "EFIPATH_"

DEFAULT_STRICT_LENGTH: Final[bool] = True
DEFAULT_IPV4_EXTENDED_FIELDS: Final[bool] = False
DEFAULT_DEBUG_LOGGING: Final[bool] = False
# Largest payload a 16-bit node length can describe.
DEFAULT_MAX_URI_LENGTH: Final[int] = 0xFFFF - 4

CONFIG_KEYS: Final[tuple[str, ...]] = (
    "strict_length",
    "ipv4_extended_fields",
    "debug_logging",
    "max_uri_length",
)
