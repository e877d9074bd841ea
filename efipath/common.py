"""Utility helpers shared across efipath modules."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from .const import (
    CONFIG_KEYS,
    DEFAULT_DEBUG_LOGGING,
    DEFAULT_IPV4_EXTENDED_FIELDS,
    DEFAULT_MAX_URI_LENGTH,
    DEFAULT_STRICT_LENGTH,
    ENV_PREFIX,
)

logger = logging.getLogger(__name__)


def get_default_config() -> dict[str, str]:
    """Provide default decoder configuration values."""
    return {
        "strict_length": "1" if DEFAULT_STRICT_LENGTH else "0",
        "ipv4_extended_fields": "1" if DEFAULT_IPV4_EXTENDED_FIELDS else "0",
        "debug_logging": "1" if DEFAULT_DEBUG_LOGGING else "0",
        "max_uri_length": str(DEFAULT_MAX_URI_LENGTH),
    }


def get_env_config(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Collect ``EFIPATH_*`` overrides from the environment."""
    source = os.environ if environ is None else environ
    values: dict[str, str] = {}
    for key in CONFIG_KEYS:
        env_key = ENV_PREFIX + key.upper()
        if env_key in source:
            values[key] = source[env_key]
    if values:
        logger.debug("Environment overrides: %s", ", ".join(sorted(values)))
    return values


def log_hexdump(logger_instance: logging.Logger, level: int, label: str, data: bytes) -> None:
    """Log binary data in hexadecimal format.

    Format: [HEXDUMP] %s: %s
    """
    if not logger_instance.isEnabledFor(level):
        return

    hex_str = data.hex(" ").upper()
    logger_instance.log(level, "[HEXDUMP] %s: %s", label, hex_str)
