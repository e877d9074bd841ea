"""Logging setup for applications embedding the decoder.

:func:`~efipath.devicepath.messaging.parse_messaging_device_path` attaches
the node header and consumed byte count to its DEBUG records. The formatter
below renders those as a ``node`` object so a decode trace reads as one
JSON line per node.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from logging.config import dictConfig
from typing import Any, Final

import msgspec

from .model import DecoderConfig

LOGGER_NAME: Final[str] = "efipath"

# Attributes set through ``extra=`` by the decoder.
_DECODE_EXTRAS: Final[tuple[str, ...]] = ("head", "consumed")


class DecodeLogFormatter(logging.Formatter):
    """One JSON object per record, with decode context under ``node``."""

    PREFIX = LOGGER_NAME + "."

    def format(self, record: logging.LogRecord) -> str:
        logger_name = record.name
        if logger_name.startswith(self.PREFIX):
            logger_name = logger_name[len(self.PREFIX) :]

        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": logger_name,
            "message": record.getMessage(),
        }

        node = {key: getattr(record, key) for key in _DECODE_EXTRAS if hasattr(record, key)}
        if node:
            payload["node"] = node

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return msgspec.json.encode(payload, enc_hook=str).decode("utf-8")


def configure_logging(config: DecoderConfig) -> None:
    """Send ``efipath`` records to stderr as JSON lines.

    Only the package logger is touched; the host application's root
    configuration is left alone.
    """

    level_name = "DEBUG" if config.debug_logging else "INFO"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "decode": {
                    "()": DecodeLogFormatter,
                }
            },
            "handlers": {
                LOGGER_NAME: {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "level": level_name,
                    "formatter": "decode",
                }
            },
            "loggers": {
                LOGGER_NAME: {
                    "level": level_name,
                    "handlers": [LOGGER_NAME],
                    "propagate": False,
                }
            },
        }
    )

    logging.getLogger(LOGGER_NAME).debug("Logging configured at level %s", level_name)
