"""Marshmallow schema for DecoderConfig validation."""

from __future__ import annotations

from typing import Any, Dict

from marshmallow import Schema, fields, post_load, validate

from ..const import (
    DEFAULT_DEBUG_LOGGING,
    DEFAULT_IPV4_EXTENDED_FIELDS,
    DEFAULT_MAX_URI_LENGTH,
    DEFAULT_STRICT_LENGTH,
)
from .model import DecoderConfig


class DecoderConfigSchema(Schema):
    """Declarative validation schema for decoder configuration."""

    strict_length = fields.Bool(load_default=DEFAULT_STRICT_LENGTH)
    ipv4_extended_fields = fields.Bool(load_default=DEFAULT_IPV4_EXTENDED_FIELDS)
    debug_logging = fields.Bool(load_default=DEFAULT_DEBUG_LOGGING)
    max_uri_length = fields.Int(
        load_default=DEFAULT_MAX_URI_LENGTH,
        validate=validate.Range(min=1, max=DEFAULT_MAX_URI_LENGTH),
    )

    @post_load
    def make_config(self, data: Dict[str, Any], **kwargs: Any) -> DecoderConfig:
        return DecoderConfig(**data)
