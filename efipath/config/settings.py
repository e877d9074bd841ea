"""Settings loader for the efipath decoder.

Values are layered: built-in defaults, then ``EFIPATH_*`` environment
variables, then explicit overrides passed by the caller. The merged mapping
is validated by :class:`~efipath.config.schema.DecoderConfigSchema`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, cast

from ..common import get_default_config, get_env_config
from .model import DecoderConfig
from .schema import DecoderConfigSchema

logger = logging.getLogger(__name__)


def load_decoder_config(
    overrides: Mapping[str, object] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> DecoderConfig:
    """Load configuration from defaults, environment and *overrides*.

    Raises :class:`marshmallow.ValidationError` on invalid values.
    """

    raw: dict[str, Any] = dict(get_default_config())
    raw.update(get_env_config(environ))
    if overrides:
        raw.update(overrides)

    config = cast(DecoderConfig, DecoderConfigSchema().load(raw))
    logger.debug("Decoder configuration loaded: %s", config)
    return config
