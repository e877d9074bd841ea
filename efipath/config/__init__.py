"""Configuration helpers for the efipath decoder."""

from .model import DecoderConfig
from .settings import load_decoder_config
from . import logging, schema, settings  # noqa: F401  # pyright: ignore[reportUnusedImport]

__all__ = ["DecoderConfig", "load_decoder_config"]
