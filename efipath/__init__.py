"""EFI Device Path decoding package."""

__version__ = "0.1.0"

import logging

logger = logging.getLogger(__name__)
