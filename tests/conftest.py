"""Pytest configuration for efipath tests."""

from __future__ import annotations

import logging
import struct
from collections.abc import Callable

import pytest

from efipath.devicepath import Head, protocol

TEST_RANDOM_SEED = 3735928559


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "fuzz: randomized robustness tests")


@pytest.fixture(autouse=True)
def reset_logging_handlers():
    """Close and remove all logging handlers after each test to prevent ResourceWarnings."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        try:
            handler.close()
        except (OSError, RuntimeError):
            pass
        root.removeHandler(handler)
    package_logger = logging.getLogger("efipath")
    for handler in package_logger.handlers[:]:
        try:
            handler.close()
        except (OSError, RuntimeError):
            pass
        package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def random_seed() -> int:
    return TEST_RANDOM_SEED


def _messaging_node(sub_type: int, payload: bytes, length: int | None = None) -> tuple[Head, bytes]:
    """Return a header for *payload* and the full wire bytes of the node."""
    if length is None:
        length = protocol.HEADER_SIZE + len(payload)
    head = Head(type=protocol.DeviceType.MESSAGING, sub_type=sub_type, length=length)
    return head, struct.pack("<BBH", head.type, head.sub_type, head.length) + payload


@pytest.fixture
def messaging_node() -> Callable[..., tuple[Head, bytes]]:
    return _messaging_node
