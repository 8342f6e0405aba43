"""
Shared test fixtures for the orderflow library.

Usage:
    from tests.fixtures import (
        FailingHandler,
        RecordingHandler,
        SpyShipper,
        build_computer_set,
    )
"""

from tests.fixtures.handlers import (
    FailingHandler,
    RecordingHandler,
    SpyShipper,
)
from tests.fixtures.items import build_computer_set, build_nested_bundle

__all__ = [
    "FailingHandler",
    "RecordingHandler",
    "SpyShipper",
    "build_computer_set",
    "build_nested_bundle",
]
