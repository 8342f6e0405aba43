"""
Test utilities for orderflow.

Components:
    EventAssertions: Assertions over published events with clear error messages
    OrderFlowTestHarness: Event bus plus a workflow wired with deterministic policies

Note:
    This module is intended for test code only. It should not be imported in
    production code paths.
"""

from orderflow.testing.assertions import EventAssertions
from orderflow.testing.harness import OrderFlowTestHarness

__all__ = [
    "EventAssertions",
    "OrderFlowTestHarness",
]
