"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import pytest

from typedkv.processor import CommandProcessor
from typedkv.protocol.parser import ProtocolParser
from typedkv.storage.store import Store


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def store() -> Store:
    """Create a fresh, empty Store instance."""
    return Store()


@pytest.fixture
def other_store() -> Store:
    """Create a second Store to check instances stay independent."""
    return Store()


# ============================================================================
# Protocol Fixtures
# ============================================================================

@pytest.fixture
def parser() -> ProtocolParser:
    """Create a ProtocolParser instance."""
    return ProtocolParser()


@pytest.fixture
def processor() -> CommandProcessor:
    """Create a CommandProcessor instance."""
    return CommandProcessor()


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
