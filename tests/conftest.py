"""
Pytest configuration for the state machine tests.
"""

import pytest


@pytest.fixture
def anyio_backend():
    """Run anyio-marked tests on asyncio only (trio is not a dependency)."""
    return "asyncio"
