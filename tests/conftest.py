"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from users_api.store import UserStore, get_user_store


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_user_store() -> Generator[None, None, None]:
    """Give every test the seeded shared store."""
    get_user_store().reset()
    yield
    get_user_store().reset()


@pytest.fixture
def store() -> UserStore:
    """A fresh, isolated store seeded with the default users."""
    return UserStore()


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
