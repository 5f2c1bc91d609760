"""Test providers."""

from .config import TEST_DATABASE_URL, TestConfigProvider
from .container import build_test_container

__all__ = [
    "TEST_DATABASE_URL",
    "TestConfigProvider",
    "build_test_container",
]
