"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .container import build_test_container
from .core import ADMIN_EMAIL, ADMIN_PASSWORD, make_test_settings

__all__ = [
    "ADMIN_EMAIL",
    "ADMIN_PASSWORD",
    "MockPersistenceProvider",
    "build_test_container",
    "make_test_settings",
]
