"""
Reusable fakes and in-memory implementations for tests.
"""

from .fake_foo import DecoratedFakeFoo, FakeFoo, FooPort
from .fake_runtime import InMemoryLogger, LogEvent
from .fake_settings_provider import InMemorySettingsProvider

__all__ = [
    "FooPort",
    "FakeFoo",
    "DecoratedFakeFoo",
    "InMemoryLogger",
    "LogEvent",
    "InMemorySettingsProvider",
]
