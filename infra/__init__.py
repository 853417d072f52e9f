"""Infrastructure adapters – concrete implementations of domain ports."""

from .concurrency import SynchronizedInvocationLog
from .config import FileSystemSettingsProvider, SettingsError
from .runtime import StructuredLogger

__all__ = [
    "SynchronizedInvocationLog",
    "FileSystemSettingsProvider",
    "SettingsError",
    "StructuredLogger",
]
