"""
Domain layer package.

This package contains the invocation-recording models and ports that are
independent of any specific infrastructure or frameworks.
"""

from .models import (  # noqa: F401
    InvalidInvocationError,
    InvocationRecord,
    RecorderSettings,
)
from .ports import (  # noqa: F401
    InvocationLogPort,
    LoggerPort,
    SettingsProviderPort,
)

__all__ = [
    # Models
    "InvalidInvocationError",
    "InvocationRecord",
    "RecorderSettings",
    # Ports
    "InvocationLogPort",
    "LoggerPort",
    "SettingsProviderPort",
]
