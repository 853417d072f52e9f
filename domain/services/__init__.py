"""
Domain services.

These services hold and query recorded calls while depending only on
domain models and ports so that infrastructure layers can remain thin.
"""

from .invocation_log import InvocationLog
from .recording_fake import RecordingFake, records_invocation

__all__ = [
    "InvocationLog",
    "RecordingFake",
    "records_invocation",
]
