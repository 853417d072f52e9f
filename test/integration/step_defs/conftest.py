"""Shared fixtures for BDD step definitions."""
from __future__ import annotations

import pytest

from test.fixtures.log_context import LogContext


@pytest.fixture()
def ctx() -> LogContext:
    return LogContext()
