from __future__ import annotations

import threading
from typing import Any, Iterator

from domain.models import InvocationRecord
from domain.services import InvocationLog


class SynchronizedInvocationLog:
    """``InvocationLog`` guarded by a lock, for fakes called from worker threads."""

    def __init__(self, inner: InvocationLog | None = None) -> None:
        self._inner = inner if inner is not None else InvocationLog()
        self._lock = threading.Lock()

    def record(self, method_name: str, /, *args: Any, **kwargs: Any) -> InvocationRecord:
        with self._lock:
            return self._inner.record(method_name, *args, **kwargs)

    def query(self, method_name: str) -> tuple[InvocationRecord, ...]:
        with self._lock:
            return self._inner.query(method_name)

    def count(self, method_name: str) -> int:
        with self._lock:
            return self._inner.count(method_name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._inner)

    def __iter__(self) -> Iterator[InvocationRecord]:
        with self._lock:
            snapshot = tuple(self._inner)
        return iter(snapshot)
