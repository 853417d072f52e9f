from __future__ import annotations

from abc import abstractmethod
from typing import Any, Iterator, Protocol, runtime_checkable

from domain.models import InvocationRecord, RecorderSettings


@runtime_checkable
class InvocationLogPort(Protocol):
    """Append-only, ordered record of the calls made on one test double."""

    @abstractmethod
    def record(self, method_name: str, /, *args: Any, **kwargs: Any) -> InvocationRecord:
        ...

    @abstractmethod
    def query(self, method_name: str) -> tuple[InvocationRecord, ...]:
        ...

    def count(self, method_name: str) -> int:
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[InvocationRecord]:
        ...


@runtime_checkable
class SettingsProviderPort(Protocol):
    """Source of ``RecorderSettings`` (files, in-memory, ...)."""

    @abstractmethod
    def load(self) -> RecorderSettings:
        ...


@runtime_checkable
class LoggerPort(Protocol):
    """Structured, testable logging abstraction."""

    def info(self, message: str, **fields: Any) -> None:
        ...

    def warning(self, message: str, **fields: Any) -> None:
        ...

    def error(self, message: str, **fields: Any) -> None:
        ...


__all__ = [
    "InvocationLogPort",
    "SettingsProviderPort",
    "LoggerPort",
]
