from __future__ import annotations

from typing import Any, Iterator

from domain.models import InvocationRecord
from domain.ports import LoggerPort


class InvocationLog:
    """
    Ordered, append-only history of calls made on one test double.

    Not thread-safe: a log belongs to a single fake used by a single test.
    Wrap it in ``infra.concurrency.SynchronizedInvocationLog`` when calls
    arrive from other threads.
    """

    def __init__(self, logger: LoggerPort | None = None) -> None:
        self._records: list[InvocationRecord] = []
        self._logger = logger

    def record(self, method_name: str, /, *args: Any, **kwargs: Any) -> InvocationRecord:
        entry = InvocationRecord(
            method_name=method_name,
            arguments=args,
            keyword_arguments=kwargs,
        )
        self._records.append(entry)
        if self._logger is not None:
            self._logger.info(
                "invocation recorded",
                method_name=method_name,
                position=len(self._records) - 1,
                argument_count=len(args) + len(kwargs),
            )
        return entry

    def query(self, method_name: str) -> tuple[InvocationRecord, ...]:
        return tuple(r for r in self._records if r.method_name == method_name)

    def count(self, method_name: str) -> int:
        return len(self.query(method_name))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[InvocationRecord]:
        return iter(tuple(self._records))

    def __repr__(self) -> str:
        names = ", ".join(r.method_name for r in self._records)
        return f"InvocationLog([{names}])"
