"""Building blocks for hand-written fakes that record their calls."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from domain.ports import LoggerPort
from domain.services.invocation_log import InvocationLog

_F = TypeVar("_F", bound=Callable[..., Any])


class RecordingFake:
    """Base class for fakes of a dependency's Protocol.

    Each instance owns a fresh ``InvocationLog`` exposed as ``calls``.
    Build a new fake per test to start from an empty history.

    Example::

        class FakeFoo(RecordingFake):
            def poke(self, arg: str) -> None:
                self.calls.record("poke", arg)

        foo = FakeFoo()
        Bar(foo).poke_foo_twice_and_bop_it_once()
        assert [r.arguments for r in foo.calls.query("poke")] == [("first",), ("third",)]
    """

    def __init__(self, *, logger: LoggerPort | None = None) -> None:
        self.calls = InvocationLog(logger=logger)


def records_invocation(method: _F) -> _F:
    """Record ``(method.__name__, *args, **kwargs)`` before running the method body.

    Only usable on ``RecordingFake`` subclasses. The body's return value is
    passed through unchanged, so it can still hand back a canned result.
    """

    @functools.wraps(method)
    def wrapper(self: RecordingFake, /, *args: Any, **kwargs: Any) -> Any:
        self.calls.record(method.__name__, *args, **kwargs)
        return method(self, *args, **kwargs)

    return wrapper  # type: ignore[return-value]
