from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Sequence


class InvalidInvocationError(ValueError):
    """Raised when a record is built with an unusable method name."""


@dataclass(frozen=True)
class InvocationRecord:
    """
    One observed call on a test double: the method name and its arguments.

    Argument values are kept by reference and never inspected, so a
    callback passed to a fake comes back as the very same callable.
    ``keyword_arguments`` takes no part in hashing; a record hashes as long
    as its positional arguments do.
    """

    method_name: str
    arguments: tuple[Any, ...] = field(default_factory=tuple)
    keyword_arguments: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.method_name, str) or not self.method_name:
            raise InvalidInvocationError("method_name must be a non-empty string")
        # Copy into immutable containers so callers cannot edit a stored record.
        object.__setattr__(self, "arguments", tuple(self.arguments))
        object.__setattr__(
            self,
            "keyword_arguments",
            MappingProxyType(dict(self.keyword_arguments)),
        )

    @classmethod
    def create(cls, method_name: str, arguments: Sequence[Any] = ()) -> InvocationRecord:
        # A bare string is a sequence too: pass ("abc",) to record one string argument.
        return cls(method_name=method_name, arguments=tuple(arguments))


@dataclass(frozen=True)
class RecorderSettings:
    """Optional knobs for how invocation logs are built."""

    trace_records: bool = False
    synchronized: bool = False


__all__ = [
    "InvalidInvocationError",
    "InvocationRecord",
    "RecorderSettings",
]
