"""Example consumers shared by unit and integration tests."""

from __future__ import annotations

from test.mocks import FooPort

CALLBACK_PREFIX = "Foo eventually returned"


class Bar:
    """Class under test: talks to its dependency only through ``FooPort``."""

    def __init__(self, foo: FooPort) -> None:
        self._foo = foo

    def poke_foo_twice_and_bop_it_once(self) -> None:
        self._foo.poke("first")
        self._foo.bop("second")
        self._foo.poke("third")

    def poke_remote_foo(self) -> None:
        self._foo.async_poke(lambda response: f"{CALLBACK_PREFIX} {response}")
