from __future__ import annotations

from domain.ports import InvocationLogPort, LoggerPort, SettingsProviderPort
from domain.services import InvocationLog
from infra.concurrency import SynchronizedInvocationLog
from infra.runtime import StructuredLogger


class InvocationLogFactory:
    """
    Builds invocation logs according to the current recorder settings.

    Settings are loaded on every ``create`` call, so one factory can live in
    a session-scoped fixture while each test still gets a fresh log.
    """

    def __init__(
        self,
        *,
        settings_provider: SettingsProviderPort,
        logger: LoggerPort | None = None,
    ) -> None:
        self._settings_provider = settings_provider
        self._logger = logger

    def create(self) -> InvocationLogPort:
        settings = self._settings_provider.load()
        logger = None
        if settings.trace_records:
            logger = self._logger if self._logger is not None else StructuredLogger()

        log = InvocationLog(logger=logger)
        if settings.synchronized:
            return SynchronizedInvocationLog(log)
        return log
