from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import Any, TextIO


class StructuredLogger:
    """Writes one JSON object per log call.

    Recorded arguments are often callables or other objects ``json`` cannot
    encode; those are rendered with ``repr``.
    """

    def __init__(self, component: str = "invocation-log", stream: TextIO | None = None) -> None:
        self._component = component
        self._stream = stream

    def info(self, message: str, **fields: Any) -> None:
        self._emit("info", message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._emit("warning", message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._emit("error", message, fields)

    def _emit(self, level: str, message: str, fields: dict[str, Any]) -> None:
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "component": self._component,
            "message": message,
            "fields": fields,
        }
        print(
            json.dumps(payload, sort_keys=True, default=repr),
            file=self._stream if self._stream is not None else sys.stdout,
        )
