from __future__ import annotations

import json
from pathlib import Path

from domain.models import RecorderSettings

SETTINGS_FILE_NAME = "recorder.json"

_BOOLEAN_KEYS = ("trace_records", "synchronized")


class SettingsError(ValueError):
    """Raised when recorder.json exists but cannot be turned into settings."""


class FileSystemSettingsProvider:
    """Reads recorder.json from a config directory.

    Every public method re-reads from disk so that edits
    to the JSON file take effect without rebuilding the provider.
    A missing file means default settings.
    """

    def __init__(self, config_dir: str | Path) -> None:
        self._config_dir = Path(config_dir)

    @property
    def settings_path(self) -> Path:
        return self._config_dir / SETTINGS_FILE_NAME

    def validate(self) -> list[str]:
        errors: list[str] = []
        data = self._read_json(errors)
        if data is None:
            return errors

        for key in _BOOLEAN_KEYS:
            if key in data and not isinstance(data[key], bool):
                errors.append(f"{key} must be true or false in {self.settings_path}")

        unknown = sorted(set(data) - set(_BOOLEAN_KEYS))
        if unknown:
            errors.append(f"Unknown keys in {self.settings_path}: {', '.join(unknown)}")
        return errors

    def load(self) -> RecorderSettings:
        errors = self.validate()
        if errors:
            raise SettingsError("; ".join(errors))

        data = self._read_json([]) or {}
        return RecorderSettings(
            trace_records=data.get("trace_records", False),
            synchronized=data.get("synchronized", False),
        )

    def _read_json(self, errors: list[str]) -> dict | None:
        path = self.settings_path
        if not path.is_file():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            errors.append(f"Invalid JSON in {path}: {exc}")
            return None
        if not isinstance(data, dict):
            errors.append(f"{path} must contain a JSON object")
            return None
        return data
