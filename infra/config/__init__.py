from .filesystem_settings_provider import (
    SETTINGS_FILE_NAME,
    FileSystemSettingsProvider,
    SettingsError,
)

__all__ = ["SETTINGS_FILE_NAME", "FileSystemSettingsProvider", "SettingsError"]
