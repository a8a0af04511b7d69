"""Persisted defaults for the command line."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pathinfo.exceptions import SettingsError
from pathinfo.types import CopyPolicy

SETTINGS_DIRNAME = ".pathinfo"
SETTINGS_FILENAME = "settings.json"

# CLI key -> Settings field name
SETTING_KEYS = {
    "ignore-case": "ignore_case",
    "resolve": "resolve",
    "copy-empty-directories": "copy_empty_directories",
    "overwrite": "overwrite",
    "clean-target": "clean_target",
}

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


def default_settings_dir() -> Path:
    """Return ~/.pathinfo."""
    return Path.home() / SETTINGS_DIRNAME


def parse_bool(value: str) -> bool:
    """Parse a boolean setting value.

    Raises:
        ValueError: If the value is not a recognised boolean.
    """
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"Expected a boolean value, got '{value}'")


class Settings(BaseModel):
    """Defaults applied when a command line option is not given."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = "1.0"
    ignore_case: bool = Field(default=True, alias="ignoreCase")
    resolve: bool = False
    copy_empty_directories: bool = Field(default=False, alias="copyEmptyDirectories")
    overwrite: bool = False
    clean_target: bool = Field(default=False, alias="cleanTarget")

    def copy_policy(self) -> CopyPolicy:
        """Build the default copy policy."""
        return CopyPolicy(
            copy_empty_directories=self.copy_empty_directories,
            overwrite=self.overwrite,
            clean_target=self.clean_target,
        )


class SettingsManager:
    """Loads and saves the settings file."""

    def __init__(self, settings_dir: Path) -> None:
        """Initialize the settings manager.

        Args:
            settings_dir: Directory holding settings.json.

        Note:
            Prefer using factory methods `create()` or `create_default()` for construction.
        """
        self.settings_dir = settings_dir
        self.settings_file = settings_dir / SETTINGS_FILENAME

    @classmethod
    def create(cls, settings_dir: Path) -> SettingsManager:
        """Create a settings manager with a custom directory."""
        return cls(settings_dir=settings_dir)

    @classmethod
    def create_default(cls) -> SettingsManager:
        """Create a settings manager using ~/.pathinfo."""
        return cls(settings_dir=default_settings_dir())

    def load(self) -> Settings:
        """Load settings from disk.

        Returns:
            Stored Settings, or defaults if no file exists.

        Raises:
            SettingsError: If the file is not valid settings JSON.
        """
        if not self.settings_file.exists():
            return Settings()

        try:
            data = json.loads(self.settings_file.read_text())
            return Settings.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            raise SettingsError(f"Invalid settings file {self.settings_file}: {e}") from e

    def save(self, settings: Settings) -> None:
        """Save settings to disk."""
        self.settings_dir.mkdir(parents=True, exist_ok=True)
        data = settings.model_dump(by_alias=True)
        self.settings_file.write_text(json.dumps(data, indent=2))

    def set_value(self, key: str, value: str) -> Settings:
        """Update one setting and save it.

        Args:
            key: CLI setting key, e.g. "clean-target".
            value: Boolean text such as "true" or "off".

        Returns:
            The updated Settings.

        Raises:
            ValueError: If the key is unknown or the value is not boolean.
        """
        field = SETTING_KEYS.get(key)
        if field is None:
            raise ValueError(f"Unknown configuration key: {key}")

        settings = self.load().model_copy(update={field: parse_bool(value)})
        self.save(settings)
        return settings
