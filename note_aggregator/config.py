from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QSettings

from note_aggregator.core.filters import IgnoreConfig
from note_aggregator.logging_setup import log
from note_aggregator.settings import SETTINGS_PATH


@dataclass(frozen=True)
class SettingsKeys:
    IGNORED_TAGS: str = "ignore/tags"
    IGNORED_DIRECTORIES: str = "ignore/directories"


KEYS = SettingsKeys()


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        if isinstance(val, (list, tuple)):
            # INI values with commas come back as string lists
            return ", ".join(str(v) for v in val)
        return str(val) if val is not None else default
    except Exception:
        return default


class SettingsStore:
    """
    Persisted ignore lists, stored as two newline-delimited strings
    in an INI file.
    """

    def __init__(self, path: Path | None = None):
        self.path = Path(path or SETTINGS_PATH)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._settings = QSettings(str(self.path), QSettings.Format.IniFormat)

    def load(self) -> IgnoreConfig:
        self._settings.sync()
        config = IgnoreConfig.from_text(
            get_str(self._settings, KEYS.IGNORED_TAGS, ""),
            get_str(self._settings, KEYS.IGNORED_DIRECTORIES, ""),
        )
        log.debug(
            "Settings loaded: path=%s tags=%d directories=%d",
            self.path, len(config.ignored_tags), len(config.ignored_directories),
        )
        return config

    def save(self, config: IgnoreConfig) -> None:
        self._settings.setValue(KEYS.IGNORED_TAGS, config.tags_text)
        self._settings.setValue(KEYS.IGNORED_DIRECTORIES, config.directories_text)
        self._settings.sync()
        log.info("Settings saved: path=%s", self.path)
