from __future__ import annotations
from pathlib import Path

APP_NAME = "note-aggregator"
APP_DIR = Path.home() / f".{APP_NAME}"
LOG_DIR = APP_DIR / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"
SETTINGS_PATH = APP_DIR / "settings.ini"
