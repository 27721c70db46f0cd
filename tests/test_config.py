import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from note_aggregator.config import SettingsStore
from note_aggregator.core.filters import IgnoreConfig


def test_missing_file_loads_empty(tmp_path):
    store = SettingsStore(tmp_path / "settings.ini")
    assert store.load() == IgnoreConfig()


def test_save_and_reload(tmp_path):
    path = tmp_path / "nested" / "settings.ini"
    cfg = IgnoreConfig.from_text("#private\ntodo", "Archive/\nDaily Notes/")
    SettingsStore(path).save(cfg)

    loaded = SettingsStore(path).load()
    assert loaded.ignored_tags == ("private", "todo")
    assert loaded.ignored_directories == ("Archive/", "Daily Notes/")
