import json
from pathlib import Path
from srefs_ui.services import config
from srefs_ui.utils.typing import Locale

def test_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("SREFS_CONFIG_DIR", str(tmp_path))
    cfg = config.load_config()
    assert cfg.page_size == 40 and cfg.page_increment == 20 and cfg.copy_feedback_ms == 2000
    assert cfg.default_locale == Locale.EN and cfg.data_file == config.BUNDLED_DATA_FILE

def test_env_overrides_json(tmp_path, monkeypatch):
    monkeypatch.setenv("SREFS_CONFIG_DIR", str(tmp_path))
    (tmp_path / "ui_config.json").write_text(json.dumps({"page_size": 12, "default_locale": "pl"}))
    monkeypatch.setenv("SREFS_PAGE_SIZE", "24")
    monkeypatch.setenv("SREFS_CLIPBOARD", "memory")
    cfg = config.load_config()
    assert cfg.page_size == 24 and cfg.default_locale == Locale.PL and cfg.clipboard_backend == "memory"

def test_invalid_values_fall_back(tmp_path, monkeypatch):
    monkeypatch.setenv("SREFS_CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("SREFS_PAGE_SIZE", "-5")
    monkeypatch.setenv("SREFS_LANG", "de")
    monkeypatch.setenv("SREFS_CLIPBOARD", "carrier-pigeon")
    cfg = config.load_config()
    assert cfg.page_size == 40 and cfg.default_locale == Locale.EN and cfg.clipboard_backend == "system"

def test_get_config_is_cached(tmp_path, monkeypatch):
    monkeypatch.setenv("SREFS_CONFIG_DIR", str(tmp_path))
    config.reset_config()
    try:
        assert config.get_config() is config.get_config()
    finally:
        config.reset_config()
