"""
Configuration for the srefs catalog page.
Values come from SREFS_* environment variables, then ui_config.json in the
config directory, then the defaults below.
"""
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from srefs_ui.utils.io import read_json
from srefs_ui.utils.logging import logger
from srefs_ui.utils.typing import Locale

BUNDLED_DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "styles.yaml"


@dataclass
class AppConfig:
    """Complete page configuration."""
    data_file: Path = BUNDLED_DATA_FILE
    default_locale: Locale = Locale.EN
    page_size: int = 40
    page_increment: int = 20
    copy_feedback_ms: int = 2000
    clipboard_backend: str = "system"
    log_dir: str = "~/.config/srefs/logs"
    log_level: str = "INFO"


_ENV_VARS = {
    "data_file": "SREFS_DATA_FILE",
    "default_locale": "SREFS_LANG",
    "page_size": "SREFS_PAGE_SIZE",
    "page_increment": "SREFS_PAGE_INCREMENT",
    "copy_feedback_ms": "SREFS_COPY_FEEDBACK_MS",
    "clipboard_backend": "SREFS_CLIPBOARD",
    "log_dir": "SREFS_LOG_DIR",
    "log_level": "SREFS_LOG_LEVEL",
}

_CLIPBOARD_BACKENDS = ("system", "memory")


def config_dir() -> Path:
    env = os.environ.get("SREFS_CONFIG_DIR")
    return Path(env).expanduser() if env else Path.home() / ".config" / "srefs"


def _coerce(name: str, raw: Any, default: Any) -> Any:
    if isinstance(default, Locale):
        return Locale(str(raw).lower())
    if isinstance(default, Path):
        return Path(str(raw)).expanduser()
    if isinstance(default, int):
        value = int(raw)
        if value <= 0:
            raise ValueError(f"{name} must be positive")
        return value
    if name == "clipboard_backend" and str(raw) not in _CLIPBOARD_BACKENDS:
        raise ValueError(f"unknown clipboard backend {raw!r}")
    return str(raw)


def load_config() -> AppConfig:
    config = AppConfig()
    overrides: Dict[str, Any] = {}

    try:
        ui_settings = read_json(config_dir() / "ui_config.json", default={})
        if isinstance(ui_settings, dict):
            overrides.update(ui_settings)
    except Exception as e:
        logger.warning(f"Could not load UI settings: {e}")

    for name, var in _ENV_VARS.items():
        if os.environ.get(var):
            overrides[name] = os.environ[var]

    for f in fields(AppConfig):
        if f.name not in overrides:
            continue
        default = getattr(config, f.name)
        try:
            setattr(config, f.name, _coerce(f.name, overrides[f.name], default))
        except (TypeError, ValueError) as e:
            logger.warning("config: ignoring %s=%r (%s)", f.name, overrides[f.name], e)

    return config


# Singleton instance
_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Get the process-wide AppConfig, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config

def reset_config() -> None:
    global _config
    _config = None
