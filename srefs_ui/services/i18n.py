from __future__ import annotations
import functools
from pathlib import Path
from typing import Callable, Dict

from srefs_ui.utils.io import read_yaml
from srefs_ui.utils.logging import logger
from srefs_ui.utils.typing import Locale

TRANSLATIONS_FILE = Path(__file__).resolve().parent.parent / "data" / "translations.yaml"


@functools.lru_cache(maxsize=None)
def _table(path: Path = TRANSLATIONS_FILE) -> Dict[str, Dict[str, str]]:
    data = read_yaml(path) or {}
    return {lang: dict(entries or {}) for lang, entries in data.items()}


def get_translation(locale: Locale, key: str, **params) -> str:
    """Look up a UI string; falls back to English, then to the key itself."""
    table = _table()
    text = table.get(locale.value, {}).get(key)
    if text is None:
        text = table.get(Locale.EN.value, {}).get(key)
    if text is None:
        logger.debug("i18n: missing key %s (%s)", key, locale.value)
        return key
    return text.format(**params) if params else text


def translator(locale: Locale) -> Callable[..., str]:
    return functools.partial(get_translation, locale)
