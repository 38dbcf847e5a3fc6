from __future__ import annotations
import json
from pathlib import Path
from typing import Any

import yaml


def read_json(path: Path, default: Any) -> Any:
    if not Path(path).exists():
        return default
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

def read_yaml(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)
