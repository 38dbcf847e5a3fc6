from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from srefs_ui.utils.errors import DatasetError
from srefs_ui.utils.io import read_yaml
from srefs_ui.utils.logging import logger
from srefs_ui.utils.typing import Catalog, Locale, StyleRecord

_LOCALIZED_FIELDS = ("name", "category", "tags", "example")


def _localized(raw: Dict[str, Any], field: str, record_id: str) -> Dict[Locale, Any]:
    value = raw.get(field)
    if not isinstance(value, dict):
        raise DatasetError(f"style {record_id}: '{field}' must map locales to values")
    out: Dict[Locale, Any] = {}
    for locale in Locale:
        if locale.value not in value:
            raise DatasetError(f"style {record_id}: '{field}' missing locale '{locale.value}'")
        item = value[locale.value]
        if field == "tags":
            if not isinstance(item, list):
                raise DatasetError(f"style {record_id}: tags.{locale.value} must be a list")
            item = tuple(str(t) for t in item)
        else:
            item = str(item)
        out[locale] = item
    return out


def _optional_localized(raw: Dict[str, Any], field: str, record_id: str) -> Optional[Dict[Locale, str]]:
    value = raw.get(field)
    if value is None:
        return None
    if isinstance(value, str):
        return {locale: value for locale in Locale}
    return _localized(raw, field, record_id)


def parse_record(raw: Dict[str, Any]) -> StyleRecord:
    if not isinstance(raw, dict) or "id" not in raw:
        raise DatasetError(f"style entry without id: {raw!r}")
    record_id = str(raw["id"])
    code = raw.get("sref_code")
    if code is None or str(code) == "":
        raise DatasetError(f"style {record_id}: missing sref_code")
    localized = {f: _localized(raw, f, record_id) for f in _LOCALIZED_FIELDS}
    return StyleRecord(
        id=record_id,
        sref_code=str(code),
        image_url=str(raw.get("image_url") or ""),
        description=_optional_localized(raw, "description", record_id),
        featured=bool(raw.get("featured", False)),
        new=bool(raw.get("new", False)),
        **localized,
    )


def parse_categories(raw: Any) -> Dict[Locale, Tuple[str, ...]]:
    if not isinstance(raw, dict):
        raise DatasetError("'categories' must map locales to label lists")
    mapping: Dict[Locale, Tuple[str, ...]] = {}
    for locale in Locale:
        labels = raw.get(locale.value)
        if not isinstance(labels, list) or not labels:
            raise DatasetError(f"categories.{locale.value} must be a non-empty list")
        mapping[locale] = tuple(str(l) for l in labels)
    if len({len(v) for v in mapping.values()}) != 1:
        raise DatasetError("category lists must have the same length in every locale")
    return mapping


def parse_catalog(data: Any) -> Catalog:
    if not isinstance(data, dict):
        raise DatasetError("dataset root must be a mapping")
    categories = parse_categories(data.get("categories"))
    records: List[StyleRecord] = []
    seen = set()
    for raw in data.get("styles") or []:
        record = parse_record(raw)
        if record.id in seen:
            logger.warning("catalog: duplicate style id %s dropped", record.id)
            continue
        seen.add(record.id)
        records.append(record)

    for record in records:
        for locale in Locale:
            if record.category[locale] not in categories[locale][1:]:
                logger.warning(
                    "catalog: style %s has unlisted category %r (%s)",
                    record.id, record.category[locale], locale.value,
                )
    return Catalog(records=tuple(records), categories=categories)


def load_catalog(path: Path) -> Catalog:
    """Read and validate the styles YAML file."""
    try:
        data = read_yaml(Path(path))
    except FileNotFoundError as e:
        raise DatasetError(f"dataset not found: {path}") from e
    except yaml.YAMLError as e:
        raise DatasetError(f"dataset is not valid YAML: {e}") from e
    catalog = parse_catalog(data)
    logger.info("catalog.load: %d styles from %s", len(catalog.records), path)
    return catalog
