"""
schema.org ItemList describing the catalog, for search engines.
"""
from __future__ import annotations
import json
from typing import Any, Dict

from srefs_ui.utils.typing import Catalog, Locale


def build_item_list(catalog: Catalog, locale: Locale, limit: int = 10) -> Dict[str, Any]:
    styles = catalog.styles(locale)
    return {
        "@context": "https://schema.org",
        "@type": "ItemList",
        "name": "Sref Styles for Midjourney",
        "description": "Collection of reference styles for Midjourney image generator",
        "numberOfItems": len(styles),
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": index + 1,
                "item": {
                    "@type": "CreativeWork",
                    "name": style.name,
                    "description": style.example,
                    "category": style.category,
                    "keywords": ", ".join(style.tags),
                },
            }
            for index, style in enumerate(styles[:limit])
        ],
    }


def to_json_ld(item_list: Dict[str, Any]) -> str:
    return json.dumps(item_list, ensure_ascii=False, indent=2)
