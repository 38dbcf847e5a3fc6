from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class Locale(str, Enum):
    EN = "en"
    PL = "pl"


class SortKey(str, Enum):
    NAME = "name"
    CATEGORY = "category"


class ViewMode(str, Enum):
    GRID = "grid"
    LIST = "list"


@dataclass(frozen=True)
class StyleRecord:
    """A style as stored in the dataset, with one value per locale."""
    id: str
    name: Dict[Locale, str]
    category: Dict[Locale, str]
    tags: Dict[Locale, Tuple[str, ...]]
    example: Dict[Locale, str]
    sref_code: str
    image_url: str = ""
    description: Optional[Dict[Locale, str]] = None
    featured: bool = False
    new: bool = False


@dataclass(frozen=True)
class Style:
    """A StyleRecord resolved to a single locale."""
    id: str
    name: str
    category: str
    tags: Tuple[str, ...]
    example: str
    code: str
    image_url: str = ""
    description: Optional[str] = None
    featured: bool = False
    new: bool = False


@dataclass(frozen=True)
class Catalog:
    records: Tuple[StyleRecord, ...]
    categories: Dict[Locale, Tuple[str, ...]]

    def styles(self, locale: Locale) -> Tuple[Style, ...]:
        return tuple(resolve(r, locale) for r in self.records)

    def category_list(self, locale: Locale) -> Tuple[str, ...]:
        return self.categories[locale]

    def all_category(self, locale: Locale) -> str:
        return self.categories[locale][0]

    def featured(self, locale: Locale) -> Optional[Style]:
        for r in self.records:
            if r.featured:
                return resolve(r, locale)
        return None


@dataclass(frozen=True)
class CopyResult:
    success: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class VisibleResult:
    items: Tuple[Style, ...]
    total: int
    has_more: bool
    meta: Dict[str, int] = field(default_factory=dict)

    @property
    def remaining(self) -> int:
        return max(self.total - len(self.items), 0)

    @property
    def is_empty(self) -> bool:
        return self.total == 0


def resolve(record: StyleRecord, locale: Locale) -> Style:
    return Style(
        id=record.id,
        name=record.name[locale],
        category=record.category[locale],
        tags=tuple(record.tags[locale]),
        example=record.example[locale],
        code=record.sref_code,
        image_url=record.image_url,
        description=record.description[locale] if record.description else None,
        featured=record.featured,
        new=record.new,
    )
