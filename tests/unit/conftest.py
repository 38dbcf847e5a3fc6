import pytest

from srefs_ui.utils.typing import Catalog, Locale, Style, StyleRecord

ALL = "All categories"
CATEGORIES = {
    Locale.EN: (ALL, "Gothic", "Surreal", "Photographic"),
    Locale.PL: ("Wszystkie kategorie", "Gotyckie", "Surrealistyczne", "Fotograficzne"),
}
_PL = dict(zip(CATEGORIES[Locale.EN], CATEGORIES[Locale.PL]))


def make_style(id, name, category="Gothic", tags=(), code=None, featured=False, new=False) -> Style:
    return Style(
        id=str(id), name=name, category=category, tags=tuple(tags), example="",
        code=code or str(id),
        featured=featured, new=new,
    )


def make_record(id, name, category="Gothic", tags=(), code=None, featured=False, new=False) -> StyleRecord:
    return StyleRecord(
        id=str(id),
        name={Locale.EN: name, Locale.PL: f"{name} pl"},
        category={Locale.EN: category, Locale.PL: _PL[category]},
        tags={Locale.EN: tuple(tags), Locale.PL: tuple(tags)},
        example={Locale.EN: "", Locale.PL: ""},
        sref_code=code or str(1000 + id),
        featured=featured,
        new=new,
    )


@pytest.fixture
def catalog() -> Catalog:
    records = [
        make_record(1, "Velvet Noir", "Gothic", ["noir", "gothic"]),
        make_record(2, "Melting Clocks", "Surreal", ["dali"], new=True),
        make_record(3, "Analog Summer", "Photographic", ["film"]),
        make_record(4, "Misty Cathedral", "Gothic", ["fog"], code="3199463349", featured=True),
        make_record(5, "Bone Garden", "Gothic", ["macabre"]),
    ]
    return Catalog(records=tuple(records), categories=CATEGORIES)


@pytest.fixture
def big_catalog() -> Catalog:
    records = [make_record(i, f"Style {i:02d}", "Surreal") for i in range(45, 0, -1)]
    return Catalog(records=tuple(records), categories=CATEGORIES)
