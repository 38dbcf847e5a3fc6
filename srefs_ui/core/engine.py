"""
Filter, sort and paginate the style catalog.

Everything here is a pure function of its inputs; the Streamlit layer calls
compute_visible() on every rerun.
"""
from __future__ import annotations
import unicodedata
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from srefs_ui.utils.typing import SortKey, Style, VisibleResult

PAGE_SIZE = 40
PAGE_INCREMENT = 20


def matches_search(style: Style, search_term: str) -> bool:
    needle = search_term.lower()
    if not needle:
        return True
    return (
        needle in style.name.lower()
        or any(needle in tag.lower() for tag in style.tags)
        or needle in style.code.lower()
    )


def matches_category(style: Style, selected_category: str, all_category: str) -> bool:
    return selected_category == all_category or style.category == selected_category


def filter_styles(
    styles: Iterable[Style], search_term: str, selected_category: str, all_category: str
) -> List[Style]:
    return [
        s for s in styles
        if matches_search(s, search_term) and matches_category(s, selected_category, all_category)
    ]


def collation_key(text: str) -> Tuple[str, str, str]:
    # accents only decide ties, so "Ćma" sorts next to "Cma" rather than after "Z"
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text.casefold(), text


def sort_styles(styles: Iterable[Style], sort_key: SortKey) -> List[Style]:
    """Featured first, then new, then by name or category. Stable."""
    if sort_key == SortKey.CATEGORY:
        field_of: Callable[[Style], str] = lambda s: s.category
    else:
        field_of = lambda s: s.name
    return sorted(styles, key=lambda s: (not s.featured, not s.new, collation_key(field_of(s))))


def paginate(styles: Sequence[Style], display_count: int) -> VisibleResult:
    items = tuple(styles[:max(display_count, 0)])
    return VisibleResult(
        items=items,
        total=len(styles),
        has_more=len(styles) > display_count,
        meta={"display_count": display_count},
    )


def compute_visible(styles: Iterable[Style], state, all_category: str) -> VisibleResult:
    filtered = filter_styles(styles, state.search_term, state.selected_category, all_category)
    ordered = sort_styles(filtered, state.sort_key)
    return paginate(ordered, state.display_count)


def category_counts(styles: Sequence[Style], categories: Sequence[str]) -> Dict[str, int]:
    counts = {c: 0 for c in categories[1:]}
    for s in styles:
        if s.category in counts:
            counts[s.category] += 1
    return {categories[0]: len(styles), **counts} if categories else {}


def summarize(result: VisibleResult, state, all_category: str, t: Callable[..., str]) -> str:
    """Build the "Showing X of Y styles" line under the controls."""
    parts = [t("results.showing", shown=len(result.items), total=result.total)]
    if state.selected_category != all_category:
        parts.append(t("results.in_category", category=state.selected_category))
    if state.search_term:
        parts.append(t("results.for_search", term=state.search_term))
    return " ".join(parts)
