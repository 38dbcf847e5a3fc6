"""
UI state for the catalog page and the commands that change it.

Command functions are pure: they take a UIState and return a new one, or raise
InvalidStateTransition and leave the caller's state as it was.
BrowserController holds one UIState per session and adds the copy-to-clipboard
flow, which is the only part with side effects.
"""
from __future__ import annotations
import itertools
import threading
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from srefs_ui.core import engine
from srefs_ui.services.clipboard import Clipboard
from srefs_ui.services.scheduler import Handle, Scheduler
from srefs_ui.utils.errors import InvalidStateTransition
from srefs_ui.utils.logging import logger
from srefs_ui.utils.typing import Catalog, CopyResult, Locale, SortKey, ViewMode, VisibleResult

COPY_FEEDBACK_MS = 2000
BACK_TO_TOP_THRESHOLD = 300


@dataclass(frozen=True)
class UIState:
    selected_category: str
    search_term: str = ""
    sort_key: SortKey = SortKey.NAME
    view_mode: ViewMode = ViewMode.GRID
    display_count: int = engine.PAGE_SIZE
    copied_code: Optional[str] = None
    show_back_to_top: bool = False
    locale: Locale = Locale.EN


def initial_state(catalog: Catalog, locale: Locale = Locale.EN, page_size: int = engine.PAGE_SIZE) -> UIState:
    return UIState(
        selected_category=catalog.all_category(locale),
        display_count=page_size,
        locale=locale,
    )


def set_search(state: UIState, text: str) -> UIState:
    if not isinstance(text, str):
        raise InvalidStateTransition(f"search term must be a string, got {type(text).__name__}")
    return replace(state, search_term=text)


def set_category(state: UIState, category: str, categories: Sequence[str]) -> UIState:
    if category not in categories:
        raise InvalidStateTransition(f"unknown category {category!r}")
    return replace(state, selected_category=category)


def set_sort(state: UIState, key) -> UIState:
    try:
        return replace(state, sort_key=SortKey(key))
    except ValueError:
        raise InvalidStateTransition(f"unknown sort key {key!r}") from None


def set_view_mode(state: UIState, mode) -> UIState:
    try:
        return replace(state, view_mode=ViewMode(mode))
    except ValueError:
        raise InvalidStateTransition(f"unknown view mode {mode!r}") from None


def load_more(state: UIState, filtered_count: int, increment: int = engine.PAGE_INCREMENT) -> UIState:
    if state.display_count >= filtered_count:
        return state
    return replace(state, display_count=min(state.display_count + increment, filtered_count))


def clear_filters(state: UIState, all_category: str) -> UIState:
    return replace(state, search_term="", selected_category=all_category)


def set_scroll_position(state: UIState, y: float) -> UIState:
    return replace(state, show_back_to_top=y > BACK_TO_TOP_THRESHOLD)


def scroll_to_top(state: UIState) -> UIState:
    return replace(state, show_back_to_top=False)


def set_locale(state: UIState, locale, catalog: Catalog) -> UIState:
    try:
        new_locale = Locale(locale)
    except ValueError:
        raise InvalidStateTransition(f"unknown locale {locale!r}") from None
    old = catalog.category_list(state.locale)
    new = catalog.category_list(new_locale)
    try:
        category = new[old.index(state.selected_category)]
    except ValueError:
        category = new[0]
    return replace(state, locale=new_locale, selected_category=category)


class BrowserController:
    """Owns the UIState of one page session."""

    def __init__(
        self,
        catalog: Catalog,
        clipboard: Clipboard,
        scheduler: Scheduler,
        locale: Locale = Locale.EN,
        page_size: int = engine.PAGE_SIZE,
        page_increment: int = engine.PAGE_INCREMENT,
        copy_feedback_ms: int = COPY_FEEDBACK_MS,
    ):
        self.catalog = catalog
        self.clipboard = clipboard
        self.scheduler = scheduler
        self.page_increment = page_increment
        self.copy_feedback_ms = copy_feedback_ms
        self.state = initial_state(catalog, locale, page_size)
        self._request_ids = itertools.count(1)
        self._latest_request = 0
        self._applied_request = 0
        self._reset_handle: Optional[Handle] = None
        self._lock = threading.RLock()

    # -- derived -------------------------------------------------------------

    @property
    def categories(self) -> Sequence[str]:
        return self.catalog.category_list(self.state.locale)

    @property
    def all_category(self) -> str:
        return self.catalog.all_category(self.state.locale)

    def styles(self):
        return self.catalog.styles(self.state.locale)

    def visible(self) -> VisibleResult:
        return engine.compute_visible(self.styles(), self.state, self.all_category)

    def category_counts(self):
        return engine.category_counts(self.styles(), self.categories)

    # -- commands ------------------------------------------------------------

    def _apply(self, name: str, fn, *args) -> UIState:
        with self._lock:
            try:
                new_state = fn(self.state, *args)
            except InvalidStateTransition as e:
                logger.warning("controller: %s rejected: %s", name, e)
                raise
            # copy feedback is owned by the copy flow; a reset that fired meanwhile wins
            self.state = replace(new_state, copied_code=self.state.copied_code)
            return self.state

    def set_search(self, text: str) -> UIState:
        return self._apply("set_search", set_search, text)

    def set_category(self, category: str) -> UIState:
        return self._apply("set_category", set_category, category, self.categories)

    def set_sort(self, key) -> UIState:
        return self._apply("set_sort", set_sort, key)

    def set_view_mode(self, mode) -> UIState:
        return self._apply("set_view_mode", set_view_mode, mode)

    def load_more(self) -> UIState:
        return self._apply("load_more", load_more, self.visible().total, self.page_increment)

    def clear_filters(self) -> UIState:
        return self._apply("clear_filters", clear_filters, self.all_category)

    def set_scroll_position(self, y: float) -> UIState:
        return self._apply("set_scroll_position", set_scroll_position, y)

    def scroll_to_top(self) -> UIState:
        return self._apply("scroll_to_top", scroll_to_top)

    def set_locale(self, locale) -> UIState:
        return self._apply("set_locale", set_locale, locale, self.catalog)

    # -- copy to clipboard ---------------------------------------------------

    def begin_copy(self, code: str) -> int:
        with self._lock:
            request_id = next(self._request_ids)
            self._latest_request = request_id
        return request_id

    def resolve_copy(self, request_id: int, code: str, result: CopyResult) -> bool:
        """Apply a finished clipboard write. Returns False for stale or failed writes."""
        if not result.success:
            logger.warning("Failed to copy %s: %s", code, result.error)
            return False
        with self._lock:
            if request_id != self._latest_request:
                logger.debug("copy: ignoring stale request %d (latest %d)", request_id, self._latest_request)
                return False
            if self._reset_handle is not None:
                self._reset_handle.cancel()
            self._applied_request = request_id
            self.state = replace(self.state, copied_code=code)
            self._reset_handle = self.scheduler.schedule(
                self.copy_feedback_ms / 1000, lambda: self._expire_copy(request_id)
            )
        logger.info("copy: %s copied to clipboard", code)
        return True

    def request_copy(self, code: str) -> CopyResult:
        request_id = self.begin_copy(code)
        result = self.clipboard.write(code)
        self.resolve_copy(request_id, code, result)
        return result

    def _expire_copy(self, request_id: int) -> None:
        with self._lock:
            if request_id != self._applied_request:
                return
            self._reset_handle = None
            self.state = replace(self.state, copied_code=None)

    def is_copied(self, code: str) -> bool:
        return self.state.copied_code == code
