import pytest

from conftest import ALL
from srefs_ui.core import controller as c
from srefs_ui.core.controller import BrowserController
from srefs_ui.services.clipboard import MemoryClipboard
from srefs_ui.services.scheduler import ManualScheduler
from srefs_ui.utils.errors import InvalidStateTransition
from srefs_ui.utils.typing import CopyResult, Locale, SortKey, ViewMode


class FailingClipboard:
    def write(self, text):
        return CopyResult(False, "no clipboard")


@pytest.fixture
def ctrl(catalog):
    return BrowserController(catalog, MemoryClipboard(), ManualScheduler())


def test_initial_state(ctrl):
    s = ctrl.state
    assert s.search_term == "" and s.selected_category == ALL
    assert s.sort_key == SortKey.NAME and s.view_mode == ViewMode.GRID
    assert s.display_count == 40 and s.copied_code is None and not s.show_back_to_top


def test_default_order(ctrl):
    assert [s.id for s in ctrl.visible().items] == ["4", "2", "3", "5", "1"]


def test_set_search_keeps_text_verbatim(ctrl):
    ctrl.set_search("  Noir ")
    assert ctrl.state.search_term == "  Noir "


def test_set_category_rejects_unknown(ctrl):
    ctrl.set_category("Gothic")
    with pytest.raises(InvalidStateTransition):
        ctrl.set_category("Cubist")
    assert ctrl.state.selected_category == "Gothic"


def test_set_sort_and_view_mode_accept_strings(ctrl):
    ctrl.set_sort("category")
    ctrl.set_view_mode("list")
    assert ctrl.state.sort_key == SortKey.CATEGORY and ctrl.state.view_mode == ViewMode.LIST
    with pytest.raises(InvalidStateTransition):
        ctrl.set_sort("date")
    with pytest.raises(InvalidStateTransition):
        ctrl.set_view_mode("carousel")
    assert ctrl.state.sort_key == SortKey.CATEGORY and ctrl.state.view_mode == ViewMode.LIST


def test_load_more_caps_and_is_idempotent():
    state = c.UIState(selected_category=ALL, display_count=40)
    state = c.load_more(state, 100)
    assert state.display_count == 60
    state = c.load_more(state, 65)
    assert state.display_count == 65
    assert c.load_more(state, 65) is state


def test_load_more_never_shrinks_after_narrowing():
    state = c.UIState(selected_category=ALL, display_count=60)
    assert c.load_more(state, 3).display_count == 60


def test_load_more_on_controller(big_catalog):
    ctrl = BrowserController(big_catalog, MemoryClipboard(), ManualScheduler())
    ctrl.load_more()
    assert ctrl.state.display_count == 45
    ctrl.load_more()
    assert ctrl.state.display_count == 45
    assert not ctrl.visible().has_more


def test_clear_filters_keeps_sort_view_and_count(ctrl):
    ctrl.set_search("fog")
    ctrl.set_category("Gothic")
    ctrl.set_sort("category")
    ctrl.set_view_mode("list")
    ctrl.clear_filters()
    s = ctrl.state
    assert s.search_term == "" and s.selected_category == ALL
    assert s.sort_key == SortKey.CATEGORY and s.view_mode == ViewMode.LIST and s.display_count == 40


def test_clear_filters_restores_full_dataset(ctrl):
    ctrl.set_search("zzz")
    assert ctrl.visible().is_empty
    ctrl.clear_filters()
    assert [s.id for s in ctrl.visible().items] == ["4", "2", "3", "5", "1"]


def test_filters_do_not_reset_display_count(big_catalog):
    ctrl = BrowserController(big_catalog, MemoryClipboard(), ManualScheduler())
    ctrl.load_more()
    ctrl.set_search("Style 0")
    assert ctrl.state.display_count == 45
    assert len(ctrl.visible().items) == 9


def test_scroll_flag(ctrl):
    ctrl.set_scroll_position(301)
    assert ctrl.state.show_back_to_top
    ctrl.scroll_to_top()
    assert not ctrl.state.show_back_to_top
    ctrl.set_scroll_position(300)
    assert not ctrl.state.show_back_to_top


def test_set_locale_maps_category(ctrl):
    ctrl.set_category("Surreal")
    ctrl.set_locale("pl")
    assert ctrl.state.locale == Locale.PL
    assert ctrl.state.selected_category == "Surrealistyczne"
    assert ctrl.visible().items[0].name == "Melting Clocks pl"
    with pytest.raises(InvalidStateTransition):
        ctrl.set_locale("de")


def test_copy_sets_and_expires_feedback(catalog):
    clipboard, scheduler = MemoryClipboard(), ManualScheduler()
    ctrl = BrowserController(catalog, clipboard, scheduler)
    result = ctrl.request_copy("3199463349")
    assert result.success and clipboard.value == "3199463349"
    assert ctrl.state.copied_code == "3199463349" and ctrl.is_copied("3199463349")
    scheduler.advance(1.5)
    assert ctrl.state.copied_code == "3199463349"
    scheduler.advance(0.5)
    assert ctrl.state.copied_code is None


def test_newer_copy_cancels_older_reset(catalog):
    scheduler = ManualScheduler()
    ctrl = BrowserController(catalog, MemoryClipboard(), scheduler)
    ctrl.request_copy("111")
    scheduler.advance(1.5)
    ctrl.request_copy("222")
    scheduler.advance(1.0)
    assert ctrl.state.copied_code == "222"
    assert scheduler.pending() == 1
    scheduler.advance(1.0)
    assert ctrl.state.copied_code is None


def test_stale_resolution_is_ignored(ctrl):
    first = ctrl.begin_copy("111")
    second = ctrl.begin_copy("222")
    assert ctrl.resolve_copy(second, "222", CopyResult(True))
    assert not ctrl.resolve_copy(first, "111", CopyResult(True))
    assert ctrl.state.copied_code == "222"


def test_failed_copy_leaves_feedback_unchanged(catalog, caplog):
    scheduler = ManualScheduler()
    ctrl = BrowserController(catalog, FailingClipboard(), scheduler)
    result = ctrl.request_copy("3199463349")
    assert not result.success
    assert ctrl.state.copied_code is None
    assert scheduler.pending() == 0
    assert "Failed to copy" in caplog.text


def test_reset_during_command_is_not_overwritten(catalog):
    scheduler = ManualScheduler()
    ctrl = BrowserController(catalog, MemoryClipboard(), scheduler)
    ctrl.request_copy("3199463349")

    def search_while_timer_fires(state, text):
        scheduler.advance(2.0)
        return c.set_search(state, text)

    ctrl._apply("set_search", search_while_timer_fires, "fog")
    scheduler.advance(10)
    assert ctrl.state.search_term == "fog"
    assert ctrl.state.copied_code is None


def test_commands_keep_current_copy_feedback(ctrl):
    ctrl.request_copy("111")
    ctrl.set_sort("category")
    ctrl.load_more()
    assert ctrl.state.copied_code == "111"
