from dataclasses import replace
from srefs_ui.components.style_card import image_source
from srefs_ui.views.browser import estimated_scroll_depth
from srefs_ui.utils.typing import ViewMode
from conftest import make_style

def test_image_source(tmp_path):
    (tmp_path / "a.webp").write_bytes(b"x")
    s = make_style(1, "A")
    assert image_source(s, tmp_path) is None
    assert image_source(replace(s, image_url="https://x/y.webp"), tmp_path) == "https://x/y.webp"
    assert image_source(replace(s, image_url="a.webp"), tmp_path).endswith("a.webp")
    assert image_source(replace(s, image_url="missing.webp"), tmp_path) is None

def test_scroll_depth_grows_with_results():
    assert estimated_scroll_depth(0, ViewMode.GRID) == 0
    assert estimated_scroll_depth(4, ViewMode.GRID) < estimated_scroll_depth(5, ViewMode.GRID)
    assert estimated_scroll_depth(3, ViewMode.LIST) > 300

def test_copy_feedback_expires_after_reset(catalog):
    from srefs_ui.components.style_card import feedback_expired
    from srefs_ui.core.controller import BrowserController
    from srefs_ui.services.clipboard import MemoryClipboard
    from srefs_ui.services.scheduler import ManualScheduler
    scheduler = ManualScheduler()
    ctrl = BrowserController(catalog, MemoryClipboard(), scheduler)
    ctrl.request_copy("3199463349")
    assert not feedback_expired(ctrl, "3199463349")
    scheduler.advance(2.0)
    assert feedback_expired(ctrl, "3199463349")
