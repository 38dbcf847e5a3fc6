import html

import streamlit as st

from srefs_ui.app import state
from srefs_ui.components import controls, footer, style_card
from srefs_ui.core import engine
from srefs_ui.core.controller import BrowserController
from srefs_ui.services.i18n import translator
from srefs_ui.utils.errors import ui_error_boundary
from srefs_ui.utils.typing import ViewMode

GRID_COLUMNS = 4
# rough rendered heights, used to decide when the page is long enough to need "back to top"
CARD_HEIGHT_PX = 620
LIST_ROW_HEIGHT_PX = 320
HEADER_HEIGHT_PX = 900
VIEWPORT_HEIGHT_PX = 900


def _on_load_more() -> None:
    state.controller().load_more()

def _on_clear_filters() -> None:
    ctrl = state.controller()
    ctrl.clear_filters()
    state.sync_widgets(ctrl)


def estimated_scroll_depth(shown: int, view_mode: ViewMode) -> int:
    """How far down the page the user is when the bottom of the results is in view."""
    if view_mode == ViewMode.LIST:
        height = HEADER_HEIGHT_PX + shown * LIST_ROW_HEIGHT_PX
    else:
        height = HEADER_HEIGHT_PX + -(-shown // GRID_COLUMNS) * CARD_HEIGHT_PX
    return max(height - VIEWPORT_HEIGHT_PX, 0)


def _render_empty(t) -> None:
    st.markdown(f"<h3 style='text-align:center'>🎨 {t('empty.title')}</h3>", unsafe_allow_html=True)
    st.markdown(f"<p style='text-align:center'>{t('empty.hint')}</p>", unsafe_allow_html=True)
    _, mid, _ = st.columns([2, 1, 2])
    with mid:
        st.button(t("empty.clear"), key="clear_filters", on_click=_on_clear_filters, use_container_width=True)


def _render_results(ctrl: BrowserController, result, t) -> None:
    if ctrl.state.view_mode == ViewMode.LIST:
        for style in result.items:
            style_card.render_card(ctrl, style, t, key=f"list_{style.id}")
    else:
        cols = st.columns(GRID_COLUMNS)
        for i, style in enumerate(result.items):
            with cols[i % GRID_COLUMNS]:
                style_card.render_card(ctrl, style, t, key=f"grid_{style.id}")

    if result.has_more:
        _, mid, _ = st.columns([2, 1, 2])
        with mid:
            st.button(
                t("load_more", remaining=result.remaining),
                key="load_more",
                on_click=_on_load_more,
                use_container_width=True,
            )


@ui_error_boundary
def render(ctrl: BrowserController) -> None:
    t = translator(ctrl.state.locale)

    featured = ctrl.catalog.featured(ctrl.state.locale)
    if featured is not None:
        style_card.render_featured(ctrl, featured, t)

    controls.render_category_nav(ctrl)
    controls.render_controls(ctrl, t)

    result = ctrl.visible()
    st.markdown(
        f"<p style='text-align:center'>{html.escape(engine.summarize(result, ctrl.state, ctrl.all_category, t))}</p>",
        unsafe_allow_html=True,
    )

    if result.is_empty:
        _render_empty(t)
    else:
        _render_results(ctrl, result, t)

    ctrl.set_scroll_position(estimated_scroll_depth(len(result.items), ctrl.state.view_mode))
    footer.render(ctrl, t)
    footer.render_back_to_top(ctrl, t)
    style_card.render_copy_feedback_watcher(ctrl)
