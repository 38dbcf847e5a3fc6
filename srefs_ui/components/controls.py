import streamlit as st

from srefs_ui.app import state
from srefs_ui.core.controller import BrowserController
from srefs_ui.utils.errors import ui_error_boundary
from srefs_ui.utils.typing import SortKey, ViewMode


def _on_search() -> None:
    state.controller().set_search(st.session_state[state.SEARCH_KEY])

def _on_sort() -> None:
    state.controller().set_sort(st.session_state[state.SORT_KEY])

def _on_view() -> None:
    ctrl = state.controller()
    mode = st.session_state[state.VIEW_KEY]
    if mode is None:
        # segmented_control allows deselecting; keep the current mode
        state.sync_widgets(ctrl)
        return
    ctrl.set_view_mode(mode)

def _on_category(category: str) -> None:
    state.controller().set_category(category)


@ui_error_boundary
def render_category_nav(ctrl: BrowserController) -> None:
    counts = ctrl.category_counts()
    selected = ctrl.state.selected_category
    cols = st.columns(len(ctrl.categories))
    for i, (col, category) in enumerate(zip(cols, ctrl.categories)):
        with col:
            st.button(
                f"{category} ({counts.get(category, 0)})",
                key=f"nav_cat_{i}",
                on_click=_on_category,
                args=(category,),
                type="primary" if category == selected else "secondary",
                use_container_width=True,
            )


@ui_error_boundary
def render_controls(ctrl: BrowserController, t) -> None:
    search_col, sort_col, view_col = st.columns([4, 1, 1])
    with search_col:
        st.text_input(
            "🔍",
            key=state.SEARCH_KEY,
            placeholder=t("search.placeholder"),
            on_change=_on_search,
            label_visibility="collapsed",
        )
    with sort_col:
        st.selectbox(
            t("sort.label"),
            options=[k.value for k in SortKey],
            format_func=lambda v: t(f"sort.{v}"),
            key=state.SORT_KEY,
            on_change=_on_sort,
            label_visibility="collapsed",
        )
    with view_col:
        st.segmented_control(
            t("view.label"),
            options=[m.value for m in ViewMode],
            format_func=lambda v: ("▦ " if v == ViewMode.GRID.value else "☰ ") + t(f"view.{v}"),
            key=state.VIEW_KEY,
            on_change=_on_view,
            label_visibility="collapsed",
        )
