import streamlit as st
import streamlit.components.v1 as components

from srefs_ui.app import state
from srefs_ui.core.controller import BrowserController
from srefs_ui.services.structured_data import build_item_list, to_json_ld
from srefs_ui.utils.errors import ui_error_boundary

EXAMPLE_PROMPT = "beautiful mountain landscape at sunset --sref 3199463349"


def _on_back_to_top() -> None:
    state.controller().scroll_to_top()
    st.session_state["_scroll_requested"] = True


@ui_error_boundary
def render_back_to_top(ctrl: BrowserController, t) -> None:
    if st.session_state.pop("_scroll_requested", False):
        components.html(
            "<script>window.parent.document.getElementById('srefs-top')"
            "?.scrollIntoView({behavior: 'smooth'});</script>",
            height=0,
        )
    if ctrl.state.show_back_to_top:
        st.button(f"⬆️ {t('back_to_top')}", key="back_to_top", on_click=_on_back_to_top)


@ui_error_boundary
def render(ctrl: BrowserController, t) -> None:
    st.divider()
    st.subheader(t("footer.what_is_title"))
    st.write(t("footer.what_is"))
    st.caption(t("footer.example"))
    st.code(EXAMPLE_PROMPT, language=None)

    item_list = build_item_list(ctrl.catalog, ctrl.state.locale)
    with st.expander(t("footer.structured_data")):
        st.json(item_list, expanded=False)
        st.download_button(
            t("footer.download"),
            data=to_json_ld(item_list),
            file_name="srefs-catalog.jsonld",
            mime="application/ld+json",
        )
    st.caption(t("footer.disclaimer"))
