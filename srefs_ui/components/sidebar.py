import pandas as pd
import streamlit as st

from srefs_ui.app import state
from srefs_ui.core.controller import BrowserController
from srefs_ui.services.i18n import translator
from srefs_ui.utils.typing import Locale

LANGUAGES = {Locale.EN.value: "English", Locale.PL.value: "Polski"}

def _on_locale_change() -> None:
    ctrl = state.controller()
    ctrl.set_locale(st.session_state[state.LOCALE_KEY])
    state.sync_widgets(ctrl)

def render(ctrl: BrowserController) -> None:
    t = translator(ctrl.state.locale)
    with st.sidebar:
        st.header(t("language"))
        st.radio(
            t("language"),
            options=list(LANGUAGES),
            format_func=LANGUAGES.get,
            key=state.LOCALE_KEY,
            on_change=_on_locale_change,
            label_visibility="collapsed",
        )

        st.divider()
        st.header(t("stats.title"))
        counts = ctrl.category_counts()
        df = pd.DataFrame({"category": list(counts), "styles": list(counts.values())})
        st.dataframe(df, use_container_width=True, hide_index=True)
