import streamlit as st

from srefs_ui.core.controller import BrowserController
from srefs_ui.services.i18n import translator

GUIDES = (
    ("📚", "guide.complete", "https://promptowy.com/kompletny-przewodnik-po-uzywaniu-stylow-srefs-w-midjourney/"),
    ("🎯", "guide.what_is", "https://promptowy.com/srefs-w-midjourney-co-to-jest-i-jak-z-niego-korzystac/"),
    ("🚀", "guide.evolution", "https://promptowy.com/ewolucja-stylu-midjourney/"),
)

def render(ctrl: BrowserController) -> None:
    t = translator(ctrl.state.locale)
    st.markdown(
        """
        <style>
        .srefs-header{text-align:center;padding:12px 0 4px}
        .srefs-header h1{font-size:3.5rem;font-weight:900;margin:0}
        .srefs-header p{color:#9ca3af;margin:4px 0}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.markdown(
        f'<div id="srefs-top" class="srefs-header"><h1>🎨 {t("app.title")}</h1>'
        f'<p><b>{t("app.subtitle")}</b></p><p>{t("app.tagline")} 🎨</p></div>',
        unsafe_allow_html=True,
    )
    cols = st.columns(len(GUIDES))
    for col, (icon, key, url) in zip(cols, GUIDES):
        with col:
            st.link_button(f"{icon} {t(key)}", url, use_container_width=True)
