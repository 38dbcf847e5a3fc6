"""
Style cards: image, name, category badge, sref code with copy button, example
text and clickable tags. Used by the featured section and the results grid.
"""
from pathlib import Path
from typing import Callable, Optional

import streamlit as st

from srefs_ui.app import state
from srefs_ui.core.controller import BrowserController
from srefs_ui.services.config import get_config
from srefs_ui.utils.errors import ui_error_boundary
from srefs_ui.utils.typing import Style, ViewMode


def image_source(style: Style, base_dir: Optional[Path] = None) -> Optional[str]:
    """Resolve a style's image reference; None means show the placeholder."""
    url = style.image_url
    if not url:
        return None
    if url.startswith(("http://", "https://")):
        return url
    base_dir = base_dir or get_config().data_file.parent
    path = (base_dir / url).resolve()
    return str(path) if path.exists() else None


def _on_copy(code: str) -> None:
    ctrl = state.controller()
    result = ctrl.request_copy(code)
    if result.success:
        st.toast(code, icon="📋")


def feedback_expired(ctrl: BrowserController, shown_code: str) -> bool:
    """True once the "Copied!" label rendered for shown_code no longer matches the controller."""
    return ctrl.state.copied_code != shown_code


@st.fragment(run_every=0.5)
def _copy_feedback_watcher(shown_code: str) -> None:
    if feedback_expired(state.controller(), shown_code):
        st.rerun(scope="app")


def render_copy_feedback_watcher(ctrl: BrowserController) -> None:
    """Polls while copy feedback is shown so the page rerenders once the reset fires."""
    if ctrl.state.copied_code is not None:
        _copy_feedback_watcher(ctrl.state.copied_code)


def _on_category(category: str) -> None:
    state.controller().set_category(category)


def _on_tag(tag: str) -> None:
    ctrl = state.controller()
    ctrl.set_search(tag)
    state.sync_widgets(ctrl)


@st.dialog("🔍", width="large")
def _zoom(src: str, name: str, description: Optional[str]) -> None:
    st.image(src, caption=name, use_container_width=True)
    if description:
        st.write(description)


def _render_image(style: Style, t: Callable[..., str], key: str) -> None:
    src = image_source(style)
    if src is None:
        st.markdown(
            f"<div style='aspect-ratio:1;display:flex;align-items:center;justify-content:center;"
            f"background:#1f2937;border-radius:8px;color:#9ca3af'>{t('no_image')}</div>",
            unsafe_allow_html=True,
        )
        return
    st.image(src, use_container_width=True)
    if st.button(f"🔍 {t('zoom')}", key=f"zoom_{key}"):
        _zoom(src, style.name, style.description)


def _render_body(ctrl: BrowserController, style: Style, t: Callable[..., str], key: str) -> None:
    badges = []
    if style.featured:
        badges.append(f"⭐ {t('badge.featured')}")
    elif style.new:
        badges.append(f"🆕 {t('badge.new')}")
    title = f"### {style.name}"
    if badges:
        title += "  \n" + " · ".join(badges)
    st.markdown(title)

    st.button(
        style.category,
        key=f"cat_{key}",
        on_click=_on_category,
        args=(style.category,),
        type="tertiary",
    )
    st.code(style.code, language=None)

    copied = ctrl.is_copied(style.code)
    st.button(
        f"✅ {t('copied')}" if copied else f"📋 {t('copy')}",
        key=f"copy_{key}",
        on_click=_on_copy,
        args=(style.code,),
        type="primary" if copied else "secondary",
        use_container_width=True,
    )
    st.caption(style.example)

    if style.tags:
        tag_cols = st.columns(len(style.tags))
        for i, (col, tag) in enumerate(zip(tag_cols, style.tags)):
            with col:
                st.button(f"#{tag}", key=f"tag_{key}_{i}", on_click=_on_tag, args=(tag,), type="tertiary")


@ui_error_boundary
def render_card(ctrl: BrowserController, style: Style, t: Callable[..., str], key: str) -> None:
    with st.container(border=True):
        if ctrl.state.view_mode == ViewMode.LIST:
            left, right = st.columns([1, 2])
            with left:
                _render_image(style, t, key)
            with right:
                _render_body(ctrl, style, t, key)
        else:
            _render_image(style, t, key)
            _render_body(ctrl, style, t, key)


@ui_error_boundary
def render_featured(ctrl: BrowserController, style: Style, t: Callable[..., str]) -> None:
    st.markdown(f"<h4 style='text-align:center'>⭐ {t('featured.title')}</h4>", unsafe_allow_html=True)
    with st.container(border=True):
        left, right = st.columns(2)
        with left:
            _render_image(style, t, "featured")
        with right:
            _render_body(ctrl, style, t, "featured")
