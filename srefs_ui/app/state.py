import streamlit as st

from srefs_ui.core.controller import BrowserController
from srefs_ui.services import catalog as catalog_service
from srefs_ui.services.clipboard import create_clipboard
from srefs_ui.services.config import get_config
from srefs_ui.services.scheduler import ThreadingScheduler
from srefs_ui.utils.errors import DatasetError, handle_fatal
from srefs_ui.utils.logging import logger
from srefs_ui.utils.typing import Catalog

# widget keys mirrored from the controller state
SEARCH_KEY = "search_input"
SORT_KEY = "sort_select"
VIEW_KEY = "view_toggle"
LOCALE_KEY = "locale_select"


@st.cache_resource(show_spinner=False)
def _load_catalog(path: str) -> Catalog:
    return catalog_service.load_catalog(path)


def initialize() -> None:
    if st.session_state.get("_initialized"):
        return
    config = get_config()
    logger.info("Initializing session state")

    try:
        catalog = _load_catalog(str(config.data_file))
    except DatasetError as e:
        handle_fatal(e)
        return

    ctrl = BrowserController(
        catalog,
        clipboard=create_clipboard(config.clipboard_backend),
        scheduler=ThreadingScheduler(),
        locale=config.default_locale,
        page_size=config.page_size,
        page_increment=config.page_increment,
        copy_feedback_ms=config.copy_feedback_ms,
    )
    st.session_state["controller"] = ctrl
    sync_widgets(ctrl)
    st.session_state["_initialized"] = True


def controller() -> BrowserController:
    return st.session_state["controller"]


def sync_widgets(ctrl: BrowserController) -> None:
    """Copy controller state into widget keys; only call before the widgets render or from callbacks."""
    s = ctrl.state
    st.session_state[SEARCH_KEY] = s.search_term
    st.session_state[SORT_KEY] = s.sort_key.value
    st.session_state[VIEW_KEY] = s.view_mode.value
    st.session_state[LOCALE_KEY] = s.locale.value
