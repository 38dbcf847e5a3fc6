"""
srefs catalog page - entry point for `streamlit run srefs_ui/app/main.py`
"""
import os, sys
import streamlit as st

# Ensure package imports resolve when running the file directly with streamlit
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from srefs_ui.utils import errors, logging as app_logging  # noqa: E402
from srefs_ui.services.config import get_config  # noqa: E402
from srefs_ui.app import state  # noqa: E402
from srefs_ui.components import header, sidebar  # noqa: E402
from srefs_ui.views import browser  # noqa: E402

def configure_page() -> None:
    st.set_page_config(
        page_title="srefs.net - Best Sref Styles for Midjourney",
        page_icon="🎨",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

@errors.ui_error_boundary
def main() -> None:
    config = get_config()
    app_logging.init(config.log_dir, config.log_level)
    configure_page()
    state.initialize()
    ctrl = state.controller()
    header.render(ctrl)
    sidebar.render(ctrl)
    browser.render(ctrl)

if __name__ == "__main__":
    main()
