import streamlit as st
from streamlit_option_menu import option_menu

from config import API_URL, APP_NAME, REQUEST_TIMEOUT
from utils.api import APIClient
from utils import ui_state as ui
from utils.helper import init_session, check_backend_once, start_form_session
from utils.styles import inject_styles
from views import config_detail, config_form, config_list

NAV_OPTIONS = ["Configurations", "New"]


def _show_toasts():
    """Flush queued toasts once; Streamlit keeps them on screen by itself."""
    state = st.session_state.ui_state
    for toast in state.toasts:
        st.toast(toast.message, icon="✅" if toast.type == "success" else "⚠️")
        state = ui.remove_toast(state, toast.id)
    st.session_state.ui_state = state


def _sidebar(api: APIClient):
    with st.sidebar:
        health = check_backend_once(api)
        if health["ok"]:
            st.success("API connectée")
        else:
            st.error(f"API injoignable: {health.get('error') or API_URL}")

        ui_state = st.session_state.ui_state
        current = "New" if ui_state.active_panel == "form" and ui_state.editing_id is None else "Configurations"

        # Dynamic key so programmatic panel changes re-render the menu
        nav_key = f"main_nav_{st.session_state.get('nav_key', 0)}"
        page_selected = option_menu(
            menu_title=APP_NAME,
            options=NAV_OPTIONS,
            icons=["list-ul", "plus-circle"],
            default_index=NAV_OPTIONS.index(current),
            key=nav_key,
        )

        if page_selected != current:
            start_form_session()
            if page_selected == "New":
                st.session_state.ui_state = ui.open_create(ui_state)
            else:
                st.session_state.ui_state = ui.close_form(ui_state)
            st.session_state["nav_key"] = st.session_state.get("nav_key", 0) + 1
            st.rerun()


def main():
    st.set_page_config(page_title=APP_NAME, page_icon="⚙️", layout="wide")
    inject_styles()
    init_session()

    api = APIClient(API_URL, timeout=REQUEST_TIMEOUT)
    _sidebar(api)
    _show_toasts()

    # --- Routing
    panel = st.session_state.ui_state.active_panel
    if panel == "form":
        config_form.render()
    elif panel == "view":
        config_detail.render()
    else:
        config_list.render()


if __name__ == "__main__":
    main()
