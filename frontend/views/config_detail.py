import streamlit as st

from config import API_URL, REQUEST_TIMEOUT
from utils.api import APIClient
from utils import config_state as cs
from utils import ui_state as ui
from utils.formatters import format_datetime_parts, format_number, format_percent
from utils.helper import start_form_session


def _back_to_list():
    st.session_state.config_state = cs.clear_selected(st.session_state.config_state)
    st.session_state.ui_state = ui.set_active_panel(st.session_state.ui_state, "list")


def render():
    api = APIClient(API_URL, timeout=REQUEST_TIMEOUT)
    selected = st.session_state.config_state.selected

    if not selected:
        _back_to_list()
        st.rerun()

    # Always show the server's current copy
    st.session_state.config_state = cs.fetch_config(st.session_state.config_state, api, selected["id"])
    state = st.session_state.config_state
    if state.status == cs.FAILED:
        st.session_state.ui_state = ui.add_toast(
            st.session_state.ui_state, "error", state.error or "Configuration introuvable"
        )
        _back_to_list()
        st.rerun()

    config = state.selected
    st.caption("CONFIGS / VIEW")
    st.title(config["name"])
    st.markdown(
        '<span class="badge-enabled">ENABLED</span>' if config.get("enabled")
        else '<span class="badge-disabled">DISABLED</span>',
        unsafe_allow_html=True,
    )

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Instrument", config["instrument"])
    col2.metric("Timeframe", config["timeframe"])
    col3.metric("Entry threshold", format_number(config["entryThreshold"]))
    col4.metric("Exit threshold", format_number(config["exitThreshold"]))

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Max loss", format_percent(config["maxLossPercent"]))
    col2.metric("Max trades / day", config["maxTradesPerDay"])
    col3.metric("Stop-loss", "On" if config.get("stopLossEnabled") else "Off")
    col4.metric("ID", config["id"][:8])

    if config.get("notes"):
        st.subheader("Notes")
        st.write(config["notes"])

    created_date, created_time = format_datetime_parts(config.get("createdAt", ""))
    updated_date, updated_time = format_datetime_parts(config.get("updatedAt", ""))
    st.caption(f"Créée le {created_date} à {created_time} · Modifiée le {updated_date} à {updated_time}")

    st.divider()
    col1, col2 = st.columns(2)
    with col1:
        if st.button("✏️ Modifier", use_container_width=True):
            start_form_session()
            st.session_state.ui_state = ui.open_edit(st.session_state.ui_state, config["id"])
            st.rerun()
    with col2:
        if st.button("← Retour", use_container_width=True):
            _back_to_list()
            st.rerun()
