import time

import streamlit as st

from .api import APIClient
from .config_state import ConfigListState, clear_errors
from .ui_state import UIState


def init_session():
    defaults = {
        "config_state": ConfigListState(),
        "ui_state": UIState(),
        "backend_health": None,
        "last_saved_at": None,
        "form_nonce": 0,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def check_backend_once(api: APIClient) -> dict:
    """Run the liveness check a single time per browser session."""
    if st.session_state.get("backend_health") is None:
        resp = api.health()
        data = resp.get("data") if isinstance(resp.get("data"), dict) else {}
        st.session_state["backend_health"] = {
            "ok": resp.get("status") == 200 and data.get("status") == "ok",
            "error": resp.get("error"),
        }
    return st.session_state["backend_health"]


def mark_saved():
    """Remember when the last save happened so the card highlight can expire."""
    st.session_state["last_saved_at"] = time.monotonic()


def is_highlighted(config_id: str, window_seconds: float) -> bool:
    state = st.session_state["config_state"]
    saved_at = st.session_state.get("last_saved_at")
    if state.last_saved != config_id or saved_at is None:
        return False
    return time.monotonic() - saved_at < window_seconds


def start_form_session():
    """Reset form and field errors and give the form widgets fresh keys."""
    st.session_state["config_state"] = clear_errors(st.session_state["config_state"])
    st.session_state["form_errors"] = {}
    st.session_state["form_nonce"] = st.session_state.get("form_nonce", 0) + 1
