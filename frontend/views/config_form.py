import streamlit as st

from config import API_URL, REQUEST_TIMEOUT
from utils.api import APIClient
from utils import config_state as cs
from utils import ui_state as ui
from utils.helper import mark_saved
from utils.validation import (
    INSTRUMENTS,
    TIMEFRAMES,
    NAME_MAX_LENGTH,
    NOTES_MAX_LENGTH,
    config_to_form_values,
    form_values_to_payload,
    get_initial_form_values,
    validate_config_form,
)


def _field_error(errors: dict, field: str):
    if errors.get(field):
        st.caption(f":red[{errors[field]}]")


def _select_index(options: list, value: str) -> int:
    return options.index(value) + 1 if value in options else 0


def render():
    api = APIClient(API_URL, timeout=REQUEST_TIMEOUT)
    ui_state = st.session_state.ui_state
    state = st.session_state.config_state
    is_edit = ui_state.editing_id is not None

    selected = state.selected if is_edit else None
    if is_edit and (not selected or selected.get("id") != ui_state.editing_id):
        st.session_state.config_state = cs.fetch_config(state, api, ui_state.editing_id)
        selected = st.session_state.config_state.selected
        if not selected:
            st.error(st.session_state.config_state.error or "Configuration introuvable")
            st.session_state.ui_state = ui.close_form(ui_state)
            return

    initial = config_to_form_values(selected) if is_edit else get_initial_form_values()
    nonce = st.session_state.form_nonce

    st.caption(f"CONFIGS / {'EDIT' if is_edit else 'NEW'}")
    st.title("Edit Configuration" if is_edit else "New Algorithm Configuration")

    # Client-side errors from the last submit, then the server's field errors
    errors = dict(st.session_state.get("form_errors") or {})
    errors.update(state.field_errors)
    if state.error and state.status == cs.FAILED:
        st.error(state.error)

    with st.form(f"config_form_{nonce}"):
        st.markdown("**IDENTITY**")
        col1, col2, col3 = st.columns([2, 1, 1])
        with col1:
            name = st.text_input(
                "Configuration Name",
                value=initial["name"],
                max_chars=NAME_MAX_LENGTH,
                placeholder="e.g. NIFTY Momentum Strategy v1",
            )
            _field_error(errors, "name")
        with col2:
            instrument = st.selectbox(
                "Instrument",
                [""] + INSTRUMENTS,
                index=_select_index(INSTRUMENTS, initial["instrument"]),
                format_func=lambda v: v or "Select instrument…",
            )
            _field_error(errors, "instrument")
        with col3:
            timeframe = st.selectbox(
                "Timeframe",
                [""] + TIMEFRAMES,
                index=_select_index(TIMEFRAMES, initial["timeframe"]),
                format_func=lambda v: v or "Select timeframe…",
            )
            _field_error(errors, "timeframe")

        st.markdown("**SIGNAL THRESHOLDS**")
        col1, col2 = st.columns(2)
        with col1:
            entry_threshold = st.text_input("Entry Threshold", value=initial["entryThreshold"], placeholder="0.85")
            _field_error(errors, "entryThreshold")
        with col2:
            exit_threshold = st.text_input("Exit Threshold", value=initial["exitThreshold"], placeholder="0.40")
            _field_error(errors, "exitThreshold")

        st.markdown("**RISK LIMITS**")
        col1, col2 = st.columns(2)
        with col1:
            max_loss = st.text_input("Max Loss %", value=initial["maxLossPercent"], placeholder="2.5")
            _field_error(errors, "maxLossPercent")
        with col2:
            max_trades = st.text_input("Max Trades / Day", value=initial["maxTradesPerDay"], placeholder="10")
            _field_error(errors, "maxTradesPerDay")

        col1, col2 = st.columns(2)
        with col1:
            enabled = st.toggle("Algorithm enabled", value=initial["enabled"])
        with col2:
            stop_loss_enabled = st.toggle("Stop-loss enabled", value=initial["stopLossEnabled"])

        notes = st.text_area("Notes", value=initial["notes"], max_chars=NOTES_MAX_LENGTH)
        _field_error(errors, "notes")

        col1, col2 = st.columns(2)
        with col1:
            submitted = st.form_submit_button("💾 Enregistrer", use_container_width=True)
        with col2:
            cancelled = st.form_submit_button("Annuler", use_container_width=True)

    if cancelled:
        st.session_state.form_errors = {}
        st.session_state.config_state = cs.clear_errors(st.session_state.config_state)
        st.session_state.ui_state = ui.set_active_panel(
            ui.close_form(st.session_state.ui_state), "view" if is_edit else "list"
        )
        st.rerun()

    if not submitted:
        return

    values = {
        "name": name,
        "instrument": instrument,
        "timeframe": timeframe,
        "entryThreshold": entry_threshold,
        "exitThreshold": exit_threshold,
        "maxLossPercent": max_loss,
        "maxTradesPerDay": max_trades,
        "enabled": enabled,
        "stopLossEnabled": stop_loss_enabled,
        "notes": notes,
    }
    form_errors, is_valid = validate_config_form(values)
    st.session_state.form_errors = form_errors
    if not is_valid:
        st.session_state.config_state = cs.clear_errors(st.session_state.config_state)
        st.rerun()

    payload = form_values_to_payload(values)
    if is_edit:
        new_state = cs.update_config(st.session_state.config_state, api, ui_state.editing_id, payload)
        success_message = "Configuration updated successfully."
    else:
        new_state = cs.create_config(st.session_state.config_state, api, payload)
        success_message = "Configuration created successfully."
    st.session_state.config_state = new_state

    if new_state.status == cs.SUCCEEDED:
        mark_saved()
        st.session_state.ui_state = ui.add_toast(
            ui.close_form(st.session_state.ui_state), "success", success_message
        )
        if is_edit:
            st.session_state.ui_state = ui.set_active_panel(st.session_state.ui_state, "view")
    elif new_state.needs_refresh:
        # The record was deleted elsewhere; go back to a fresh list
        st.session_state.ui_state = ui.add_toast(
            ui.close_form(st.session_state.ui_state), "error", new_state.error or "Configuration introuvable"
        )
    st.rerun()
