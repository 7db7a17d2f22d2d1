import streamlit as st

from config import API_URL, REQUEST_TIMEOUT, LAST_SAVED_HIGHLIGHT_SECONDS
from utils.api import APIClient
from utils import config_state as cs
from utils import ui_state as ui
from utils.design_html import render_config_card, render_stats_bar
from utils.display_figure import _build_configs_dataframe, _create_instrument_chart
from utils.helper import is_highlighted, start_form_session


def _refresh(api: APIClient):
    st.session_state.config_state = cs.fetch_configs(st.session_state.config_state, api)


def render():
    st.title("Algorithm Configurations")

    api = APIClient(API_URL, timeout=REQUEST_TIMEOUT)
    state = st.session_state.config_state

    # Load on first visit, or after the server told us a record is gone
    if state.status == cs.IDLE or state.needs_refresh:
        _refresh(api)
        state = st.session_state.config_state

    top_left, top_right = st.columns([3, 1])
    with top_right:
        if st.button("🔄 Refresh", use_container_width=True):
            _refresh(api)
            st.rerun()

    if state.status == cs.FAILED and state.error and not state.items:
        st.error(state.error)
        return

    # Stats bar
    stats_resp = api.get_config_stats()
    if stats_resp.get("status") == 200 and isinstance(stats_resp.get("data"), dict):
        stats = stats_resp["data"].get("data") or {}
        render_stats_bar(stats)
        if stats.get("instruments"):
            with st.expander("📊 Répartition par instrument"):
                st.plotly_chart(_create_instrument_chart(stats["instruments"]), use_container_width=True)

    st.divider()

    configs = state.items
    if not configs:
        st.info("Aucune configuration. Créez-en une depuis le menu « New ».")
        return

    with top_left:
        view_mode = st.radio("Affichage", ["Cartes", "Tableau"], horizontal=True, label_visibility="collapsed")

    status_filter = st.segmented_control(
        "Filtre",
        ["All", "Enabled", "Disabled"],
        default="All",
        label_visibility="collapsed",
    )
    if status_filter == "Enabled":
        configs = [c for c in configs if c.get("enabled")]
    elif status_filter == "Disabled":
        configs = [c for c in configs if not c.get("enabled")]

    if view_mode == "Tableau":
        st.dataframe(_build_configs_dataframe(configs), use_container_width=True, hide_index=True)
        return

    for config in configs:
        cid = config.get("id")
        render_config_card(config, highlighted=is_highlighted(cid, LAST_SAVED_HIGHLIGHT_SECONDS))

        col1, col2, col3 = st.columns(3)
        with col1:
            if st.button("🔍 Détails", key=f"view_{cid}", use_container_width=True):
                st.session_state.config_state = cs.set_selected(st.session_state.config_state, config)
                st.session_state.ui_state = ui.set_active_panel(st.session_state.ui_state, "view")
                st.rerun()
        with col2:
            if st.button("✏️ Modifier", key=f"edit_{cid}", use_container_width=True):
                st.session_state.config_state = cs.set_selected(st.session_state.config_state, config)
                start_form_session()
                st.session_state.ui_state = ui.open_edit(st.session_state.ui_state, cid)
                st.rerun()
        with col3:
            if st.button("🗑️ Supprimer", key=f"delete_{cid}", use_container_width=True):
                st.session_state.config_state = cs.delete_config(st.session_state.config_state, api, cid)
                new_state = st.session_state.config_state
                if new_state.status == cs.SUCCEEDED:
                    st.session_state.ui_state = ui.add_toast(
                        st.session_state.ui_state, "success", f"« {config.get('name')} » supprimée."
                    )
                else:
                    st.session_state.ui_state = ui.add_toast(
                        st.session_state.ui_state, "error", new_state.error or "Suppression impossible"
                    )
                st.rerun()
