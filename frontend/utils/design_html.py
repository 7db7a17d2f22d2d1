import html

import streamlit as st

from .formatters import format_number, format_percent, format_age


def render_stats_bar(stats: dict):
    """Four stat cards: total, enabled, instruments, average max loss."""
    total = stats.get("total", 0)
    avg_loss = stats.get("avgMaxLossPercent")
    cards = [
        ("Total Configs", total, "accent"),
        ("Enabled", stats.get("enabled", 0), "green"),
        ("Instruments", len(stats.get("instruments") or {}), ""),
        ("Avg Max Loss %", format_percent(avg_loss), ""),
    ]
    cols = st.columns(len(cards))
    for col, (label, value, css) in zip(cols, cards):
        with col:
            st.markdown(f"""
            <div class="stat-card">
                <div class="stat-label">{label}</div>
                <div class="stat-value {css}">{value}</div>
            </div>
            """, unsafe_allow_html=True)


def render_config_card(config: dict, highlighted: bool = False):
    enabled = config.get("enabled", False)
    badge = (
        '<span class="badge-enabled">ENABLED</span>'
        if enabled else '<span class="badge-disabled">DISABLED</span>'
    )
    stop_loss = " · stop-loss" if config.get("stopLossEnabled") else ""
    age = format_age(config.get('updatedAt', ''))
    updated = f"· updated {age}" if age else ""
    card_class = "config-card last-saved" if highlighted else "config-card"
    st.markdown(f"""
    <div class="{card_class}">
        <div class="config-card-title">{html.escape(config.get('name', ''))} {badge}</div>
        <div class="config-card-meta">
            {config.get('instrument', '')} · {config.get('timeframe', '')}{stop_loss}
            {updated}
        </div>
        <div class="config-card-params">
            <div>
                <div class="param-label">Entry</div>
                <div class="param-value">{format_number(config.get('entryThreshold'))}</div>
            </div>
            <div>
                <div class="param-label">Exit</div>
                <div class="param-value">{format_number(config.get('exitThreshold'))}</div>
            </div>
            <div>
                <div class="param-label">Max Loss</div>
                <div class="param-value">{format_percent(config.get('maxLossPercent'))}</div>
            </div>
            <div>
                <div class="param-label">Trades / Day</div>
                <div class="param-value">{config.get('maxTradesPerDay', '-')}</div>
            </div>
        </div>
    </div>
    """, unsafe_allow_html=True)
