"""
Global styles and CSS for the configuration UI.
Dark theme.
"""

COLORS = {
    "bg_primary": "#0d1117",
    "bg_secondary": "#161b22",
    "bg_card": "#21262d",
    "bg_hover": "#30363d",
    "border": "#30363d",
    "text_primary": "#f0f6fc",
    "text_secondary": "#8b949e",
    "text_muted": "#6e7681",
    "accent_green": "#3fb950",
    "accent_blue": "#58a6ff",
    "accent_yellow": "#d29922",
}


def get_global_css() -> str:
    """Return global CSS for dark theme styling."""
    return f"""
    <style>
        .config-card {{
            background: {COLORS['bg_card']};
            border: 1px solid {COLORS['border']};
            border-radius: 12px;
            padding: 16px;
            margin-bottom: 12px;
            transition: all 0.2s ease;
        }}

        .config-card:hover {{
            background: {COLORS['bg_hover']};
            border-color: {COLORS['accent_blue']};
        }}

        .config-card.last-saved {{
            border-color: {COLORS['accent_yellow']};
            box-shadow: 0 0 0 1px {COLORS['accent_yellow']};
        }}

        .config-card-title {{
            color: {COLORS['text_primary']};
            font-size: 15px;
            font-weight: 600;
            margin-bottom: 6px;
        }}

        .config-card-meta {{
            color: {COLORS['text_secondary']};
            font-size: 12px;
            margin-bottom: 10px;
        }}

        .config-card-params {{
            display: grid;
            grid-template-columns: repeat(4, 1fr);
            gap: 8px;
        }}

        .param-label {{
            color: {COLORS['text_muted']};
            font-size: 11px;
            text-transform: uppercase;
        }}

        .param-value {{
            color: {COLORS['text_primary']};
            font-size: 14px;
            font-weight: 600;
        }}

        .badge-enabled {{
            display: inline-block;
            padding: 4px 8px;
            border-radius: 4px;
            font-size: 11px;
            font-weight: 600;
            background: rgba(63, 185, 80, 0.2);
            color: {COLORS['accent_green']};
        }}

        .badge-disabled {{
            display: inline-block;
            padding: 4px 8px;
            border-radius: 4px;
            font-size: 11px;
            font-weight: 600;
            background: rgba(139, 148, 158, 0.2);
            color: {COLORS['text_secondary']};
        }}

        .stat-card {{
            background: {COLORS['bg_secondary']};
            border: 1px solid {COLORS['border']};
            border-radius: 8px;
            padding: 12px 16px;
            text-align: center;
        }}

        .stat-label {{
            color: {COLORS['text_secondary']};
            font-size: 12px;
            text-transform: uppercase;
        }}

        .stat-value {{
            color: {COLORS['text_primary']};
            font-size: 24px;
            font-weight: 700;
        }}

        .stat-value.accent {{ color: {COLORS['accent_blue']}; }}
        .stat-value.green {{ color: {COLORS['accent_green']}; }}
    </style>
    """


def inject_styles():
    """Inject global styles into the Streamlit app."""
    import streamlit as st
    st.markdown(get_global_css(), unsafe_allow_html=True)
