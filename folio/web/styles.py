from html import escape

import streamlit as st

from folio.domain.models import FontFamily, SiteSettings, ThemeMode

_FONT_STACKS = {
    FontFamily.SANS: "'Inter', ui-sans-serif, system-ui, -apple-system, 'Segoe UI', Roboto, sans-serif",
    FontFamily.SERIF: "'Merriweather', Georgia, 'Times New Roman', serif",
}

_PALETTES = {
    ThemeMode.LIGHT: {"bg": "#ffffff", "panel": "#f8fafc", "border": "#e2e8f0", "text": "#0f172a", "muted": "#64748b"},
    ThemeMode.DARK: {"bg": "#0f172a", "panel": "#1e293b", "border": "#334155", "text": "#f1f5f9", "muted": "#94a3b8"},
}


def theme_css(settings: SiteSettings) -> str:
    """CSS for the current site settings (theme mode, accent color, font)."""
    p = _PALETTES[settings.theme_mode]
    font = _FONT_STACKS[settings.font_family]
    accent = settings.primary_color
    return f"""
        <style>
        .stApp {{
            font-family: {font};
            background-color: {p["bg"]};
            color: {p["text"]};
        }}

        section[data-testid="stSidebar"] {{
            background-color: {p["panel"]};
            border-right: 1px solid {p["border"]};
        }}

        h1, h2, h3, h4 {{
            font-family: {_FONT_STACKS[FontFamily.SERIF]};
            color: {p["text"]};
            letter-spacing: -0.01em;
        }}

        .stApp p, .stApp li, .stApp label, .stApp span {{
            color: {p["text"]};
        }}

        .stButton > button[kind="primary"], .stFormSubmitButton > button[kind="primary"] {{
            background-color: {accent};
            border-color: {accent};
            color: #ffffff;
        }}

        div[data-testid="stMetric"] {{
            background-color: {p["panel"]};
            border: 1px solid {p["border"]};
            border-radius: 12px;
            padding: 1rem;
        }}

        /* 技能标签 */
        .folio-skill {{
            background-color: {p["panel"]};
            border: 1px solid {p["border"]};
            border-radius: 8px;
            padding: 0.9rem;
            text-align: center;
            font-weight: 500;
            margin-bottom: 0.75rem;
        }}

        .folio-tag {{
            display: inline-block;
            font-size: 0.7rem;
            font-weight: 700;
            text-transform: uppercase;
            letter-spacing: 0.05em;
            color: {accent};
            border: 1px solid {p["border"]};
            border-radius: 4px;
            padding: 0.1rem 0.4rem;
            margin-right: 0.3rem;
        }}

        .folio-muted {{
            color: {p["muted"]} !important;
            font-size: 0.85rem;
        }}
        </style>
    """


def load_theme_style(settings: SiteSettings) -> None:
    """注入当前主题的 CSS"""
    st.markdown(theme_css(settings), unsafe_allow_html=True)


def render_sidebar_header(title: str, subtitle: str) -> None:
    """渲染侧边栏顶部标题区域"""
    initial = escape((title.strip()[:1] or "?").upper())
    title, subtitle = escape(title), escape(subtitle)
    st.sidebar.markdown(f"""
        <div style="padding-bottom: 1.5rem; padding-left: 0.5rem;">
            <div style="display: flex; align-items: center; gap: 0.75rem;">
                <div style="width: 32px; height: 32px; background-color: #202123; border-radius: 6px; display: flex; align-items: center; justify-content: center;">
                    <span style="color: white; font-weight: bold; font-size: 18px;">{initial}</span>
                </div>
                <div>
                    <div style="font-weight: 600; font-size: 1rem;">{title}</div>
                    <div style="font-size: 0.75rem; opacity: 0.7;">{subtitle}</div>
                </div>
            </div>
        </div>
    """, unsafe_allow_html=True)
