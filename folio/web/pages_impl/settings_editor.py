import streamlit as st

from folio.app.context import AppContext
from folio.domain.models import FontFamily, ThemeMode
from folio.domain.rules import update_settings
from folio.infra.exceptions import FolioException
from folio.web.framework.confirm import confirmation_prompt, request_confirmation

RESET_KEY = "reset_all_data"

# widget key -> SiteSettings field
_LIVE_FIELDS = {
    "settings_theme_mode": "theme_mode",
    "settings_primary_color": "primary_color",
    "settings_font_family": "font_family",
    "settings_seo_title": "seo_title",
    "settings_seo_description": "seo_description",
    "settings_seo_keywords": "seo_keywords",
}


def _commit(ctx: AppContext, widget_key: str) -> None:
    """on_change callback: write one field straight through to the store."""
    settings = ctx.store.read().settings
    try:
        new_settings = update_settings(settings, **{_LIVE_FIELDS[widget_key]: st.session_state[widget_key]})
        ctx.store.update({"settings": new_settings})
    except FolioException as e:
        st.session_state["settings_error"] = e.message


def _sync_widgets(ctx: AppContext) -> None:
    """Seed widget state from the store so the form always shows the saved record."""
    settings = ctx.store.read().settings
    values = {
        "settings_theme_mode": settings.theme_mode.value,
        "settings_primary_color": settings.primary_color,
        "settings_font_family": settings.font_family.value,
        "settings_seo_title": settings.seo_title,
        "settings_seo_description": settings.seo_description,
        "settings_seo_keywords": settings.seo_keywords,
    }
    for k, v in values.items():
        st.session_state[k] = v


def render(ctx: AppContext) -> None:
    _sync_widgets(ctx)
    st.title("Site Settings & SEO")

    error = st.session_state.pop("settings_error", None)
    if error:
        st.error(f"保存失败: {error}")

    with st.container(border=True):
        st.subheader("Appearance")
        st.radio(
            "Theme Mode",
            [m.value for m in ThemeMode],
            key="settings_theme_mode",
            format_func=str.capitalize,
            horizontal=True,
            on_change=_commit,
            args=(ctx, "settings_theme_mode"),
        )
        c1, c2 = st.columns(2)
        c1.color_picker(
            "Primary Color", key="settings_primary_color", on_change=_commit, args=(ctx, "settings_primary_color")
        )
        c2.selectbox(
            "Font Family",
            [f.value for f in FontFamily],
            key="settings_font_family",
            format_func=str.capitalize,
            on_change=_commit,
            args=(ctx, "settings_font_family"),
        )

    with st.container(border=True):
        st.subheader("SEO Configuration")
        st.text_input("Meta Title", key="settings_seo_title", on_change=_commit, args=(ctx, "settings_seo_title"))
        st.text_area(
            "Meta Description",
            key="settings_seo_description",
            height=100,
            on_change=_commit,
            args=(ctx, "settings_seo_description"),
        )
        st.text_input("Keywords", key="settings_seo_keywords", on_change=_commit, args=(ctx, "settings_seo_keywords"))

    with st.container(border=True):
        st.subheader(":red[Danger Zone]")
        st.caption("Reset all content and settings to initial state.")
        if st.button("🔄 Reset Data", key="settings_reset"):
            request_confirmation(RESET_KEY)
        if confirmation_prompt(
            RESET_KEY,
            "Are you sure you want to reset all data to default? "
            "This will erase all changes and reload the initial configuration.",
        ):
            try:
                ctx.store.reset()
            except FolioException as e:
                st.error(f"重置失败: {e.message}")
            else:
                st.rerun()
