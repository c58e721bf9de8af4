import altair as alt
import pandas as pd
import streamlit as st

from folio.app.context import AppContext
from folio.domain.rules import experience_breakdown
from folio.web.framework.navigation import nav_button
from folio.web.router import POST_MANAGER_ROUTE


def render(ctx: AppContext) -> None:
    state = ctx.store.read()
    st.title(f"Welcome, {state.profile.name}")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Total Posts", len(state.posts))
    with col2:
        st.metric("Publications", len(state.publications))
    with col3:
        st.metric("Theme Mode", state.settings.theme_mode.value.capitalize())

    st.markdown("---")

    activity_col, actions_col = st.columns(2)
    with activity_col:
        st.subheader("📋 Experience by Category")
        breakdown = experience_breakdown(state.experience)
        if breakdown:
            chart = (
                alt.Chart(pd.DataFrame(breakdown))
                .mark_bar()
                .encode(x=alt.X("name:N", title=None), y=alt.Y("value:Q", title="Entries"), tooltip=["name", "value"])
                .properties(height=220)
            )
            st.altair_chart(chart, width="stretch")
        else:
            st.info("No experience entries yet.")
        st.caption("System ready. Content is synced.")

    with actions_col:
        st.subheader("⚡ Quick Actions")
        c1, c2 = st.columns(2)
        with c1:
            if ctx.config.enable_post_manager:
                nav_button("New Post", POST_MANAGER_ROUTE.path, key="quick_new_post", type="primary", width="stretch")
        with c2:
            nav_button("Edit Profile", "/admin/profile", key="quick_edit_profile", width="stretch")
