import streamlit as st
import streamlit.components.v1 as components

from folio.app.context import AppContext
from folio.web.links import map_embed_url, mailto_url


def render(ctx: AppContext) -> None:
    profile = ctx.store.read().profile
    st.title("Contact Me")

    info_col, map_col = st.columns(2, gap="large")
    with info_col:
        st.subheader("Get in Touch")
        st.write(
            "I am always open to discussing new research collaborations, "
            "speaking opportunities, or academic queries."
        )
        with st.container(border=True):
            st.caption("EMAIL")
            st.markdown(f"[{profile.email}]({mailto_url(profile.email)})")
        with st.container(border=True):
            st.caption("PHONE")
            st.write(profile.phone)
        with st.container(border=True):
            st.caption("LOCATION")
            st.write(profile.location)
        st.link_button("Connect on LinkedIn", profile.linkedin, type="primary", width="stretch")

    with map_col:
        components.iframe(map_embed_url(profile.location), height=420)
