from html import escape

import streamlit as st

from folio.app.context import AppContext
from folio.web.framework.navigation import nav_button

MAX_SKILLS = 8


def render(ctx: AppContext) -> None:
    profile = ctx.store.read().profile

    text_col, image_col = st.columns([3, 2], gap="large")
    with text_col:
        st.caption("ACADEMIC PORTFOLIO")
        st.title(profile.name)
        st.subheader(profile.title)
        st.write(profile.tagline)
        c1, c2 = st.columns(2)
        with c1:
            nav_button("Get in Touch", "/contact", key="home_contact", type="primary", width="stretch")
        with c2:
            st.link_button("View Publications", profile.scholar, width="stretch")
    with image_col:
        if profile.image:
            st.image(profile.image, width="stretch")

    st.markdown("---")
    st.header("Research & Expertise")
    skills = profile.skills[:MAX_SKILLS]
    if not skills:
        st.info("No skills listed yet.")
        return
    cols = st.columns(4)
    for i, skill in enumerate(skills):
        cols[i % 4].markdown(f'<div class="folio-skill">{escape(skill)}</div>', unsafe_allow_html=True)
