import streamlit as st

from folio.app.context import AppContext
from folio.domain.models import Profile
from folio.domain.rules import parse_lines
from folio.infra.exceptions import FolioException


def render(ctx: AppContext) -> None:
    profile = ctx.store.read().profile
    st.title("Edit Profile")

    # widgets inside a form keep their draft values until Save submits them all
    with st.form("profile_editor"):
        c1, c2 = st.columns(2)
        name = c1.text_input("Display Name", profile.name)
        title = c2.text_input("Job Title", profile.title)
        email = c1.text_input("Email", profile.email)
        phone = c2.text_input("Phone", profile.phone)
        location = st.text_input("Location", profile.location)
        image = st.text_input("Profile Image URL", profile.image)
        tagline = st.text_input("Tagline (Hero Section)", profile.tagline)
        about = st.text_area("About Summary", profile.about, height=140)
        c3, c4 = st.columns(2)
        linkedin = c3.text_input("LinkedIn URL", profile.linkedin)
        scholar = c4.text_input("Scholar Profile URL", profile.scholar)
        skills = st.text_area("Skills (one per line)", "\n".join(profile.skills), height=180)

        submitted = st.form_submit_button("💾 Save Changes", type="primary", width="stretch")

    if submitted:
        draft = Profile(
            name=name,
            title=title,
            tagline=tagline,
            email=email,
            phone=phone,
            location=location,
            about=about,
            linkedin=linkedin,
            scholar=scholar,
            image=image,
            skills=parse_lines(skills),
        )
        try:
            ctx.store.update({"profile": draft})
            st.success("Profile updated successfully!")
        except FolioException as e:
            st.error(f"保存失败: {e.message}")
