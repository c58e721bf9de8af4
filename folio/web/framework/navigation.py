"""Navigation on top of the ``path`` query parameter.

Moving between screens updates the query parameter and reruns inside the same
Streamlit session; a plain anchor link would open a new session and drop the
login.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

import streamlit as st

from folio.app.context import AppContext
from folio.web.links import mailto_url
from folio.web.router import ADMIN_ROOT, HOME_PATH, Route, Router

PATH_PARAM = "path"


def current_path() -> str:
    return st.query_params.get(PATH_PARAM, HOME_PATH)


def go_to(path: str) -> None:
    st.query_params[PATH_PARAM] = path
    st.rerun()


def nav_button(label: str, path: str, *, key: Optional[str] = None, **kwargs) -> None:
    if st.button(label, key=key or f"nav_{path}_{label}", **kwargs):
        go_to(path)


def render_public_navbar(ctx: AppContext, router: Router, active: str) -> None:
    profile = ctx.store.read().profile
    routes = router.public_nav()
    extra = 1 if ctx.session.is_authenticated else 0
    cols = st.columns([3] + [1] * (len(routes) + extra))
    cols[0].markdown(f"### {profile.name}")
    for col, route in zip(cols[1:], routes):
        with col:
            nav_button(
                route.label,
                route.path,
                key=f"topnav_{route.name}",
                type="primary" if route.path == active else "secondary",
                width="stretch",
            )
    if extra:
        with cols[-1]:
            nav_button("Dashboard", ADMIN_ROOT, key="topnav_dashboard", width="stretch")
    st.divider()


def render_footer(ctx: AppContext, router: Router) -> None:
    profile = ctx.store.read().profile
    st.divider()
    about_col, links_col, contact_col = st.columns([2, 1, 1])
    with about_col:
        st.markdown(f"**{profile.name}**")
        st.caption(profile.tagline)
        c1, c2 = st.columns(2)
        c1.link_button("LinkedIn", profile.linkedin, width="stretch")
        c2.link_button("Email", mailto_url(profile.email), width="stretch")
    with links_col:
        st.markdown("**Quick Links**")
        for route in router.public_nav():
            if route.path != HOME_PATH:
                nav_button(route.label, route.path, key=f"footer_{route.name}", type="tertiary")
        nav_button("Admin Login", ADMIN_ROOT, key="footer_admin", type="tertiary")
    with contact_col:
        st.markdown("**Contact**")
        st.caption(f"📍 {profile.location}")
        st.caption(f"✉️ {profile.email}")
    st.caption(f"© {date.today().year} {profile.name}. All rights reserved.")


def render_admin_sidebar(ctx: AppContext, router: Router, active: str) -> None:
    with st.sidebar:
        st.markdown("## Dashboard")
        for route in router.admin_nav():
            nav_button(
                route.label,
                route.path,
                key=f"sidebar_{route.name}",
                type="primary" if route.path == active else "secondary",
                width="stretch",
            )
        st.divider()
        nav_button("🌐 View Live Site", HOME_PATH, key="sidebar_live_site", width="stretch")
        if st.button("Logout", key="sidebar_logout", width="stretch"):
            ctx.session.logout()
            go_to(ADMIN_ROOT)


def route_title(route: Route, site_title: str) -> str:
    return site_title if route.path == HOME_PATH else f"{route.label} · {site_title}"
