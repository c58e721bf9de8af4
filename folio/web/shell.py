"""Single-page shell: resolve the current path, apply theme and layout, render one screen."""
from __future__ import annotations

from typing import Callable, Dict

import streamlit as st

from folio.app.context import AppContext
from folio.infra.logging import get_logger
from folio.web.framework.navigation import (
    PATH_PARAM,
    current_path,
    render_admin_sidebar,
    render_footer,
    render_public_navbar,
    route_title,
)
from folio.web.framework.page import PageSpec, init_page
from folio.web.framework.state import get_app_context
from folio.web.pages_impl import (
    about,
    contact,
    dashboard,
    home,
    login,
    post_manager,
    posts,
    profile_editor,
    settings_editor,
)
from folio.web.router import Router, build_routes, is_admin_path
from folio.web.styles import load_theme_style, render_sidebar_header

logger = get_logger(__name__)

LAST_ROUTE_KEY = "folio_last_route"

SCREENS: Dict[str, Callable[[AppContext], None]] = {
    "home": home.render,
    "about": about.render,
    "contact": contact.render,
    "posts": posts.render,
    "login": login.render,
    "dashboard": dashboard.render,
    "profile": profile_editor.render,
    "settings": settings_editor.render,
    "post_manager": post_manager.render,
}


def run() -> None:
    ctx = get_app_context()
    router = Router(build_routes(ctx.config.enable_post_manager))

    requested = current_path()
    resolution = router.resolve(requested, ctx.session.is_authenticated)
    if resolution.is_redirect:
        logger.debug(f"重定向 {requested} -> {resolution.redirect_to}")
        st.query_params[PATH_PARAM] = resolution.redirect_to
        st.rerun()

    route = resolution.route
    entered = st.session_state.get(LAST_ROUTE_KEY) != route.name
    st.session_state[LAST_ROUTE_KEY] = route.name
    if entered and route.name == "login":
        # the login error belongs to one visit of the login screen
        ctx.session.clear_failure()
    settings = ctx.store.read().settings

    # MUST be the first Streamlit command that renders
    init_page(
        PageSpec(
            title=route_title(route, settings.seo_title),
            icon="🎓",
            sidebar_state="expanded" if route.guarded else "collapsed",
        )
    )
    load_theme_style(settings)

    if route.guarded:
        render_sidebar_header(ctx.store.read().profile.name, "Admin")
        render_admin_sidebar(ctx, router, route.path)
        SCREENS[route.name](ctx)
    elif is_admin_path(route.path):
        SCREENS[route.name](ctx)
    else:
        render_public_navbar(ctx, router, route.path)
        SCREENS[route.name](ctx)
        render_footer(ctx, router)
