"""
Path router for the single-page app.

Paths come from the ``path`` query parameter. The router is pure: given a path
and the login flag it returns either the route to render or where to redirect.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

ADMIN_ROOT = "/admin"
DASHBOARD_PATH = "/admin/dashboard"
HOME_PATH = "/"


@dataclass(frozen=True)
class Route:
    path: str
    name: str
    label: str
    guarded: bool = False


@dataclass(frozen=True)
class Resolution:
    route: Optional[Route] = None
    redirect_to: Optional[str] = None

    @property
    def is_redirect(self) -> bool:
        return self.redirect_to is not None


PUBLIC_ROUTES = (
    Route("/", "home", "Home"),
    Route("/about", "about", "About"),
    Route("/contact", "contact", "Contact"),
)
LOGIN_ROUTE = Route(ADMIN_ROOT, "login", "Admin Login")
ADMIN_ROUTES = (
    Route(DASHBOARD_PATH, "dashboard", "Overview", guarded=True),
    Route("/admin/profile", "profile", "Profile & Bio", guarded=True),
    Route("/admin/settings", "settings", "Settings", guarded=True),
)
# post screens exist but stay unrouted unless explicitly enabled
POSTS_ROUTE = Route("/posts", "posts", "Posts")
POST_MANAGER_ROUTE = Route("/admin/posts", "post_manager", "Posts", guarded=True)


def normalize_path(path: Optional[str]) -> str:
    p = (path or "").strip().split("?", 1)[0].split("#", 1)[0]
    if not p.startswith("/"):
        p = "/" + p
    while "//" in p:
        p = p.replace("//", "/")
    if len(p) > 1:
        p = p.rstrip("/")
    return p or HOME_PATH


def is_admin_path(path: str) -> bool:
    return path == ADMIN_ROOT or path.startswith(ADMIN_ROOT + "/")


def build_routes(enable_post_manager: bool = False) -> List[Route]:
    routes = [*PUBLIC_ROUTES, LOGIN_ROUTE, *ADMIN_ROUTES]
    if enable_post_manager:
        routes.insert(len(PUBLIC_ROUTES), POSTS_ROUTE)
        routes.append(POST_MANAGER_ROUTE)
    return routes


class Router:
    def __init__(self, routes: Iterable[Route]) -> None:
        self._routes: Dict[str, Route] = {r.path: r for r in routes}

    @property
    def routes(self) -> List[Route]:
        return list(self._routes.values())

    def public_nav(self) -> List[Route]:
        return [r for r in self._routes.values() if not is_admin_path(r.path)]

    def admin_nav(self) -> List[Route]:
        return [r for r in self._routes.values() if r.guarded]

    def resolve(self, path: Optional[str], authenticated: bool) -> Resolution:
        p = normalize_path(path)

        if p == ADMIN_ROOT:
            if authenticated:
                return Resolution(redirect_to=DASHBOARD_PATH)
            return Resolution(route=self._routes[ADMIN_ROOT])

        if is_admin_path(p):
            # whole subtree is guarded, known or not
            if not authenticated:
                return Resolution(redirect_to=ADMIN_ROOT)
            route = self._routes.get(p)
            if route is None:
                return Resolution(redirect_to=DASHBOARD_PATH)
            return Resolution(route=route)

        route = self._routes.get(p)
        if route is None:
            return Resolution(redirect_to=HOME_PATH)
        return Resolution(route=route)
