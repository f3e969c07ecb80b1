# public/routing/router.py

"""
STOREFRONT ROUTER

URL contract (kept stable for bookmarks and shared links):

    /                        home
    /category?id=<id>        category
    /cart                    cart
    /checkout                checkout
    /admin-login             admin-login
    /admin?view=<screen>     admin (screen defaults to analytics)

Rules:
- resolve() never fails: unknown paths and /category without an id
  resolve to home; unknown admin screens resolve to the default screen
- reverse() is the canonical form, so resolve(reverse(s)) == s
- a trailing slash is ignored ("/cart/" == "/cart")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlencode, urlsplit

VIEW_HOME = "home"
VIEW_CATEGORY = "category"
VIEW_CART = "cart"
VIEW_CHECKOUT = "checkout"
VIEW_ADMIN_LOGIN = "admin-login"
VIEW_ADMIN = "admin"

ADMIN_SCREENS = (
    "categories",
    "products",
    "inventory",
    "customers",
    "orders",
    "delivery",
    "locations",
    "offers",
    "coupons",
    "configuration",
    "analytics",
)
DEFAULT_ADMIN_SCREEN = "analytics"


@dataclass(frozen=True)
class RouteState:
    view: str = VIEW_HOME
    category_id: Optional[str] = None
    admin_screen: Optional[str] = None

    @classmethod
    def home(cls) -> "RouteState":
        return cls(VIEW_HOME)

    @classmethod
    def category(cls, category_id) -> "RouteState":
        return cls(VIEW_CATEGORY, category_id=str(category_id))

    @classmethod
    def admin(cls, screen: str | None = None) -> "RouteState":
        if screen not in ADMIN_SCREENS:
            screen = DEFAULT_ADMIN_SCREEN
        return cls(VIEW_ADMIN, admin_screen=screen)

    def as_payload(self) -> dict:
        return {
            "view": self.view,
            "category_id": self.category_id,
            "admin_screen": self.admin_screen,
        }


@dataclass(frozen=True)
class Route:
    path: str
    view: str
    query_key: Optional[str] = None


ROUTES = (
    Route("/", VIEW_HOME),
    Route("/category", VIEW_CATEGORY, query_key="id"),
    Route("/cart", VIEW_CART),
    Route("/checkout", VIEW_CHECKOUT),
    Route("/admin-login", VIEW_ADMIN_LOGIN),
    Route("/admin", VIEW_ADMIN, query_key="view"),
)


def _normalize_path(path: str) -> str:
    path = path or "/"
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


class Router:
    def __init__(self, routes=ROUTES):
        self.routes = tuple(routes)
        self._by_path = {r.path: r for r in self.routes}
        self._by_view = {r.view: r for r in self.routes}

    def resolve(self, url: str | None) -> RouteState:
        parts = urlsplit(url or "/")
        route = self._by_path.get(_normalize_path(parts.path))
        if route is None:
            return RouteState.home()

        query = parse_qs(parts.query)
        value = None
        if route.query_key:
            value = (query.get(route.query_key) or [""])[0].strip() or None

        if route.view == VIEW_CATEGORY:
            return RouteState.category(value) if value else RouteState.home()

        if route.view == VIEW_ADMIN:
            return RouteState.admin(value)

        return RouteState(route.view)

    def reverse(self, state: RouteState) -> str:
        if state.view == VIEW_CATEGORY and not state.category_id:
            state = RouteState.home()

        route = self._by_view.get(state.view)
        if route is None:
            return "/"

        if state.view == VIEW_CATEGORY:
            return f"{route.path}?{urlencode({'id': state.category_id})}"

        if state.view == VIEW_ADMIN:
            screen = RouteState.admin(state.admin_screen).admin_screen
            return f"{route.path}?{urlencode({'view': screen})}"

        return route.path

    def canonical(self, url: str | None) -> str:
        return self.reverse(self.resolve(url))


default_router = Router()
