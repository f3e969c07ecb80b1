from .history import HistoryEntry, NavigationHistory
from .router import (
    ADMIN_SCREENS,
    DEFAULT_ADMIN_SCREEN,
    VIEW_ADMIN,
    VIEW_ADMIN_LOGIN,
    VIEW_CART,
    VIEW_CATEGORY,
    VIEW_CHECKOUT,
    VIEW_HOME,
    RouteState,
    Router,
    default_router,
)

__all__ = [
    "ADMIN_SCREENS",
    "DEFAULT_ADMIN_SCREEN",
    "HistoryEntry",
    "NavigationHistory",
    "RouteState",
    "Router",
    "VIEW_ADMIN",
    "VIEW_ADMIN_LOGIN",
    "VIEW_CART",
    "VIEW_CATEGORY",
    "VIEW_CHECKOUT",
    "VIEW_HOME",
    "default_router",
]
