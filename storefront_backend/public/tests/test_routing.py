# public/tests/test_routing.py

from django.test import SimpleTestCase

from public.routing import NavigationHistory, RouteState, default_router
from public.regions import RegionSupervisor

CATEGORY_ID = "5d1c3f4e-2b7a-4c3e-9f51-0a8b6c2d7e10"


class RouterTests(SimpleTestCase):
    """
    GUARANTEES:
    - Every view has one canonical URL and resolve(reverse(state)) == state
    - Unknown paths and /category without an id resolve to home
    - Unknown admin screens fall back to analytics
    """

    def test_round_trip(self):
        states = [
            RouteState.home(),
            RouteState.category(CATEGORY_ID),
            RouteState("cart"),
            RouteState("checkout"),
            RouteState("admin-login"),
            RouteState.admin("coupons"),
        ]
        for state in states:
            with self.subTest(view=state.view):
                self.assertEqual(default_router.resolve(default_router.reverse(state)), state)

    def test_category_url(self):
        self.assertEqual(default_router.reverse(RouteState.category(CATEGORY_ID)), f"/category?id={CATEGORY_ID}")

    def test_unknown_path_is_home(self):
        self.assertEqual(default_router.resolve("/no-existe"), RouteState.home())

    def test_category_without_id_is_home(self):
        self.assertEqual(default_router.resolve("/category"), RouteState.home())
        self.assertEqual(default_router.resolve("/category?id="), RouteState.home())

    def test_admin_defaults(self):
        self.assertEqual(default_router.resolve("/admin").admin_screen, "analytics")
        self.assertEqual(default_router.resolve("/admin?view=hack").admin_screen, "analytics")
        self.assertEqual(default_router.reverse(RouteState.admin()), "/admin?view=analytics")

    def test_trailing_slash(self):
        self.assertEqual(default_router.resolve("/cart/"), RouteState("cart"))
        self.assertEqual(default_router.canonical("/checkout/"), "/checkout")


class NavigationHistoryTests(SimpleTestCase):
    """
    GUARANTEES:
    - Navigating to the current URL does not push a duplicate entry
    - back/forward restore the entry including its cached data
    - pop() re-derives the state from the URL
    """

    def test_no_duplicate_push(self):
        history = NavigationHistory("/")
        history.navigate(RouteState.home())
        history.navigate_url("/cart")
        history.navigate_url("/cart/")

        self.assertEqual(len(history), 2)

    def test_back_forward_keep_data(self):
        history = NavigationHistory("/")
        history.navigate(RouteState.category(CATEGORY_ID))
        history.remember("products", ["Lomo Liso"])
        history.navigate_url("/cart")

        back = history.back()
        self.assertEqual(back.state, RouteState.category(CATEGORY_ID))
        self.assertEqual(history.recall("products"), ["Lomo Liso"])

        self.assertEqual(history.forward().url, "/cart")
        self.assertFalse(history.can_go_forward)

    def test_navigate_after_back_drops_forward_entries(self):
        history = NavigationHistory("/")
        history.navigate_url("/cart")
        history.back()
        history.navigate_url("/checkout")

        self.assertEqual(len(history), 2)
        self.assertFalse(history.can_go_forward)

    def test_pop_matches_neighbour(self):
        history = NavigationHistory("/")
        history.navigate_url("/cart")

        entry = history.pop("/")

        self.assertEqual(entry.state, RouteState.home())
        self.assertTrue(history.can_go_forward)

    def test_pop_unknown_url_replaces_current(self):
        history = NavigationHistory("/cart")

        entry = history.pop("/admin?view=orders")

        self.assertEqual(entry.state, RouteState.admin("orders"))
        self.assertEqual(len(history), 1)

    def test_initial_url_is_canonicalised(self):
        self.assertEqual(NavigationHistory("/whatever").url, "/")


class RegionSupervisorTests(SimpleTestCase):
    """
    GUARANTEES:
    - A failing region reports an error while its siblings still render
    """

    def test_failure_is_isolated(self):
        def broken():
            raise RuntimeError("boom")

        out = RegionSupervisor(fallback_message="no disponible").render(
            {"hero": lambda: {"title": "Carnes"}, "offers": broken}
        )

        self.assertEqual(out["hero"], {"ok": True, "data": {"title": "Carnes"}})
        self.assertEqual(out["offers"], {"ok": False, "error": "no disponible"})
