# public/tests/test_public_api.py

from datetime import timedelta
from decimal import Decimal
from unittest.mock import patch

from django.core.cache import cache
from django.test import TestCase
from django.utils import timezone
from rest_framework.test import APIClient

from products.models import Category, Product
from promotions.models import DailyOffer
from siteconfig.models import SystemConfiguration
from store.models import DeliveryZone, StoreLocation


class PublicCatalogTests(TestCase):
    """
    Storefront read endpoints (AllowAny).

    GUARANTEES:
    - Only visible categories and products are exposed
    - Hidden categories answer 404
    - Private settings (admin_email) never leave the back-office
    """

    def setUp(self):
        cache.clear()
        self.client = APIClient()

        self.vacuno = Category.objects.create(name="Vacuno", display_order=1)
        self.cerdo = Category.objects.create(name="Cerdo", display_order=2)
        self.hidden = Category.objects.create(name="Oculta", display_order=0, is_visible=False)

        self.lomo = Product.objects.create(category=self.vacuno, name="Lomo Liso", price=Decimal("10000"), stock=Decimal("3"))
        Product.objects.create(category=self.vacuno, name="Asado de Tira", price=Decimal("9000"), is_visible=False)
        Product.objects.create(category=self.cerdo, name="Chuleta", price=Decimal("5000"))

    def test_categories_in_display_order(self):
        res = self.client.get("/api/public/categories/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual([c["name"] for c in res.data], ["Vacuno", "Cerdo"])

    def test_category_detail(self):
        res = self.client.get(f"/api/public/categories/{self.vacuno.id}/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["category"]["name"], "Vacuno")
        self.assertEqual([p["name"] for p in res.data["products"]], ["Lomo Liso"])
        self.assertTrue(res.data["products"][0]["in_stock"])
        self.assertNotIn("stock", res.data["products"][0])

    def test_hidden_category_404(self):
        res = self.client.get(f"/api/public/categories/{self.hidden.id}/")
        self.assertEqual(res.status_code, 404)

    def test_product_search(self):
        res = self.client.get("/api/public/products/", {"q": "chul"})
        self.assertEqual([p["name"] for p in res.data], ["Chuleta"])

    def test_product_filter_requires_uuid(self):
        res = self.client.get("/api/public/products/", {"category": "not-a-uuid"})
        self.assertEqual(res.status_code, 400)

    def test_locations_and_zones_only_active(self):
        StoreLocation.objects.create(name="Centro", address="Matta 100")
        StoreLocation.objects.create(name="Cerrada", address="Sur 1", is_active=False)
        DeliveryZone.objects.create(name="Providencia", delivery_price=Decimal("2500"))
        DeliveryZone.objects.create(name="Maipú", delivery_price=Decimal("2500"), is_active=False)

        locations = self.client.get("/api/public/locations/")
        zones = self.client.get("/api/public/delivery-zones/")

        self.assertEqual([l["name"] for l in locations.data], ["Centro"])
        self.assertEqual([z["name"] for z in zones.data], ["Providencia"])

    def test_config_hides_admin_email(self):
        SystemConfiguration.objects.create(key="admin_email", value="jefe@example.com")
        SystemConfiguration.objects.create(key="shipping_cost", value="3500")

        res = self.client.get("/api/public/config/")

        self.assertEqual(res.status_code, 200)
        self.assertNotIn("admin_email", res.data)
        self.assertEqual(res.data["shipping_cost"], "3500.00")

    def test_offers_listing(self):
        today = timezone.localdate()
        DailyOffer.objects.create(
            product=self.lomo,
            original_price=Decimal("10000"),
            discount_percentage=20,
            start_date=today - timedelta(days=1),
            end_date=today + timedelta(days=1),
        )

        res = self.client.get("/api/public/offers/")

        self.assertEqual(len(res.data), 1)
        self.assertEqual(res.data[0]["price"], "8000.00")
        self.assertEqual(res.data[0]["original_price"], "10000.00")


class PublicHomeTests(TestCase):
    """
    GUARANTEES:
    - Every region is rendered independently
    - Disabled info bar / footer render as null data
    - One failing region does not take down the page
    """

    def setUp(self):
        cache.clear()
        self.client = APIClient()
        Category.objects.create(name="Vacuno")

    def test_all_regions_render(self):
        res = self.client.get("/api/public/home/")

        self.assertEqual(res.status_code, 200)
        for name in ("info_bar", "hero", "offers", "categories", "locations", "footer", "contact"):
            self.assertTrue(res.data[name]["ok"], name)
        self.assertEqual(res.data["categories"]["data"]["items"][0]["name"], "Vacuno")
        self.assertTrue(res.data["contact"]["data"]["whatsapp_url"].startswith("https://wa.me/"))

    def test_disabled_regions(self):
        SystemConfiguration.objects.create(key="footer_active", value="false")
        SystemConfiguration.objects.create(key="info_bar_active", value="false")

        res = self.client.get("/api/public/home/")

        self.assertIsNone(res.data["footer"]["data"])
        self.assertIsNone(res.data["info_bar"]["data"])

    def test_failing_region_is_isolated(self):
        with patch("public.views.home.active_offers", side_effect=RuntimeError("db down")):
            res = self.client.get("/api/public/home/")

        self.assertEqual(res.status_code, 200)
        self.assertFalse(res.data["offers"]["ok"])
        self.assertTrue(res.data["categories"]["ok"])


class StorefrontShellTests(TestCase):
    """
    GUARANTEES:
    - Deep links resolve to the same view after a reload
    - The route endpoint answers with the canonical URL
    """

    def setUp(self):
        cache.clear()
        self.client = APIClient()
        self.category = Category.objects.create(name="Vacuno")

    def test_category_deep_link(self):
        res = self.client.get(f"/category?id={self.category.id}")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["route"]["view"], "category")
        self.assertEqual(res.data["route"]["category_id"], str(self.category.id))
        self.assertNotIn("admin_email", res.data["config"])

    def test_admin_deep_link_defaults_screen(self):
        res = self.client.get("/admin")
        self.assertEqual(res.data["route"]["url"], "/admin?view=analytics")

    def test_route_endpoint(self):
        res = self.client.get("/api/public/route/", {"url": "/category"})

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["view"], "home")
        self.assertEqual(res.data["url"], "/")
