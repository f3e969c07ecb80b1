# products/tests/test_permissions.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.test import TestCase
from rest_framework.test import APIClient

from products.models import Category, Product

User = get_user_model()


class ProductApiPermissionTests(TestCase):
    """
    Permission & access tests.

    GUARANTEES:
    - Anonymous users cannot reach the back-office catalog
    - Staff can read and adjust stock but cannot edit the catalog
    - Managers can edit the catalog and toggle visibility
    """

    def setUp(self):
        cache.clear()
        self.client = APIClient()

        self.staff = User.objects.create_user(email="staff@example.com", password="pass", role="staff")
        self.manager = User.objects.create_user(email="manager@example.com", password="pass", role="manager")

        self.category = Category.objects.create(name="Cerdo", display_order=5)
        self.product = Product.objects.create(
            category=self.category,
            name="Lomo de Cerdo",
            price=Decimal("8990"),
            stock=Decimal("20"),
        )

    def test_anonymous_user_is_rejected(self):
        res = self.client.get("/api/products/products/")
        self.assertEqual(res.status_code, 401)

    def test_staff_can_list_products(self):
        self.client.force_authenticate(user=self.staff)
        res = self.client.get("/api/products/products/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["count"], 1)

    def test_staff_cannot_create_product(self):
        self.client.force_authenticate(user=self.staff)
        res = self.client.post(
            "/api/products/products/",
            {"name": "Costillas", "price": "7990.00", "category": str(self.category.id)},
            format="json",
        )
        self.assertEqual(res.status_code, 403)

    def test_staff_can_adjust_stock(self):
        self.client.force_authenticate(user=self.staff)
        res = self.client.post(
            f"/api/products/products/{self.product.id}/stock/adjust/",
            {"quantity_delta": "-2.5", "note": "merma"},
            format="json",
        )

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["stock"], "17.500")

    def test_stock_adjust_below_zero_is_400(self):
        self.client.force_authenticate(user=self.staff)
        res = self.client.post(
            f"/api/products/products/{self.product.id}/stock/adjust/",
            {"quantity_delta": "-25"},
            format="json",
        )
        self.assertEqual(res.status_code, 400)

    def test_manager_creates_product_with_read_only_stock(self):
        self.client.force_authenticate(user=self.manager)
        res = self.client.post(
            "/api/products/products/",
            {
                "name": "Costillas de Cerdo",
                "price": "7990.00",
                "category": str(self.category.id),
                "stock": "99",
            },
            format="json",
        )

        self.assertEqual(res.status_code, 201)
        self.assertEqual(Decimal(res.data["stock"]), Decimal("0"))

    def test_visibility_toggle_is_explicit(self):
        self.client.force_authenticate(user=self.manager)
        url = f"/api/products/products/{self.product.id}/visibility/"

        first = self.client.post(url, {"is_visible": False}, format="json")
        again = self.client.post(url, {"is_visible": False}, format="json")

        self.assertEqual(first.status_code, 200)
        self.assertFalse(again.data["is_visible"])

        self.client.post(url, {"is_visible": True}, format="json")
        self.product.refresh_from_db()
        self.assertTrue(self.product.is_visible)

    def test_low_stock_alerts(self):
        Product.objects.filter(pk=self.product.pk).update(stock=Decimal("1"))
        self.client.force_authenticate(user=self.staff)

        res = self.client.get("/api/products/products/alerts/low-stock/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["count"], 1)
