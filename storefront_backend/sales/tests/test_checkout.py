# sales/tests/test_checkout.py

import re
from decimal import Decimal
from unittest.mock import patch

from django.core.cache import cache
from django.db import DatabaseError
from django.test import TestCase
from rest_framework.test import APIClient

from products.models import Product
from promotions.models import Coupon, CouponUsage
from sales.models import Customer, DailyAnalytics, Order, OrderItem
from sales.services.checkout_orchestrator import customer_code, generate_order_id
from siteconfig.models import SystemConfiguration

ORDER_ID_RE = re.compile(r"^KT-\d{8}-\d{4}-[0-9A-Z]{4}$")

CONTACT = {
    "name": "Ana Pérez",
    "phone": "+56 9 1234 5678",
    "email": "ana@example.com",
    "address": "Av. Providencia 1234",
    "commune": "Santiago",
}


class CheckoutHelpersTests(TestCase):
    def test_customer_code(self):
        self.assertEqual(customer_code("Ana Pérez", "+56 9 1234 5678"), "ANA5678")
        self.assertEqual(customer_code("  jo ", "912"), "JO912")

    def test_order_id_format(self):
        self.assertRegex(generate_order_id(), ORDER_ID_RE)
        self.assertTrue(generate_order_id(prefix="XX").startswith("XX-"))


class CheckoutFlowTests(TestCase):
    """
    End-to-end storefront checkout through the public API.

    GUARANTEES:
    - Totals are recomputed server-side (coupon, delivery fee, minimum order)
    - Validation errors come back together and nothing is written
    - A successful order empties the cart and returns a WhatsApp link
    - A storage failure answers 503 and keeps the cart for a retry
    - Coupon usage and daily analytics failures never undo a placed order
    - Customer lookup exposes only name and commune
    """

    def setUp(self):
        cache.clear()
        self.client = APIClient()

        self.lomo = Product.objects.create(name="Lomo Liso", price=Decimal("10000"), stock=Decimal("50"))
        self.chuleta = Product.objects.create(name="Chuleta", price=Decimal("5000"), stock=Decimal("50"))

    def _fill_cart(self):
        r1 = self.client.post(
            "/api/cart/items/",
            {"product_id": str(self.lomo.id), "quantity": "1.0"},
            format="json",
        )
        r2 = self.client.post(
            "/api/cart/items/",
            {"product_id": str(self.chuleta.id), "quantity": "2.0"},
            format="json",
        )
        self.assertEqual(r1.status_code, 200)
        self.assertEqual(r2.status_code, 200)
        self.assertEqual(r2.data["subtotal"], "20000.00")

    def _checkout(self, **overrides):
        data = dict(CONTACT)
        data.update(overrides)
        return self.client.post("/api/public/checkout/", data, format="json")

    def test_order_without_coupon(self):
        self._fill_cart()

        res = self._checkout()

        self.assertEqual(res.status_code, 201, res.data)
        self.assertRegex(res.data["order_id"], ORDER_ID_RE)
        self.assertEqual(res.data["subtotal"], "20000.00")
        self.assertEqual(res.data["delivery_fee"], "3000.00")
        self.assertEqual(res.data["total"], "23000.00")
        self.assertEqual(res.data["customer_code"], "ANA5678")
        self.assertTrue(res.data["whatsapp_url"].startswith("https://wa.me/56912345678?text="))
        self.assertEqual(len(res.data["items"]), 2)

        order = Order.objects.get(pk=res.data["order_id"])
        self.assertEqual(order.status, Order.STATUS_PENDING)
        self.assertEqual(order.customer_phone, "+56912345678")
        self.assertEqual(OrderItem.objects.filter(order=order).count(), 2)
        self.assertEqual(Customer.objects.get().phone, "+56912345678")

        daily = DailyAnalytics.objects.get()
        self.assertEqual(daily.total_orders, 1)
        self.assertEqual(daily.new_customers, 1)
        self.assertEqual(daily.total_sales, Decimal("23000.00"))

        cart = self.client.get("/api/cart/")
        self.assertEqual(cart.data["items"], [])

    def test_order_with_percentage_coupon(self):
        coupon = Coupon.objects.create(code="ASADO10", name="Asado", value=Decimal("10"))
        self._fill_cart()

        quote = self.client.post(
            "/api/public/checkout/quote/",
            {"commune": "Santiago", "coupon_code": "asado10"},
            format="json",
        )
        self.assertEqual(quote.status_code, 200)
        self.assertEqual(quote.data["total"], "21000.00")

        res = self._checkout(coupon_code="asado10")

        self.assertEqual(res.status_code, 201, res.data)
        self.assertEqual(res.data["discount"], "2000.00")
        self.assertEqual(res.data["total"], "21000.00")
        self.assertEqual(res.data["coupon_code"], "ASADO10")

        coupon.refresh_from_db()
        self.assertEqual(coupon.used_count, 1)
        self.assertEqual(CouponUsage.objects.get().order_id, res.data["order_id"])

    def test_total_equal_to_minimum_is_accepted(self):
        SystemConfiguration.objects.create(key="shipping_cost", value="0")
        self._fill_cart()

        res = self._checkout()

        self.assertEqual(res.status_code, 201, res.data)
        self.assertEqual(res.data["total"], "20000.00")

    def test_below_minimum_is_rejected(self):
        SystemConfiguration.objects.create(key="minimum_order", value="25000")
        self._fill_cart()

        res = self._checkout()

        self.assertEqual(res.status_code, 400)
        self.assertIn("total", res.data)
        self.assertEqual(res.data["total"], ["El pedido mínimo es $25.000"])
        self.assertFalse(Order.objects.exists())
        self.assertEqual(len(self.client.get("/api/cart/").data["items"]), 2)

    def test_missing_fields_reported_together(self):
        self._fill_cart()

        res = self._checkout(address="", name="")

        self.assertEqual(res.status_code, 400)
        self.assertIn("address", res.data)
        self.assertIn("name", res.data)
        self.assertFalse(Order.objects.exists())
        self.assertFalse(Customer.objects.exists())

    def test_empty_cart(self):
        res = self._checkout()

        self.assertEqual(res.status_code, 400)
        self.assertIn("items", res.data)
        self.assertNotIn("total", res.data)

    def test_invalid_coupon_blocks_checkout(self):
        self._fill_cart()

        res = self._checkout(coupon_code="NOEXISTE")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["coupon_code"], ["Cupón no válido"])
        self.assertFalse(Order.objects.exists())

    def test_database_failure_keeps_cart(self):
        self._fill_cart()

        with patch(
            "sales.services.checkout_orchestrator._create_order",
            side_effect=DatabaseError("connection lost"),
        ):
            res = self._checkout()

        self.assertEqual(res.status_code, 503)
        self.assertIn("detail", res.data)
        self.assertFalse(Order.objects.exists())
        self.assertEqual(len(self.client.get("/api/cart/").data["items"]), 2)

    def test_coupon_usage_failure_keeps_order(self):
        coupon = Coupon.objects.create(code="ASADO10", name="Asado", value=Decimal("10"))
        self._fill_cart()

        with patch(
            "sales.services.checkout_orchestrator.record_coupon_usage",
            side_effect=DatabaseError("usage table locked"),
        ):
            res = self._checkout(coupon_code="ASADO10")

        self.assertEqual(res.status_code, 201, res.data)
        self.assertEqual(res.data["discount"], "2000.00")
        self.assertTrue(Order.objects.filter(pk=res.data["order_id"]).exists())
        self.assertEqual(self.client.get("/api/cart/").data["items"], [])
        coupon.refresh_from_db()
        self.assertEqual(coupon.used_count, 0)

    def test_analytics_failure_keeps_order(self):
        self._fill_cart()

        with patch(
            "sales.services.checkout_orchestrator.record_daily_order",
            side_effect=DatabaseError("analytics unavailable"),
        ):
            res = self._checkout()

        self.assertEqual(res.status_code, 201, res.data)
        self.assertTrue(Order.objects.filter(pk=res.data["order_id"]).exists())
        self.assertEqual(self.client.get("/api/cart/").data["items"], [])
        self.assertFalse(DailyAnalytics.objects.exists())

    def test_returning_customer_is_updated(self):
        Customer.objects.create(name="Ana", phone="+56912345678", address="Antigua 1")
        self._fill_cart()

        res = self._checkout()

        self.assertEqual(res.status_code, 201, res.data)
        customer = Customer.objects.get()
        self.assertEqual(customer.address, "Av. Providencia 1234")
        self.assertEqual(DailyAnalytics.objects.get().new_customers, 0)

    def test_customer_lookup(self):
        Customer.objects.create(name="Ana", phone="+56912345678", commune="Ñuñoa")

        found = self.client.get("/api/public/customers/lookup/", {"phone": "+56 9 1234 5678"})
        missing = self.client.get("/api/public/customers/lookup/", {"phone": "+56900000000"})

        self.assertEqual(found.status_code, 200)
        self.assertEqual(found.data["commune"], "Ñuñoa")
        self.assertEqual(set(found.data), {"name", "commune"})
        self.assertEqual(missing.status_code, 404)
