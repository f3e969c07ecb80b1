# sales/tests/test_analytics.py

from datetime import date
from decimal import Decimal
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.db.models import QuerySet
from django.test import TestCase
from rest_framework.test import APIClient

from products.models import Category, Product
from sales.models import Customer, DailyAnalytics, Order, OrderItem
from sales.services import analytics
from sales.services.messaging import build_whatsapp_url, format_clp

User = get_user_model()


class AnalyticsTests(TestCase):
    """
    GUARANTEES:
    - Best sellers sum quantities and ignore cancelled orders
    - Category shares are percentages of category revenue
    - Daily rollups accumulate per day
    """

    def setUp(self):
        self.vacuno = Category.objects.create(name="Vacuno", display_order=1)
        self.cerdo = Category.objects.create(name="Cerdo", display_order=2)
        self.lomo = Product.objects.create(category=self.vacuno, name="Lomo Liso", price=Decimal("10000"))
        self.chuleta = Product.objects.create(category=self.cerdo, name="Chuleta", price=Decimal("5000"))

        self.customer = Customer.objects.create(name="Ana", phone="+56912345678")
        active = self._order("KT-20260310-1200-AAAA", Order.STATUS_PENDING)
        cancelled = self._order("KT-20260310-1201-BBBB", Order.STATUS_CANCELLED)

        self._item(active, self.lomo, "3")
        self._item(active, self.chuleta, "2")
        self._item(cancelled, self.chuleta, "10")

    def _order(self, order_id, status):
        return Order.objects.create(
            id=order_id,
            customer=self.customer,
            customer_name="Ana",
            customer_phone="+56912345678",
            address="Calle 1",
            commune="Santiago",
            status=status,
        )

    def _item(self, order, product, qty):
        qty = Decimal(qty)
        return OrderItem.objects.create(
            order=order,
            product=product,
            product_name=product.name,
            unit_type=product.unit_type,
            quantity=qty,
            price=product.price,
            line_total=product.price * qty,
        )

    def test_top_products(self):
        rows = analytics.top_products(limit=5)

        self.assertEqual([r["name"] for r in rows], ["Lomo Liso", "Chuleta"])
        self.assertEqual(rows[0]["quantity"], "3.000")
        self.assertEqual(rows[1]["quantity"], "2.000")

    def test_sales_by_category(self):
        rows = analytics.sales_by_category()

        self.assertEqual(rows[0]["category"], "Vacuno")
        self.assertEqual(rows[0]["amount"], "30000.00")
        self.assertEqual(rows[0]["percentage"], 75)
        self.assertEqual(rows[1]["percentage"], 25)

    def test_frequent_customers_ignore_cancelled(self):
        self.assertEqual(analytics.frequent_customers(), [{"id": str(self.customer.id), "name": "Ana", "orders": 1}])

    def test_record_daily_order(self):
        day = date(2026, 3, 10)
        analytics.record_daily_order(total=Decimal("23000"), new_customer=True, day=day)
        row = analytics.record_daily_order(total=Decimal("15000"), day=day)

        self.assertEqual(row.total_orders, 2)
        self.assertEqual(row.new_customers, 1)
        self.assertEqual(row.total_sales, Decimal("38000.00"))
        self.assertEqual(DailyAnalytics.objects.count(), 1)

    def test_record_daily_order_when_day_row_appears_concurrently(self):
        day = date(2026, 3, 11)
        DailyAnalytics.objects.create(date=day)
        real_get = QuerySet.get
        missed = []

        def first_lookup_misses(qs, *args, **kwargs):
            if qs.model is DailyAnalytics and not missed:
                missed.append(True)
                raise DailyAnalytics.DoesNotExist
            return real_get(qs, *args, **kwargs)

        with patch.object(QuerySet, "get", autospec=True, side_effect=first_lookup_misses):
            row = analytics.record_daily_order(total=Decimal("12000"), day=day)

        self.assertEqual(row.total_orders, 1)
        self.assertEqual(row.total_sales, Decimal("12000.00"))
        self.assertEqual(DailyAnalytics.objects.count(), 1)

    def test_dashboard_requires_reports_capability(self):
        client = APIClient()
        staff = User.objects.create_user(email="staff@example.com", password="pass", role="staff")
        manager = User.objects.create_user(email="manager@example.com", password="pass", role="manager")

        client.force_authenticate(user=staff)
        self.assertEqual(client.get("/api/sales/analytics/").status_code, 403)

        client.force_authenticate(user=manager)
        res = client.get("/api/sales/analytics/", {"limit": "1"})
        self.assertEqual(res.status_code, 200)
        self.assertEqual(len(res.data["top_products"]), 1)
        self.assertIn("sales_by_category", res.data)


class MessagingTests(TestCase):
    def test_format_clp(self):
        self.assertEqual(format_clp(Decimal("20000")), "$20.000")
        self.assertEqual(format_clp(Decimal("1234567.5")), "$1.234.568")

    def test_whatsapp_url(self):
        url = build_whatsapp_url("+56 9 1234 5678", "Hola & chao")
        self.assertEqual(url, "https://wa.me/56912345678?text=Hola%20%26%20chao")
