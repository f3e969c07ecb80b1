# sales/tests/test_orders.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from sales.models import Customer, Order
from sales.services.order_lifecycle import (
    InvalidOrderTransitionError,
    can_transition,
    change_status,
)

User = get_user_model()


def make_order(order_id="KT-20260310-1200-AAAA", *, customer=None, total="23000", status=Order.STATUS_PENDING):
    return Order.objects.create(
        id=order_id,
        customer=customer,
        customer_name=customer.name if customer else "Ana Pérez",
        customer_phone=customer.phone if customer else "+56912345678",
        address="Av. Providencia 1234",
        commune="Providencia",
        status=status,
        subtotal=Decimal(total),
        total=Decimal(total),
    )


class OrderLifecycleTests(TestCase):
    """
    GUARANTEES:
    - Orders move forward one step at a time
    - Any non-terminal order can be cancelled
    - Delivered and cancelled are terminal
    """

    def test_forward_chain(self):
        order = make_order()
        for target in (
            Order.STATUS_CONFIRMED,
            Order.STATUS_PREPARING,
            Order.STATUS_OUT_FOR_DELIVERY,
            Order.STATUS_DELIVERED,
        ):
            order = change_status(order=order, target_status=target)

        order.refresh_from_db()
        self.assertEqual(order.status, Order.STATUS_DELIVERED)

    def test_skipping_a_step_is_rejected(self):
        order = make_order()
        with self.assertRaises(InvalidOrderTransitionError):
            change_status(order=order, target_status=Order.STATUS_DELIVERED)

        order.refresh_from_db()
        self.assertEqual(order.status, Order.STATUS_PENDING)

    def test_cancel_from_non_terminal(self):
        self.assertTrue(can_transition(from_status=Order.STATUS_PREPARING, to_status=Order.STATUS_CANCELLED))
        self.assertFalse(can_transition(from_status=Order.STATUS_DELIVERED, to_status=Order.STATUS_CANCELLED))
        self.assertFalse(can_transition(from_status=Order.STATUS_CANCELLED, to_status=Order.STATUS_PENDING))


class OrderApiTests(TestCase):
    """
    GUARANTEES:
    - orders.manage is required
    - Orders are addressable by their readable id
    - Invalid transitions answer 409
    """

    def setUp(self):
        self.client = APIClient()
        self.staff = User.objects.create_user(email="staff@example.com", password="pass", role="staff")
        self.order = make_order()

    def test_anonymous_rejected(self):
        self.assertEqual(self.client.get("/api/sales/orders/").status_code, 401)

    def test_list_and_search(self):
        make_order("KT-20260310-1300-BBBB")
        self.client.force_authenticate(user=self.staff)

        res = self.client.get("/api/sales/orders/", {"q": "BBBB"})

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["count"], 1)
        self.assertEqual(res.data["results"][0]["id"], "KT-20260310-1300-BBBB")

    def test_change_status(self):
        self.client.force_authenticate(user=self.staff)
        url = f"/api/sales/orders/{self.order.id}/status/"

        ok = self.client.post(url, {"status": "confirmed"}, format="json")
        conflict = self.client.post(url, {"status": "delivered"}, format="json")

        self.assertEqual(ok.status_code, 200)
        self.assertEqual(ok.data["status"], "confirmed")
        self.assertEqual(conflict.status_code, 409)

    def test_unknown_status_is_400(self):
        self.client.force_authenticate(user=self.staff)
        res = self.client.post(f"/api/sales/orders/{self.order.id}/status/", {"status": "lost"}, format="json")
        self.assertEqual(res.status_code, 400)


class CustomerApiTests(TestCase):
    """
    GUARANTEES:
    - Stats count non-cancelled orders only
    - Staff can read customers but not edit them
    - Phones are unique after whitespace normalization
    """

    def setUp(self):
        self.client = APIClient()
        self.staff = User.objects.create_user(email="staff@example.com", password="pass", role="staff")
        self.manager = User.objects.create_user(email="manager@example.com", password="pass", role="manager")

        self.customer = Customer.objects.create(name="Ana Pérez", phone="+56912345678")
        make_order("KT-20260310-1200-AAAA", customer=self.customer, total="23000")
        make_order("KT-20260311-1200-BBBB", customer=self.customer, total="15000")
        make_order(
            "KT-20260312-1200-CCCC",
            customer=self.customer,
            total="99000",
            status=Order.STATUS_CANCELLED,
        )

    def test_stats(self):
        self.client.force_authenticate(user=self.staff)
        res = self.client.get(f"/api/sales/customers/{self.customer.id}/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["total_orders"], 2)
        self.assertEqual(res.data["total_spent"], "38000.00")
        self.assertIsNotNone(res.data["last_order_at"])

    def test_customer_orders(self):
        self.client.force_authenticate(user=self.staff)
        res = self.client.get(f"/api/sales/customers/{self.customer.id}/orders/")
        self.assertEqual(res.status_code, 200)

    def test_staff_cannot_edit(self):
        self.client.force_authenticate(user=self.staff)
        res = self.client.patch(f"/api/sales/customers/{self.customer.id}/", {"name": "Ana"}, format="json")
        self.assertEqual(res.status_code, 403)

    def test_duplicate_phone_rejected(self):
        self.client.force_authenticate(user=self.manager)
        res = self.client.post(
            "/api/sales/customers/",
            {"name": "Otra Ana", "phone": "+569 1234 5678"},
            format="json",
        )
        self.assertEqual(res.status_code, 400)
