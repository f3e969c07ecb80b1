# products/tests/test_stock.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase

from products.models import Product, StockMovement
from products.services.stock_adjustments import (
    StockAdjustmentError,
    adjust_product_stock,
    set_product_stock,
)

User = get_user_model()


class StockAdjustmentTests(TestCase):
    """
    GUARANTEES:
    - Adjustments move stock and leave one movement row each
    - Stock can never go below zero
    - A physical count equal to the current stock writes nothing
    """

    def setUp(self):
        self.user = User.objects.create_user(email="bodega@example.com", password="pass", role="staff")
        self.product = Product.objects.create(name="Entraña", price=Decimal("12990"), stock=Decimal("10"))

    def test_adjust_in_and_out(self):
        adjust_product_stock(product=self.product, quantity_delta="2.5", user=self.user)
        result = adjust_product_stock(product=self.product, quantity_delta="-1.250", user=self.user)

        self.product.refresh_from_db()
        self.assertEqual(self.product.stock, Decimal("11.250"))
        self.assertEqual(result.movement.movement_type, StockMovement.MovementType.OUT)
        self.assertEqual(result.movement.quantity, Decimal("1.250"))
        self.assertEqual(StockMovement.objects.filter(product=self.product).count(), 2)

    def test_adjust_cannot_go_negative(self):
        with self.assertRaises(StockAdjustmentError):
            adjust_product_stock(product=self.product, quantity_delta="-10.001")

        self.product.refresh_from_db()
        self.assertEqual(self.product.stock, Decimal("10.000"))
        self.assertFalse(StockMovement.objects.exists())

    def test_zero_delta_rejected(self):
        with self.assertRaises(StockAdjustmentError):
            adjust_product_stock(product=self.product, quantity_delta="0")

    def test_set_stock_records_count_movement(self):
        result = set_product_stock(product=self.product, new_stock="4", user=self.user)

        self.assertEqual(result.product.stock, Decimal("4.000"))
        self.assertEqual(result.movement.reason, StockMovement.Reason.COUNT)
        self.assertEqual(result.movement.stock_after, Decimal("4.000"))

    def test_set_same_stock_is_noop(self):
        result = set_product_stock(product=self.product, new_stock="10")

        self.assertIsNone(result.movement)
        self.assertFalse(StockMovement.objects.exists())

    def test_set_negative_stock_rejected(self):
        with self.assertRaises(StockAdjustmentError):
            set_product_stock(product=self.product, new_stock="-1")
