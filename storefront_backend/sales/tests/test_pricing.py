# sales/tests/test_pricing.py

from decimal import Decimal

from django.test import SimpleTestCase, TestCase

from sales.services.pricing import (
    DISCOUNT_FIXED,
    DISCOUNT_PERCENTAGE,
    AppliedCoupon,
    compute_discount,
    compute_subtotal,
    quote_order,
    resolve_delivery,
)
from siteconfig.store_settings import StoreSettings
from store.models import DeliveryZone

LINES = [
    {"price": Decimal("10000"), "quantity": Decimal("1.0")},
    {"price": Decimal("5000"), "quantity": Decimal("2.0")},
]


class SubtotalDiscountTests(SimpleTestCase):
    """
    GUARANTEES:
    - Subtotal does not depend on line order
    - Fractional quantities are not rounded before summing
    - Percentage discounts round half up to whole units
    """

    def test_subtotal(self):
        self.assertEqual(compute_subtotal(LINES), Decimal("20000"))
        self.assertEqual(compute_subtotal(list(reversed(LINES))), Decimal("20000"))

    def test_fractional_quantity(self):
        lines = [{"price": Decimal("8990"), "quantity": Decimal("0.750")}]
        self.assertEqual(compute_subtotal(lines), Decimal("6742.5"))

    def test_percentage_discount(self):
        coupon = AppliedCoupon(code="ASADO10", discount_type=DISCOUNT_PERCENTAGE, value=Decimal("10"))
        self.assertEqual(compute_discount(Decimal("20000"), coupon), Decimal("2000.00"))
        self.assertEqual(compute_discount(Decimal("6742.5"), coupon), Decimal("674.00"))

    def test_fixed_discount(self):
        coupon = AppliedCoupon(code="PARRILLA", discount_type=DISCOUNT_FIXED, value=Decimal("3000"))
        self.assertEqual(compute_discount(Decimal("20000"), coupon), Decimal("3000.00"))

    def test_no_coupon(self):
        self.assertEqual(compute_discount(Decimal("20000"), None), Decimal("0.00"))


class DeliveryPrecedenceTests(TestCase):
    """
    GUARANTEES:
    - Free zone beats configured communes, which beat zone price, which beats flat cost
    - Inactive zones fall back to the flat shipping cost
    - delivery_available follows the configured commune list
    """

    def setUp(self):
        self.settings = StoreSettings(
            shipping_cost=Decimal("3000"),
            free_delivery_communes=("Vitacura",),
            available_communes=("Providencia", "Vitacura", "Santiago"),
            delivery_time="24-48 horas",
        )
        DeliveryZone.objects.create(name="Providencia", delivery_price=Decimal("2500"), estimated_time="2-3 horas")
        DeliveryZone.objects.create(name="Las Condes", delivery_price=Decimal("4000"), is_free_delivery=True)
        DeliveryZone.objects.create(name="Vitacura", delivery_price=Decimal("5000"))
        DeliveryZone.objects.create(name="Maipú", delivery_price=Decimal("1000"), is_active=False)

    def test_free_zone(self):
        quote = resolve_delivery("las condes", self.settings)
        self.assertEqual(quote.fee, Decimal("0.00"))
        self.assertEqual(quote.source, "free_zone")

    def test_free_commune_beats_zone_price(self):
        quote = resolve_delivery("Vitacura", self.settings)
        self.assertEqual(quote.fee, Decimal("0.00"))
        self.assertEqual(quote.source, "free_config")

    def test_zone_price(self):
        quote = resolve_delivery("Providencia", self.settings)
        self.assertEqual(quote.fee, Decimal("2500.00"))
        self.assertEqual(quote.estimated_time, "2-3 horas")

    def test_flat_cost_for_unknown_commune(self):
        quote = resolve_delivery("Santiago", self.settings)
        self.assertEqual(quote.fee, Decimal("3000.00"))
        self.assertEqual(quote.source, "flat")
        self.assertEqual(quote.estimated_time, "24-48 horas")

    def test_inactive_zone_uses_flat_cost(self):
        self.assertEqual(resolve_delivery("Maipú", StoreSettings()).fee, Decimal("3000.00"))

    def test_delivery_available(self):
        self.assertTrue(resolve_delivery("Santiago", self.settings).delivery_available)
        self.assertFalse(resolve_delivery("Puente Alto", self.settings).delivery_available)
        self.assertTrue(resolve_delivery("Puente Alto", StoreSettings()).delivery_available)

    def test_quote_order_totals(self):
        coupon = AppliedCoupon(code="ASADO10", discount_type=DISCOUNT_PERCENTAGE, value=Decimal("10"))
        quote = quote_order(lines=LINES, commune="Santiago", store_settings=self.settings, coupon=coupon)

        self.assertEqual(quote.subtotal, Decimal("20000.00"))
        self.assertEqual(quote.discount, Decimal("2000.00"))
        self.assertEqual(quote.delivery_fee, Decimal("3000.00"))
        self.assertEqual(quote.total, Decimal("21000.00"))
        self.assertTrue(quote.meets_minimum)
        self.assertEqual(quote.as_payload()["missing_for_minimum"], "0.00")

    def test_minimum_order(self):
        settings = StoreSettings(minimum_order=Decimal("25000"))
        quote = quote_order(lines=LINES, commune="Santiago", store_settings=settings)

        self.assertEqual(quote.total, Decimal("23000.00"))
        self.assertFalse(quote.meets_minimum)
        self.assertEqual(quote.as_payload()["missing_for_minimum"], "2000.00")
