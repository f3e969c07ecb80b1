# promotions/tests/test_offers.py

from datetime import date, timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from products.models import Product
from promotions.models import DailyOffer
from promotions.models.daily_offer import offer_price
from promotions.services.offers import active_offers

User = get_user_model()


class DailyOfferTests(TestCase):
    """
    GUARANTEES:
    - discounted_price is derived from original price and percent on every save
    - Only active offers inside their date window, on visible products, are listed
    """

    def setUp(self):
        self.today = date(2026, 3, 10)
        self.product = Product.objects.create(name="Punta de Ganso", price=Decimal("15990"))

    def _offer(self, **kwargs):
        defaults = {
            "product": self.product,
            "original_price": Decimal("15990"),
            "discount_percentage": 20,
            "start_date": self.today - timedelta(days=1),
            "end_date": self.today + timedelta(days=1),
        }
        defaults.update(kwargs)
        return DailyOffer.objects.create(**defaults)

    def test_offer_price(self):
        self.assertEqual(offer_price(Decimal("15990"), 20), Decimal("12792.00"))
        self.assertEqual(offer_price(Decimal("9999"), 15), Decimal("8499.15"))

    def test_discounted_price_follows_percent(self):
        offer = self._offer()
        self.assertEqual(offer.discounted_price, Decimal("12792.00"))

        offer.discount_percentage = 50
        offer.save(update_fields=["discount_percentage", "updated_at"])
        offer.refresh_from_db()
        self.assertEqual(offer.discounted_price, Decimal("7995.00"))

    def test_active_window(self):
        current = self._offer()
        self._offer(start_date=self.today + timedelta(days=1), end_date=self.today + timedelta(days=3))
        self._offer(start_date=self.today - timedelta(days=5), end_date=self.today - timedelta(days=1))
        self._offer(is_active=False)

        self.assertEqual(list(active_offers(today=self.today)), [current])

    def test_window_is_inclusive(self):
        offer = self._offer(start_date=self.today, end_date=self.today)
        self.assertEqual(list(active_offers(today=self.today)), [offer])

    def test_hidden_product_excluded(self):
        self._offer()
        Product.objects.filter(pk=self.product.pk).update(is_visible=False)
        self.assertFalse(active_offers(today=self.today).exists())


class DailyOfferApiTests(TestCase):
    """
    GUARANTEES:
    - original_price defaults to the product price
    - discount_percentage must be 1..99
    """

    def setUp(self):
        self.client = APIClient()
        self.manager = User.objects.create_user(email="manager@example.com", password="pass", role="manager")
        self.client.force_authenticate(user=self.manager)
        self.product = Product.objects.create(name="Lomo Vetado", price=Decimal("18990"))

    def test_create_uses_product_price(self):
        res = self.client.post(
            "/api/promotions/daily-offers/",
            {
                "product": str(self.product.id),
                "discount_percentage": 10,
                "start_date": "2026-03-01",
                "end_date": "2026-03-31",
            },
            format="json",
        )

        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.data["original_price"], "18990.00")
        self.assertEqual(res.data["discounted_price"], "17091.00")

    def test_invalid_percentage(self):
        res = self.client.post(
            "/api/promotions/daily-offers/",
            {
                "product": str(self.product.id),
                "discount_percentage": 100,
                "start_date": "2026-03-01",
                "end_date": "2026-03-31",
            },
            format="json",
        )
        self.assertEqual(res.status_code, 400)
