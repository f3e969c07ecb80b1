# store/tests/test_store.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from store.models import DeliveryZone, StoreLocation
from store.services.delivery import find_active_zone

User = get_user_model()


class DeliveryZoneLookupTests(TestCase):
    """
    GUARANTEES:
    - Commune lookup is trimmed and case-insensitive
    - Inactive zones are invisible to pricing
    """

    def setUp(self):
        self.zone = DeliveryZone.objects.create(
            name="Providencia",
            delivery_price=Decimal("2500"),
            estimated_time="2-3 horas",
        )
        DeliveryZone.objects.create(name="Maipú", delivery_price=Decimal("4000"), is_active=False)

    def test_lookup_ignores_case_and_spacing(self):
        self.assertEqual(find_active_zone("  providencia "), self.zone)
        self.assertEqual(find_active_zone("PROVIDENCIA"), self.zone)

    def test_inactive_zone_not_found(self):
        self.assertIsNone(find_active_zone("Maipú"))

    def test_blank_commune(self):
        self.assertIsNone(find_active_zone(""))
        self.assertIsNone(find_active_zone(None))


class StoreApiTests(TestCase):
    """
    GUARANTEES:
    - Zone names are unique regardless of case
    - active/ toggles to an explicit target value
    - Staff cannot manage zones or locations
    """

    def setUp(self):
        self.client = APIClient()
        self.manager = User.objects.create_user(email="manager@example.com", password="pass", role="manager")
        self.staff = User.objects.create_user(email="staff@example.com", password="pass", role="staff")
        DeliveryZone.objects.create(name="Ñuñoa", delivery_price=Decimal("2500"))

    def test_duplicate_zone_rejected(self):
        self.client.force_authenticate(user=self.manager)
        res = self.client.post(
            "/api/store/delivery-zones/",
            {"name": "ñuñoa", "delivery_price": "3000.00"},
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("name", res.data)

    def test_negative_price_rejected(self):
        self.client.force_authenticate(user=self.manager)
        res = self.client.post(
            "/api/store/delivery-zones/",
            {"name": "La Reina", "delivery_price": "-1"},
            format="json",
        )
        self.assertEqual(res.status_code, 400)

    def test_location_active_toggle(self):
        location = StoreLocation.objects.create(name="Sucursal Centro", address="Av. Matta 100")
        self.client.force_authenticate(user=self.manager)
        url = f"/api/store/locations/{location.id}/active/"

        res = self.client.post(url, {"is_active": False}, format="json")
        again = self.client.post(url, {"is_active": False}, format="json")

        self.assertEqual(res.status_code, 200)
        self.assertFalse(again.data["is_active"])
        location.refresh_from_db()
        self.assertFalse(location.is_active)

    def test_location_defaults_to_santiago_coordinates(self):
        location = StoreLocation.objects.create(name="Sucursal Norte", address="Recoleta 200")
        self.assertEqual(location.latitude, Decimal("-33.448900"))

    def test_staff_forbidden(self):
        self.client.force_authenticate(user=self.staff)
        res = self.client.get("/api/store/delivery-zones/")
        self.assertEqual(res.status_code, 403)
