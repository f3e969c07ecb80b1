# siteconfig/tests/test_store_settings.py

from decimal import Decimal

from django.core.cache import cache
from django.test import SimpleTestCase, TestCase

from siteconfig.models import SystemConfiguration
from siteconfig.store_settings import (
    StoreSettings,
    build_store_settings,
    load_store_settings,
)


class BuildStoreSettingsTests(SimpleTestCase):
    """
    GUARANTEES:
    - Missing keys fall back to field defaults
    - JSON text is decoded and coerced to the field type
    - Unusable values are ignored (default kept, warning logged)
    """

    def test_empty_mapping_gives_defaults(self):
        record = build_store_settings({})

        self.assertEqual(record, StoreSettings())
        self.assertEqual(record.shipping_cost, Decimal("3000.00"))
        self.assertEqual(record.minimum_order, Decimal("20000.00"))
        self.assertTrue(record.info_bar_active)

    def test_values_are_coerced(self):
        record = build_store_settings(
            {
                "shipping_cost": "3500",
                "minimum_order": "25000.5",
                "free_delivery_communes": '["Providencia", "Las Condes"]',
                "available_communes": "Santiago, Ñuñoa ,",
                "footer_active": "false",
                "business_hours": '{"lunes": "9:00-19:00"}',
                "whatsapp_number": "+56987654321",
            }
        )

        self.assertEqual(record.shipping_cost, Decimal("3500.00"))
        self.assertEqual(record.minimum_order, Decimal("25000.50"))
        self.assertEqual(record.free_delivery_communes, ("Providencia", "Las Condes"))
        self.assertEqual(record.available_communes, ("Santiago", "Ñuñoa"))
        self.assertFalse(record.footer_active)
        self.assertEqual(record.business_hours, {"lunes": "9:00-19:00"})
        self.assertEqual(record.whatsapp_number, "+56987654321")

    def test_unusable_value_keeps_default(self):
        with self.assertLogs("siteconfig.store_settings", level="WARNING"):
            record = build_store_settings({"shipping_cost": "gratis", "minimum_order": "-1"})

        self.assertEqual(record.shipping_cost, Decimal("3000.00"))
        self.assertEqual(record.minimum_order, Decimal("20000.00"))

    def test_blank_values_and_unknown_keys_ignored(self):
        record = build_store_settings({"hero_title": "   ", "not_a_setting": "x"})
        self.assertEqual(record.hero_title, StoreSettings().hero_title)

    def test_payload_is_json_safe(self):
        payload = build_store_settings({"free_delivery_communes": "Vitacura"}).as_payload()

        self.assertEqual(payload["shipping_cost"], "3000.00")
        self.assertEqual(payload["free_delivery_communes"], ["Vitacura"])


class StoreSettingsCacheTests(TestCase):
    """
    GUARANTEES:
    - The typed record is cached
    - Saving or deleting a configuration entry drops the cache
    - Inactive entries are not applied
    """

    def setUp(self):
        cache.clear()

    def test_save_invalidates_cached_record(self):
        self.assertEqual(load_store_settings().shipping_cost, Decimal("3000.00"))

        SystemConfiguration.objects.create(key="shipping_cost", value="4500")

        self.assertEqual(load_store_settings().shipping_cost, Decimal("4500.00"))

    def test_delete_invalidates_cached_record(self):
        entry = SystemConfiguration.objects.create(key="minimum_order", value="30000")
        self.assertEqual(load_store_settings().minimum_order, Decimal("30000.00"))

        entry.delete()

        self.assertEqual(load_store_settings().minimum_order, Decimal("20000.00"))

    def test_inactive_entry_ignored(self):
        SystemConfiguration.objects.create(key="hero_title", value="Oferta", is_active=False)
        self.assertEqual(load_store_settings().hero_title, StoreSettings().hero_title)


class NonFiniteMoneyTests(TestCase):
    """
    GUARANTEES:
    - NaN / Infinity / overflowing amounts keep the default
    - A bad stored amount never breaks the public settings endpoint
    """

    def setUp(self):
        cache.clear()

    def test_non_finite_amounts_keep_defaults(self):
        with self.assertLogs("siteconfig.store_settings", level="WARNING"):
            record = build_store_settings(
                {"shipping_cost": "NaN", "minimum_order": "Infinity"}
            )

        self.assertEqual(record.shipping_cost, Decimal("3000.00"))
        self.assertEqual(record.minimum_order, Decimal("20000.00"))

    def test_overflowing_amount_keeps_default(self):
        with self.assertLogs("siteconfig.store_settings", level="WARNING"):
            record = build_store_settings({"shipping_cost": "1e999"})

        self.assertEqual(record.shipping_cost, Decimal("3000.00"))

    def test_public_config_survives_stored_nan(self):
        SystemConfiguration.objects.create(key="shipping_cost", value="NaN")

        with self.assertLogs("siteconfig.store_settings", level="WARNING"):
            res = self.client.get("/api/public/config/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["shipping_cost"], "3000.00")
