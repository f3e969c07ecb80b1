# public/apps.py

"""
PUBLIC APP CONFIG

Storefront (AllowAny) module:
- catalog, offers, locations, delivery zones, public configuration
- coupon validation, checkout quote, checkout
- navigation shell (route resolution + JSON bootstrap for deep links)
"""

from django.apps import AppConfig


class PublicConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "public"
    verbose_name = "Public Storefront"
