# siteconfig/apps.py

"""
SITE CONFIGURATION APP

Key/value store configuration (shipping cost, minimum order, communes,
storefront texts) exposed to the rest of the code as one typed record.
"""

from django.apps import AppConfig


class SiteConfigConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "siteconfig"
    verbose_name = "System Configuration"

    def ready(self):
        from siteconfig import signals  # noqa: F401
