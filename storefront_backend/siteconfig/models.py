# siteconfig/models.py

import uuid

from django.core.exceptions import ValidationError
from django.db import models


class SystemConfiguration(models.Model):
    """
    One configuration entry (key -> raw value).

    Values are stored as text. JSON text is allowed (lists of communes,
    business hours) and is decoded when the typed record is built.
    """

    CATEGORY_GENERAL = "general"
    CATEGORY_CONTACT = "contact"
    CATEGORY_DELIVERY = "delivery"
    CATEGORY_ORDERS = "orders"
    CATEGORY_APPEARANCE = "appearance"

    CATEGORY_CHOICES = [
        (CATEGORY_GENERAL, "General"),
        (CATEGORY_CONTACT, "Contact"),
        (CATEGORY_DELIVERY, "Delivery"),
        (CATEGORY_ORDERS, "Orders"),
        (CATEGORY_APPEARANCE, "Appearance"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    key = models.CharField(max_length=100, unique=True, db_index=True)
    value = models.TextField(blank=True, default="")
    description = models.CharField(max_length=255, blank=True, default="")
    category = models.CharField(
        max_length=32,
        choices=CATEGORY_CHOICES,
        default=CATEGORY_GENERAL,
        db_index=True,
    )

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["category", "key"]

    def __str__(self):
        return self.key

    def clean(self):
        self.key = (self.key or "").strip()
        if not self.key:
            raise ValidationError("key is required")
