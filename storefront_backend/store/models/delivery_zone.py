# store/models/delivery_zone.py

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models


class DeliveryZone(models.Model):
    """
    Delivery pricing for one commune.

    - name IS the commune name (unique, matched case-insensitively at checkout)
    - is_free_delivery overrides delivery_price
    - inactive zones are ignored by pricing (flat shipping cost applies)
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=120, unique=True)
    delivery_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
    )
    estimated_time = models.CharField(max_length=64, blank=True, default="")
    is_free_delivery = models.BooleanField(default=False)

    is_active = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def clean(self):
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError("Commune name is required")
        if self.delivery_price is None or Decimal(self.delivery_price) < 0:
            raise ValidationError("delivery_price cannot be negative")
