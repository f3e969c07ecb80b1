# store/models/location.py

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

# Santiago centre; used when a location is saved without coordinates
DEFAULT_LATITUDE = Decimal("-33.448900")
DEFAULT_LONGITUDE = Decimal("-70.669300")


class StoreLocation(models.Model):
    """
    A physical shop shown on the storefront map / locations list.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    commune = models.CharField(max_length=120, blank=True, default="")
    phone = models.CharField(max_length=50, blank=True, default="")
    hours = models.CharField(max_length=255, blank=True, default="")
    description = models.TextField(blank=True, default="")

    latitude = models.DecimalField(max_digits=9, decimal_places=6, default=DEFAULT_LATITUDE)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, default=DEFAULT_LONGITUDE)

    is_active = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} ({self.commune})" if self.commune else self.name

    def clean(self):
        if not (self.name or "").strip():
            raise ValidationError("name is required")
        if not (self.address or "").strip():
            raise ValidationError("address is required")
        if self.latitude is not None and not (-90 <= Decimal(self.latitude) <= 90):
            raise ValidationError("latitude must be between -90 and 90")
        if self.longitude is not None and not (-180 <= Decimal(self.longitude) <= 180):
            raise ValidationError("longitude must be between -180 and 180")
