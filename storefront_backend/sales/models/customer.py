# sales/models/customer.py

import uuid

from django.core.exceptions import ValidationError
from django.db import models


class Customer(models.Model):
    """
    Storefront customer.

    - phone is the identity used by checkout (upsert key)
    - order statistics are NOT stored; see sales.services.customers.with_stats()
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)
    email = models.EmailField(blank=True, default="")
    phone = models.CharField(max_length=32, unique=True)
    address = models.CharField(max_length=255, blank=True, default="")
    commune = models.CharField(max_length=120, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.phone})"

    def clean(self):
        self.name = (self.name or "").strip()
        self.phone = (self.phone or "").strip()
        if not self.name:
            raise ValidationError("Customer name is required")
        if not self.phone:
            raise ValidationError("Customer phone is required")
