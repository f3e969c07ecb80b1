# promotions/models/daily_offer.py

import uuid
from decimal import Decimal, ROUND_HALF_UP

from django.core.exceptions import ValidationError
from django.db import models

from products.models import Product

TWOPLACES = Decimal("0.01")


def offer_price(original_price, discount_percentage) -> Decimal:
    original = Decimal(str(original_price or 0))
    pct = Decimal(str(discount_percentage or 0))
    price = original * (Decimal("1") - pct / Decimal("100"))
    return price.quantize(TWOPLACES, rounding=ROUND_HALF_UP)


class DailyOffer(models.Model):
    """
    Time-boxed price cut for one product.

    - discounted_price is derived on save from original_price and the percent
    - visible on the storefront while active and start_date <= today <= end_date
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="daily_offers")

    original_price = models.DecimalField(max_digits=12, decimal_places=2)
    discount_percentage = models.PositiveSmallIntegerField(default=20)
    discounted_price = models.DecimalField(max_digits=12, decimal_places=2, editable=False)

    start_date = models.DateField()
    end_date = models.DateField()

    is_active = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["is_active", "start_date", "end_date"], name="dailyoffer_active_window_idx"),
        ]

    def __str__(self):
        return f"{self.product_id} -{self.discount_percentage}%"

    def clean(self):
        if self.original_price is None or self.original_price <= 0:
            raise ValidationError("original_price must be greater than zero")
        if not (0 < int(self.discount_percentage or 0) < 100):
            raise ValidationError("discount_percentage must be between 1 and 99")
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValidationError("end_date cannot be before start_date")

    def save(self, *args, **kwargs):
        self.discounted_price = offer_price(self.original_price, self.discount_percentage)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "discounted_price" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["discounted_price"]
        super().save(*args, **kwargs)
