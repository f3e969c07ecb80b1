# products/models/product.py

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from .category import Category


class Product(models.Model):
    """
    A sellable cut.

    PRICING / STOCK MODEL:
    - price is per unit_type (per kg, per unit, per package)
    - stock is a plain Decimal on the product (fractional kg allowed)
    - every stock change made by the back-office goes through
      products.services.stock_adjustments and leaves a StockMovement row
    """

    class UnitType(models.TextChoices):
        KG = "kg", "Per kg"
        UNIT = "unit", "Per unit"
        PACKAGE = "package", "Per package"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )

    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True, default="")

    price = models.DecimalField(max_digits=12, decimal_places=2)
    unit_type = models.CharField(
        max_length=16,
        choices=UnitType.choices,
        default=UnitType.KG,
    )

    image = models.URLField(max_length=500, blank=True, default="")

    stock = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        default=Decimal("0.000"),
    )
    low_stock_threshold = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        default=Decimal("5.000"),
    )

    is_visible = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["category", "is_visible"], name="product_category_visible_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.get_unit_type_display()})"

    def clean(self):
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError("Product name is required")

        if self.price is None or Decimal(self.price) <= 0:
            raise ValidationError("Price must be greater than zero")

        if self.stock is None or Decimal(self.stock) < 0:
            raise ValidationError("Stock cannot be negative")

        if self.low_stock_threshold is None or Decimal(self.low_stock_threshold) < 0:
            raise ValidationError("low_stock_threshold cannot be negative")

    @property
    def is_low_stock(self) -> bool:
        return Decimal(self.stock or 0) <= Decimal(self.low_stock_threshold or 0)
