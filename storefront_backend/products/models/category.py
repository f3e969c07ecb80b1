# products/models/category.py

import uuid

from django.core.exceptions import ValidationError
from django.db import models


class Category(models.Model):
    """
    Catalog section (Vacuno, Pollo, Cerdo ...).

    - display_order drives the storefront grid order
    - hidden categories disappear from the storefront, never from the back-office
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    image = models.URLField(max_length=500, blank=True, default="")

    display_order = models.PositiveIntegerField(default=0, db_index=True)
    is_visible = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["display_order", "name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name

    def clean(self):
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError("Category name is required")
