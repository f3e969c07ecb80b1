# sales/models/analytics.py

from decimal import Decimal

from django.db import models


class DailyAnalytics(models.Model):
    """
    Per-day rollup bumped on every accepted order (best-effort).
    The dashboard reads the last 30 rows.
    """

    date = models.DateField(unique=True)
    total_sales = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))
    total_orders = models.PositiveIntegerField(default=0)
    new_customers = models.PositiveIntegerField(default=0)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-date"]
        verbose_name_plural = "daily analytics"

    def __str__(self):
        return f"{self.date}: {self.total_orders} orders / {self.total_sales}"
