"""
======================================================
PATH: siteconfig/migrations/0001_initial.py
======================================================
MIGRATION: CREATE SystemConfiguration

Purpose:
- Key/value store configuration read into the typed StoreSettings record.
"""

from __future__ import annotations

import uuid

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SystemConfiguration",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("key", models.CharField(db_index=True, max_length=100, unique=True)),
                ("value", models.TextField(blank=True, default="")),
                ("description", models.CharField(blank=True, default="", max_length=255)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("general", "General"),
                            ("contact", "Contact"),
                            ("delivery", "Delivery"),
                            ("orders", "Orders"),
                            ("appearance", "Appearance"),
                        ],
                        db_index=True,
                        default="general",
                        max_length=32,
                    ),
                ),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["category", "key"],
            },
        ),
    ]
