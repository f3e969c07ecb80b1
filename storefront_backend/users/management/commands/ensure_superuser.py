# users/management/commands/ensure_superuser.py

"""
PATH: users/management/commands/ensure_superuser.py

Admin bootstrap for fresh deployments.

- Reads AUTO_ADMIN_EMAIL + AUTO_ADMIN_PASSWORD from the environment (django-environ).
- Idempotent: creates the superuser if missing, otherwise re-activates it and resets the password.
- Never prints the password.
"""

from __future__ import annotations

import environ
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction


class Command(BaseCommand):
    help = "Create/update the initial admin account from env vars (idempotent)."

    def handle(self, *args, **options):
        env = environ.Env()
        email = (env("AUTO_ADMIN_EMAIL", default="") or "").strip()
        password = (env("AUTO_ADMIN_PASSWORD", default="") or "").strip()

        if not email or not password:
            self.stdout.write(self.style.WARNING("AUTO_ADMIN_* env vars not set. Skipping."))
            return

        User = get_user_model()

        with transaction.atomic():
            user = User.objects.filter(email__iexact=email).first()

            if user:
                user.is_active = True
                user.is_staff = True
                user.is_superuser = True
                user.role = User.ROLE_ADMIN
                user.set_password(password)
                user.save()
                self.stdout.write(self.style.SUCCESS(f"Superuser ensured: {email} (updated)"))
                return

            User.objects.create_superuser(email=email, password=password)
            self.stdout.write(self.style.SUCCESS(f"Superuser ensured: {email} (created)"))
