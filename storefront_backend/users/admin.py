# users/admin.py

"""
USERS ADMIN REGISTRATION

Back-office accounts only (shoppers never log in).
The role decides which storefront admin screens a user can open;
the effective capability list is shown read-only for support.
"""

from __future__ import annotations

from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from permissions.roles import effective_capabilities_for

User = get_user_model()


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    ordering = ("email",)
    list_display = ("email", "username", "role", "is_active", "last_login")
    list_filter = ("role", "is_active")
    search_fields = ("email", "username", "first_name", "last_name")
    readonly_fields = ("capabilities", "last_login", "created_at")

    fieldsets = (
        (None, {"fields": ("email", "username", "password")}),
        ("Back-office role", {"fields": ("role", "capabilities")}),
        ("Profile", {"fields": ("first_name", "last_name")}),
        ("Django admin access", {"fields": ("is_active", "is_staff", "is_superuser")}),
        ("Activity", {"fields": ("last_login", "created_at")}),
    )

    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("email", "username", "role", "password1", "password2"),
            },
        ),
    )

    @admin.display(description="Capabilities")
    def capabilities(self, obj):
        return ", ".join(sorted(effective_capabilities_for(obj))) or "-"
