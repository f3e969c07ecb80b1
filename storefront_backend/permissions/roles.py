# permissions/roles.py

from __future__ import annotations

from typing import Optional

from rest_framework.permissions import BasePermission


# =========================================================
# ROLE CONSTANTS (BACK-OFFICE JOB ROLES)
# =========================================================
# Storefront customers never log in; only shop staff hold accounts.
ROLE_ADMIN = "admin"
ROLE_MANAGER = "manager"
ROLE_STAFF = "staff"

STAFF_ROLES = {
    ROLE_ADMIN,
    ROLE_MANAGER,
    ROLE_STAFF,
}


# =========================================================
# CAPABILITIES (THE REAL PERMISSION LANGUAGE)
# =========================================================
# One capability per back-office screen family.
# Views should protect capabilities, not raw roles.
CAP_CATALOG_EDIT = "catalog.edit"             # categories + products
CAP_INVENTORY_ADJUST = "inventory.adjust"     # stock set/adjust
CAP_ORDERS_MANAGE = "orders.manage"           # order list + status changes
CAP_CUSTOMERS_VIEW = "customers.view"
CAP_CUSTOMERS_EDIT = "customers.edit"
CAP_PROMOTIONS_MANAGE = "promotions.manage"   # coupons + daily offers
CAP_DELIVERY_MANAGE = "delivery.manage"       # delivery zones
CAP_LOCATIONS_MANAGE = "locations.manage"     # store locations
CAP_CONFIG_EDIT = "config.edit"               # system configuration
CAP_REPORTS_VIEW = "reports.view"             # analytics dashboard

ALL_CAPABILITIES = {
    CAP_CATALOG_EDIT,
    CAP_INVENTORY_ADJUST,
    CAP_ORDERS_MANAGE,
    CAP_CUSTOMERS_VIEW,
    CAP_CUSTOMERS_EDIT,
    CAP_PROMOTIONS_MANAGE,
    CAP_DELIVERY_MANAGE,
    CAP_LOCATIONS_MANAGE,
    CAP_CONFIG_EDIT,
    CAP_REPORTS_VIEW,
}


# =========================================================
# ROLE → CAPABILITY MAP (DEFAULT)
# =========================================================
ROLE_CAPABILITIES: dict[str, set[str]] = {
    ROLE_ADMIN: {
        *ALL_CAPABILITIES,
    },
    ROLE_MANAGER: {
        # everything except touching system configuration
        *(ALL_CAPABILITIES - {CAP_CONFIG_EDIT}),
    },
    ROLE_STAFF: {
        CAP_ORDERS_MANAGE,
        CAP_INVENTORY_ADJUST,
        CAP_CUSTOMERS_VIEW,
    },
}


# =========================================================
# Helpers
# =========================================================
def get_user_role(user) -> Optional[str]:
    return getattr(user, "role", None)


def effective_capabilities_for(user) -> set[str]:
    """
    Capabilities granted by the user's role.
    Superusers always get everything (Django admin bootstrap accounts).
    """
    if getattr(user, "is_superuser", False):
        return set(ALL_CAPABILITIES)

    role = get_user_role(user)
    return set(ROLE_CAPABILITIES.get(role, set()))


# =========================================================
# Base Role Permission (Internal Use)
# =========================================================
class BaseRolePermission(BasePermission):
    """
    Base permission for role-based access control.

    Subclasses must define:
    - allowed_roles (set)
    """

    allowed_roles: set[str] = set()

    def has_permission(self, request, view):
        user = request.user

        if not user or not user.is_authenticated:
            return False

        user_role = get_user_role(user)
        if not user_role:
            return False

        return user_role in self.allowed_roles


# =========================================================
# Capability Permissions
# =========================================================
class HasCapability(BasePermission):
    """
    Require a specific capability.

    Usage:
        permission_classes = [IsAuthenticated, HasCapability]
        view.required_capability = CAP_ORDERS_MANAGE
    """

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        required = getattr(view, "required_capability", None)
        if not required:
            # deny-by-default when a view forgets to declare its capability
            return False

        return required in effective_capabilities_for(user)


class HasAnyCapability(BasePermission):
    """
    Require ANY capability from a set.

    Usage:
        view.required_any_capabilities = {CAP_CUSTOMERS_VIEW, CAP_CUSTOMERS_EDIT}
    """

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        required = getattr(view, "required_any_capabilities", None)
        if not required:
            return False

        caps = effective_capabilities_for(user)
        return any(cap in caps for cap in set(required))


# =========================================================
# Role Permissions
# =========================================================
class IsAdmin(BaseRolePermission):
    allowed_roles = {ROLE_ADMIN}


class IsStaff(BaseRolePermission):
    allowed_roles = STAFF_ROLES
