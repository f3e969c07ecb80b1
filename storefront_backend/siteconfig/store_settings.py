# siteconfig/store_settings.py

"""
TYPED STORE SETTINGS

Purpose:
- Read every active SystemConfiguration row ONCE and resolve it into a
  frozen StoreSettings record with explicit defaults.
- Callers never touch raw key/value strings.

Rules:
- Missing or blank value -> field default
- Value text is JSON-decoded when possible, then coerced to the field type
- Unusable value -> field default + warning log (the storefront keeps working)
- Record is cached; any configuration save/delete drops the cache (signals.py),
  so the next read refetches the whole record
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)

CACHE_KEY = "siteconfig:store_settings:v1"
TWOPLACES = Decimal("0.01")

TRUE_STRINGS = {"1", "true", "yes", "on", "si", "sí"}
FALSE_STRINGS = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class StoreSettings:
    # contact
    whatsapp_number: str = "+56912345678"
    admin_email: str = ""

    # pricing / delivery
    shipping_cost: Decimal = Decimal("3000.00")
    minimum_order: Decimal = Decimal("20000.00")
    available_communes: tuple = ()
    free_delivery_communes: tuple = ()
    delivery_time: str = "24-48 horas"

    # orders
    confirmation_message: str = "Gracias por tu pedido."
    business_hours: dict = field(default_factory=dict)

    # info bar
    info_bar_message: str = ""
    info_bar_secondary: str = ""
    info_bar_active: bool = True

    # home
    hero_title: str = "Carnicería Premium"
    hero_subtitle: str = (
        "Las mejores carnes frescas, seleccionadas especialmente para tu mesa. "
        "Calidad premium, servicio excepcional."
    )
    offers_section_title: str = "Ofertas del Día"
    categories_section_title: str = "Nuestras Categorías"

    # footer
    footer_active: bool = True
    footer_company_name: str = "LA ALIANZA CARNICERIAS"
    footer_description: str = (
        "Tu carnicería de confianza con las mejores carnes premium de Santiago."
    )
    footer_address: str = "Santiago, Chile"
    footer_phone: str = "+56912345678"
    footer_email: str = "contacto@laalianza.cl"
    footer_social_facebook: str = ""
    footer_social_instagram: str = ""

    def as_payload(self) -> dict:
        """JSON-safe dict (money as 2dp strings, tuples as lists)."""
        out = {}
        for f in fields(self):
            v = getattr(self, f.name)
            if isinstance(v, Decimal):
                v = f"{v:.2f}"
            elif isinstance(v, tuple):
                v = list(v)
            out[f.name] = v
        return out


class ConfigValueError(ValueError):
    pass


# ============================================================
# COERCION
# ============================================================


def decode_raw(raw: str):
    """JSON-decode when possible; otherwise the stripped text itself."""
    text = (raw or "").strip()
    if not text:
        return None
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return text


def _as_str(value) -> str:
    if isinstance(value, (dict, list)):
        raise ConfigValueError("expected text")
    return str(value).strip()


def _as_money(value) -> Decimal:
    if isinstance(value, bool):
        raise ConfigValueError("expected a number")
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ConfigValueError("expected a number")
    if not amount.is_finite():
        raise ConfigValueError("expected a number")
    if amount < 0:
        raise ConfigValueError("must not be negative")
    try:
        return amount.quantize(TWOPLACES, rounding=ROUND_HALF_UP)
    except ArithmeticError:
        raise ConfigValueError("number out of range")


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    s = str(value).strip().lower()
    if s in TRUE_STRINGS:
        return True
    if s in FALSE_STRINGS:
        return False
    raise ConfigValueError("expected true/false")


def _as_names(value) -> tuple:
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, list):
        items = value
    else:
        raise ConfigValueError("expected a list of names")
    return tuple(str(i).strip() for i in items if str(i).strip())


def _as_mapping(value) -> dict:
    if not isinstance(value, dict):
        raise ConfigValueError("expected an object")
    return value


_COERCERS = {
    str: _as_str,
    Decimal: _as_money,
    bool: _as_bool,
    tuple: _as_names,
    dict: _as_mapping,
}

_FIELD_TYPES = {
    "whatsapp_number": str,
    "admin_email": str,
    "shipping_cost": Decimal,
    "minimum_order": Decimal,
    "available_communes": tuple,
    "free_delivery_communes": tuple,
    "delivery_time": str,
    "confirmation_message": str,
    "business_hours": dict,
    "info_bar_message": str,
    "info_bar_secondary": str,
    "info_bar_active": bool,
    "hero_title": str,
    "hero_subtitle": str,
    "offers_section_title": str,
    "categories_section_title": str,
    "footer_active": bool,
    "footer_company_name": str,
    "footer_description": str,
    "footer_address": str,
    "footer_phone": str,
    "footer_email": str,
    "footer_social_facebook": str,
    "footer_social_instagram": str,
}

KNOWN_KEYS = frozenset(_FIELD_TYPES)


def build_store_settings(raw_values: dict[str, str]) -> StoreSettings:
    """
    Pure resolution step: raw key -> text mapping in, typed record out.
    Unknown keys are ignored.
    """
    resolved = {}

    for key, kind in _FIELD_TYPES.items():
        decoded = decode_raw(raw_values.get(key, ""))
        if decoded is None or decoded == "":
            continue

        try:
            value = _COERCERS[kind](decoded)
        except ConfigValueError as exc:
            logger.warning(
                "Ignoring unusable configuration value",
                extra={"key": key, "reason": str(exc)},
            )
            continue

        if kind is str and not value:
            continue

        resolved[key] = value

    return StoreSettings(**resolved)


# ============================================================
# LOAD / CACHE
# ============================================================


def _read_raw_values() -> dict[str, str]:
    from siteconfig.models import SystemConfiguration

    return dict(
        SystemConfiguration.objects.filter(is_active=True).values_list("key", "value")
    )


def load_store_settings(*, use_cache: bool = True) -> StoreSettings:
    if use_cache:
        cached = cache.get(CACHE_KEY)
        if cached is not None:
            return cached

    record = build_store_settings(_read_raw_values())

    timeout = int(getattr(settings, "STORE_SETTINGS_CACHE_SECONDS", 300))
    cache.set(CACHE_KEY, record, timeout)
    return record


def invalidate_store_settings() -> None:
    cache.delete(CACHE_KEY)
