# sales/services/messaging.py

"""
WHATSAPP DEEP LINKS

The backend only BUILDS links (https://wa.me/<digits>?text=<encoded>);
nothing is sent from the server.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from urllib.parse import quote

WA_BASE_URL = "https://wa.me/"

INQUIRY_MESSAGE = "Hola, me gustaría obtener más información sobre sus productos."


def phone_digits(phone: str | None) -> str:
    return "".join(ch for ch in (phone or "") if ch.isdigit())


def format_clp(amount) -> str:
    """20000 -> '$20.000'"""
    whole = int(Decimal(str(amount or 0)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return "$" + f"{whole:,}".replace(",", ".")


def build_whatsapp_url(phone: str | None, message: str = "") -> str:
    url = WA_BASE_URL + phone_digits(phone)
    if message:
        url += "?text=" + quote(message, safe="")
    return url


def order_confirmation_message(
    *,
    order_id: str,
    customer_name: str,
    customer_code: str,
    total,
    address: str,
    commune: str,
    estimated_delivery: str,
) -> str:
    lines = [
        "¡Hola! 👋",
        "",
        "He realizado un pedido:",
        "",
        f"📋 *Pedido:* {order_id}",
        f"👤 *Cliente:* {customer_name}",
        f"📱 *Código:* {customer_code}",
        f"💰 *Total:* {format_clp(total)}",
        f"📍 *Dirección:* {address}, {commune}",
        f"⏰ *Tiempo estimado:* {estimated_delivery}",
        "",
        "¿Podrían confirmar que el pedido está en proceso? ¡Gracias!",
    ]
    return "\n".join(lines)


def inquiry_url(phone: str | None) -> str:
    return build_whatsapp_url(phone, INQUIRY_MESSAGE)
