# products/management/commands/seed_storefront.py

"""
Seed a demo storefront: categories, products, delivery zones and the
default store configuration keys.

Idempotent: existing rows (matched by name / key) are left as they are.
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from products.models import Category, Product
from siteconfig.models import SystemConfiguration
from store.models import DeliveryZone

IMG = "https://images.pexels.com/photos/{}/pexels-photo-{}.jpeg?auto=compress&cs=tinysrgb&w=500"

CATEGORIES = [
    # key, name, description, image id
    ("vacuno", "Vacuno", "Cortes premium de res, perfectos para cualquier ocasión", 3997609),
    ("premium", "Cortes Premium", "Selección exclusiva de los mejores cortes", 1539684),
    ("parrilla", "Cortes de Parrilla", "Ideales para asados y parrilladas familiares", 1199960),
    ("pollo", "Pollo", "Pollo fresco y de corral, múltiples cortes disponibles", 2233729),
    ("cerdo", "Cerdo", "Cortes selectos de cerdo, tiernos y sabrosos", 4079520),
    ("cazuela", "Cazuela", "Carnes especiales para preparar deliciosas cazuelas", 5737472),
    ("ovino", "Ovino", "Cordero y oveja de la mejor calidad", 1458668),
    ("conejo", "Conejo", "Carne blanca, baja en grasa y alta en proteínas", 7626508),
    ("embutidos", "Longanizas/Chorizos/Prietas", "Embutidos artesanales de la casa", 5696528),
]

PRODUCTS = [
    # category key, name, description, price, stock
    ("vacuno", "Lomo Liso", "Ideal para bistec, medallones, carpaccio. Corte tierno y magro.", 15990, 25),
    ("vacuno", "Asiento", "Perfecto para guisos, estofados y preparaciones largas.", 7990, 30),
    ("vacuno", "Plateada", "Excelente para cazuelas, guisos y preparaciones al horno.", 9990, 20),
    ("premium", "Filete", "El corte más tierno y exclusivo, perfecto para ocasiones especiales.", 24990, 15),
    ("premium", "Lomo Vetado", "Jugoso y marmoleado, ideal para parrilla y plancha.", 19990, 18),
    ("parrilla", "Entraña", "Clásico de la parrilla, sabor intenso y textura única.", 12990, 22),
    ("parrilla", "Costillas de Vacuno", "Perfectas para asados largos, sabor incomparable.", 8990, 25),
    ("pollo", "Pollo Entero", "Pollo de campo, ideal para el horno.", 4990, 40),
    ("pollo", "Pechuga de Pollo", "Pechuga sin hueso, magra y versátil.", 6990, 35),
    ("cerdo", "Lomo de Cerdo", "Tierno y jugoso, ideal al horno o a la plancha.", 8990, 20),
    ("cerdo", "Costillas de Cerdo", "Perfectas para la parrilla con su adobo favorito.", 7990, 18),
    ("embutidos", "Longaniza Casera", "Receta tradicional de la casa.", 5990, 30),
    ("embutidos", "Chorizo Parrillero", "Chorizo artesanal para el asado.", 6990, 25),
]

ZONES = [
    # commune, price, estimated time
    ("Las Condes", 2500, "30-45 minutos"),
    ("Providencia", 2000, "30-45 minutos"),
    ("Santiago", 1500, "25-40 minutos"),
    ("Ñuñoa", 2000, "35-50 minutos"),
    ("Maipú", 3500, "50-70 minutos"),
    ("La Florida", 4000, "60-80 minutos"),
]

CONFIGURATION = [
    # key, value, category, description
    ("whatsapp_number", "+56912345678", "contact", "WhatsApp number for orders and inquiries"),
    ("admin_email", "contacto@laalianza.cl", "contact", "Back-office contact email"),
    ("shipping_cost", "3000", "delivery", "Flat delivery fee when the commune has no zone"),
    ("minimum_order", "20000", "orders", "Minimum order total (delivery included)"),
    ("delivery_time", "24-48 horas", "delivery", "Default delivery window"),
    ("free_delivery_communes", "[]", "delivery", "Communes that never pay delivery"),
    (
        "confirmation_message",
        "Gracias por tu pedido. Te contactaremos pronto para coordinar la entrega.",
        "orders",
        "Shown on the order confirmation screen",
    ),
    (
        "business_hours",
        '{"lunes-viernes": "09:00-19:00", "sabado": "09:00-14:00", "domingo": "Cerrado"}',
        "general",
        "Opening hours by day",
    ),
    ("info_bar_message", "Despacho a domicilio en toda la Región Metropolitana", "appearance", "Top info bar"),
    ("info_bar_active", "true", "appearance", "Show the top info bar"),
]


class Command(BaseCommand):
    help = "Seed demo catalog, delivery zones and default store configuration"

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding storefront..."))

        # -------------------------------
        # CATEGORIES
        # -------------------------------
        category_objs = {}
        for order, (key, name, description, image_id) in enumerate(CATEGORIES, start=1):
            obj, _ = Category.objects.get_or_create(
                name=name,
                defaults={
                    "description": description,
                    "image": IMG.format(image_id, image_id),
                    "display_order": order,
                },
            )
            category_objs[key] = obj

        # -------------------------------
        # PRODUCTS
        # -------------------------------
        created_products = 0
        for cat, name, description, price, stock in PRODUCTS:
            _, created = Product.objects.get_or_create(
                name=name,
                category=category_objs[cat],
                defaults={
                    "description": description,
                    "price": Decimal(price),
                    "stock": Decimal(stock),
                    "image": category_objs[cat].image,
                },
            )
            created_products += int(created)

        # -------------------------------
        # DELIVERY ZONES
        # -------------------------------
        for commune, price, eta in ZONES:
            DeliveryZone.objects.get_or_create(
                name=commune,
                defaults={"delivery_price": Decimal(price), "estimated_time": eta},
            )

        # -------------------------------
        # CONFIGURATION
        # -------------------------------
        for key, value, category, description in CONFIGURATION:
            SystemConfiguration.objects.get_or_create(
                key=key,
                defaults={"value": value, "category": category, "description": description},
            )

        self.stdout.write(
            self.style.SUCCESS(
                f"Storefront seeded ({len(category_objs)} categories, {created_products} new products, "
                f"{len(ZONES)} zones)."
            )
        )
