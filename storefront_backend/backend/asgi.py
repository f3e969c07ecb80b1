# backend/asgi.py
"""
PATH: backend/asgi.py

ASGI entrypoint for the storefront backend.
Defaults to dev settings; production sets DJANGO_SETTINGS_MODULE=backend.settings.prod.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings.dev")

application = get_asgi_application()
