# backend/wsgi.py
"""
PATH: backend/wsgi.py

WSGI entrypoint for the storefront backend.
Defaults to dev settings; production sets DJANGO_SETTINGS_MODULE=backend.settings.prod.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings.dev")

application = get_wsgi_application()
