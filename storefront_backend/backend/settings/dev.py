# backend/settings/dev.py
"""
PATH: backend/settings/dev.py

LOCAL DEVELOPMENT SETTINGS

- storefront dev server runs on FRONTEND_BASE_URL (vite default :5173)
- the session cart cookie must travel with cross-origin fetches,
  hence credentials-enabled CORS
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import FRONTEND_BASE_URL, env

DEBUG = True

ALLOWED_HOSTS = env.list(
    "ALLOWED_HOSTS", default=["localhost", "127.0.0.1", "testserver"]
)

CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS", default=[FRONTEND_BASE_URL])
CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS", default=[FRONTEND_BASE_URL])
CORS_ALLOW_CREDENTIALS = True

SESSION_COOKIE_SECURE = False
SESSION_COOKIE_SAMESITE = "Lax"
