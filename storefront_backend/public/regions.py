# public/regions.py

"""
REGION SUPERVISOR

The storefront home is composed of independent regions (info bar, hero,
offers, categories, locations, footer). Each region is rendered on its own:
a failing region reports {"ok": false, "error": ...} with a fallback message
and every sibling still renders.
"""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Esta sección no está disponible en este momento."


class RegionSupervisor:
    def __init__(self, *, fallback_message: str = FALLBACK_MESSAGE):
        self.fallback_message = fallback_message

    def render_one(self, name: str, render: Callable[[], object]) -> dict:
        try:
            return {"ok": True, "data": render()}
        except Exception:
            logger.exception("Storefront region failed to render", extra={"region": name})
            return {"ok": False, "error": self.fallback_message}

    def render(self, regions: dict[str, Callable[[], object]]) -> dict:
        return {name: self.render_one(name, fn) for name, fn in regions.items()}
