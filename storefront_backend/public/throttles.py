# public/throttles.py

from rest_framework.throttling import AnonRateThrottle


class PublicWriteThrottle(AnonRateThrottle):
    scope = "public_write"


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"
