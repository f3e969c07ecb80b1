# public/views/navigation.py

"""
NAVIGATION SHELL

GET /api/public/route/?url=/category?id=<id>
    -> resolved view state + canonical URL

Storefront deep links (/, /category, /cart, /checkout, /admin, /admin-login)
are answered with a JSON bootstrap: the resolved route plus the public store
settings, so a reload on any storefront URL lands on the same view.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from public.routing import default_router
from public.serializers import RouteQuerySerializer
from public.throttles import PublicCatalogThrottle
from public.views.catalog import public_store_settings


def route_payload(url: str) -> dict:
    state = default_router.resolve(url)
    return {**state.as_payload(), "url": default_router.reverse(state)}


class RouteResolveView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        parameters=[OpenApiParameter(name="url", type=str, location=OpenApiParameter.QUERY, required=False)],
        responses={200: OpenApiResponse(description="{view, category_id, admin_screen, url}")},
        tags=["Public"],
    )
    def get(self, request):
        s = RouteQuerySerializer(data=request.query_params)
        s.is_valid(raise_exception=True)
        return Response(route_payload(s.validated_data["url"] or "/"))


class StorefrontShellView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(exclude=True)
    def get(self, request, *args, **kwargs):
        return Response(
            {
                "route": route_payload(request.get_full_path()),
                "config": public_store_settings(),
                "api": "/api/",
            }
        )
