# cart/views.py

"""
SESSION CART API (STOREFRONT)

- GET  /api/cart/                              cart contents + subtotal
- POST /api/cart/items/                        add {product_id, quantity}
- POST /api/cart/items/<product_id>/update/    set quantity (>= 0.1)
- POST /api/cart/items/<product_id>/remove/
- POST /api/cart/clear/

AllowAny; the cart is scoped to the browser session.
Only visible products can be added.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from cart.serializers import CartAddInputSerializer, CartUpdateInputSerializer
from cart.session_cart import CartError, ItemNotInCartError, SessionCart
from products.services.catalog import storefront_products


class CartWriteThrottle(AnonRateThrottle):
    scope = "public_write"


class _CartView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get_cart(self) -> SessionCart:
        return SessionCart(self.request.session)

    def cart_response(self, cart: SessionCart, http_status=status.HTTP_200_OK):
        return Response(cart.as_payload(), status=http_status)


class CartDetailView(_CartView):
    @extend_schema(responses={200: OpenApiResponse(description="{items, item_count, subtotal}")}, tags=["Cart"])
    def get(self, request):
        return self.cart_response(self.get_cart())


class CartAddItemView(_CartView):
    throttle_classes = [CartWriteThrottle]

    @extend_schema(
        request=CartAddInputSerializer,
        responses={
            200: OpenApiResponse(description="Updated cart"),
            404: OpenApiResponse(description="Product not available"),
        },
        tags=["Cart"],
    )
    def post(self, request):
        s = CartAddInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        product = storefront_products().filter(id=s.validated_data["product_id"]).first()
        if product is None:
            return Response({"detail": "Producto no disponible"}, status=status.HTTP_404_NOT_FOUND)

        cart = self.get_cart()
        try:
            cart.add(product, s.validated_data["quantity"])
        except CartError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return self.cart_response(cart)


class CartUpdateItemView(_CartView):
    throttle_classes = [CartWriteThrottle]

    @extend_schema(request=CartUpdateInputSerializer, tags=["Cart"])
    def post(self, request, product_id):
        s = CartUpdateInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        cart = self.get_cart()
        try:
            cart.update(product_id, s.validated_data["quantity"])
        except ItemNotInCartError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except CartError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return self.cart_response(cart)


class CartRemoveItemView(_CartView):
    throttle_classes = [CartWriteThrottle]

    @extend_schema(request=None, tags=["Cart"])
    def post(self, request, product_id):
        cart = self.get_cart()
        try:
            cart.remove(product_id)
        except ItemNotInCartError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)

        return self.cart_response(cart)


class CartClearView(_CartView):
    throttle_classes = [CartWriteThrottle]

    @extend_schema(request=None, tags=["Cart"])
    def post(self, request):
        cart = self.get_cart()
        cart.clear()
        return self.cart_response(cart)
