# public/views/checkout.py

"""
PUBLIC CHECKOUT (STOREFRONT)

POST /api/public/coupons/validate/      {code, order_total?} -> {valid, discount_amount, coupon_id, message}
POST /api/public/checkout/quote/        {commune, coupon_code} -> totals for the session cart
POST /api/public/checkout/              contact form -> order confirmation
GET  /api/public/customers/lookup/?phone=   checkout form prefill

Rules:
- AllowAny, throttled (public_write); the cart comes from the session
- validation errors come back together as {field: [messages]} (400)
  and nothing is written
- a database failure answers 503 and leaves the cart intact
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from cart.session_cart import SessionCart
from promotions.services.coupons import validate_coupon
from public.serializers import CouponCheckInputSerializer, PublicCustomerSerializer, QuoteInputSerializer
from public.throttles import PublicWriteThrottle
from sales.serializers import CheckoutInputSerializer
from sales.services.checkout_orchestrator import (
    CheckoutContact,
    CheckoutValidationError,
    OrderSubmissionError,
    place_order,
    quote_cart,
)
from sales.services.customers import find_by_phone
from siteconfig.store_settings import load_store_settings

logger = logging.getLogger(__name__)


class _PublicWriteView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicWriteThrottle]


class PublicCouponValidateView(_PublicWriteView):
    @extend_schema(
        request=CouponCheckInputSerializer,
        responses={200: OpenApiResponse(description="{valid, discount_amount, coupon_id, code, message}")},
        description="Validate a coupon against an order total (defaults to the session cart subtotal).",
        tags=["Public"],
    )
    def post(self, request):
        s = CouponCheckInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        order_total = s.validated_data.get("order_total")
        if order_total is None:
            order_total = SessionCart(request.session).subtotal

        result = validate_coupon(s.validated_data["code"], order_total)
        return Response(result.as_payload(), status=status.HTTP_200_OK)


class PublicCheckoutQuoteView(_PublicWriteView):
    @extend_schema(
        request=QuoteInputSerializer,
        responses={200: OpenApiResponse(description="Totals, delivery, minimum-order state")},
        tags=["Public"],
    )
    def post(self, request):
        s = QuoteInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        cart = SessionCart(request.session)
        quote, coupon, coupon_errors = quote_cart(
            lines=cart.lines(),
            commune=s.validated_data["commune"],
            coupon_code=s.validated_data["coupon_code"],
            store_settings=load_store_settings(),
        )

        payload = quote.as_payload()
        payload["item_count"] = cart.item_count
        payload["coupon"] = (
            {"code": coupon.code, "discount_amount": f"{coupon.value:.2f}", "coupon_id": coupon.coupon_id}
            if coupon
            else None
        )
        payload["coupon_errors"] = coupon_errors
        return Response(payload, status=status.HTTP_200_OK)


class PublicCheckoutView(_PublicWriteView):
    @extend_schema(
        request=CheckoutInputSerializer,
        responses={
            201: OpenApiResponse(description="Order confirmation"),
            400: OpenApiResponse(description="{field: [messages]}"),
            503: OpenApiResponse(description="Order could not be stored; retry"),
        },
        tags=["Public"],
    )
    def post(self, request):
        s = CheckoutInputSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        contact = CheckoutContact(
            name=data["name"],
            phone=data["phone"],
            email=data["email"],
            address=data["address"],
            commune=data["commune"],
            notes=data["notes"],
        )

        try:
            placed = place_order(
                cart=SessionCart(request.session),
                contact=contact,
                coupon_code=data["coupon_code"],
            )
        except CheckoutValidationError as exc:
            return Response(exc.errors, status=status.HTTP_400_BAD_REQUEST)
        except OrderSubmissionError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response(placed.as_payload(), status=status.HTTP_201_CREATED)


class PublicCustomerLookupView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [PublicWriteThrottle]

    @extend_schema(
        parameters=[OpenApiParameter(name="phone", type=str, location=OpenApiParameter.QUERY, required=True)],
        responses={
            200: PublicCustomerSerializer,
            404: OpenApiResponse(description="Unknown phone"),
        },
        tags=["Public"],
    )
    def get(self, request):
        customer = find_by_phone(request.query_params.get("phone"))
        if customer is None:
            return Response({"detail": "Cliente no encontrado"}, status=status.HTTP_404_NOT_FOUND)
        return Response(PublicCustomerSerializer(customer).data)
