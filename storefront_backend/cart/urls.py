# cart/urls.py

from django.urls import path

from cart.views import (
    CartAddItemView,
    CartClearView,
    CartDetailView,
    CartRemoveItemView,
    CartUpdateItemView,
)

app_name = "cart"

urlpatterns = [
    path("", CartDetailView.as_view(), name="cart-detail"),
    path("items/", CartAddItemView.as_view(), name="cart-add"),
    path("items/<uuid:product_id>/update/", CartUpdateItemView.as_view(), name="cart-update"),
    path("items/<uuid:product_id>/remove/", CartRemoveItemView.as_view(), name="cart-remove"),
    path("clear/", CartClearView.as_view(), name="cart-clear"),
]
