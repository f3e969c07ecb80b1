from django.contrib import admin

from store.models import DeliveryZone, StoreLocation


@admin.register(StoreLocation)
class StoreLocationAdmin(admin.ModelAdmin):
    list_display = ("name", "commune", "phone", "is_active")
    list_filter = ("is_active", "commune")
    search_fields = ("name", "address", "commune")


@admin.register(DeliveryZone)
class DeliveryZoneAdmin(admin.ModelAdmin):
    list_display = ("name", "delivery_price", "estimated_time", "is_free_delivery", "is_active")
    list_filter = ("is_active", "is_free_delivery")
    search_fields = ("name",)
