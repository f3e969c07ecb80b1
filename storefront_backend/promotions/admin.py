from django.contrib import admin

from promotions.models import Coupon, CouponUsage, DailyOffer


@admin.register(Coupon)
class CouponAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "discount_type", "value", "used_count", "usage_limit", "is_active")
    list_filter = ("is_active", "discount_type")
    search_fields = ("code", "name")
    readonly_fields = ("used_count",)


@admin.register(CouponUsage)
class CouponUsageAdmin(admin.ModelAdmin):
    list_display = ("coupon", "order_id", "customer", "discount_amount", "used_at")
    search_fields = ("order_id", "coupon__code")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(DailyOffer)
class DailyOfferAdmin(admin.ModelAdmin):
    list_display = ("product", "discount_percentage", "original_price", "discounted_price", "start_date", "end_date", "is_active")
    list_filter = ("is_active",)
    readonly_fields = ("discounted_price",)
