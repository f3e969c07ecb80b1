from django.contrib import admin

from sales.models import Customer, DailyAnalytics, Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("product", "product_name", "unit_type", "quantity", "price", "line_total")
    can_delete = False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "customer_name", "customer_phone", "commune", "status", "total", "created_at")
    list_filter = ("status", "commune")
    search_fields = ("id", "customer_name", "customer_phone")
    readonly_fields = ("subtotal", "discount", "delivery_fee", "total", "coupon_code", "created_at", "updated_at")
    inlines = [OrderItemInline]


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("name", "phone", "email", "commune", "created_at")
    search_fields = ("name", "phone", "email")


@admin.register(DailyAnalytics)
class DailyAnalyticsAdmin(admin.ModelAdmin):
    list_display = ("date", "total_orders", "total_sales", "new_customers")
    ordering = ("-date",)
