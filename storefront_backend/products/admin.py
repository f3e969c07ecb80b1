# products/admin.py

from django.contrib import admin

from products.models import Category, Product, StockMovement


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "display_order", "is_visible")
    list_filter = ("is_visible",)
    search_fields = ("name",)
    ordering = ("display_order", "name")


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "price", "unit_type", "stock", "is_low_stock", "is_visible")
    list_filter = ("is_visible", "unit_type", "category")
    search_fields = ("name", "description")
    # stock changes go through the inventory endpoints (audit trail)
    readonly_fields = ("stock", "created_at", "updated_at")

    @admin.display(boolean=True, description="Low stock")
    def is_low_stock(self, obj):
        return obj.is_low_stock


@admin.register(StockMovement)
class StockMovementAdmin(admin.ModelAdmin):
    list_display = ("product", "movement_type", "reason", "quantity", "stock_after", "performed_by", "created_at")
    list_filter = ("movement_type", "reason")
    search_fields = ("product__name", "note")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
