from django.contrib import admin

from siteconfig.models import SystemConfiguration


@admin.register(SystemConfiguration)
class SystemConfigurationAdmin(admin.ModelAdmin):
    list_display = ("key", "category", "is_active", "updated_at")
    list_filter = ("category", "is_active")
    search_fields = ("key", "description")
