from django.contrib import admin

from events.models import Company, Event, EventItem, Vendor


class EventItemInline(admin.TabularInline):
    model = EventItem
    extra = 1


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ["name", "created_at"]
    search_fields = ["name"]


@admin.register(Vendor)
class VendorAdmin(admin.ModelAdmin):
    list_display = ["name", "contact_email", "contact_phone"]
    search_fields = ["name", "contact_email"]
    inlines = [EventItemInline]


@admin.register(EventItem)
class EventItemAdmin(admin.ModelAdmin):
    list_display = ["name", "vendor", "created_at"]
    list_filter = ["vendor"]
    search_fields = ["name"]

    def get_readonly_fields(self, request, obj=None):
        # Events copy the vendor of their item at creation.
        if obj is not None:
            return ["vendor"]
        return []


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    """Read-only view of bookings. Events are created and changed by EventService."""

    list_display = ["event_item", "company", "vendor", "status", "date_created"]
    list_filter = ["status", "vendor"]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
