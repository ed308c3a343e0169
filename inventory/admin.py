from django.contrib import admin
from .models import (
    InventoryCost,
    InventoryItem,
    InventoryUsageEntry,
    InventoryUsageSession,
    QuantityLog,
    SimpleInventory,
)


@admin.register(InventoryCost)
class InventoryCostAdmin(admin.ModelAdmin):
    list_display = ['item_name', 'category', 'unit_cost', 'unit']
    list_filter = ['category']
    search_fields = ['item_name']


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ['cost_item', 'current_stock', 'reorder_level', 'last_restocked', 'total_cost']
    readonly_fields = ['current_stock', 'total_cost', 'last_restocked']


@admin.register(SimpleInventory)
class SimpleInventoryAdmin(admin.ModelAdmin):
    list_display = ['item_name', 'category', 'current_stock', 'unit', 'reorder_level']
    list_filter = ['category']
    search_fields = ['item_name']
    # Stock edits must go through the API so they are logged
    readonly_fields = ['current_stock']


@admin.register(QuantityLog)
class QuantityLogAdmin(admin.ModelAdmin):
    list_display = ['created_at', 'simple_inventory', 'inventory_item', 'change_type', 'previous_quantity', 'new_quantity', 'change_amount']
    list_filter = ['change_type']

    def has_change_permission(self, request, obj=None):
        return False


class InventoryUsageEntryInline(admin.TabularInline):
    model = InventoryUsageEntry
    extra = 0


@admin.register(InventoryUsageSession)
class InventoryUsageSessionAdmin(admin.ModelAdmin):
    list_display = ['date', 'is_active', 'closed_at']
    inlines = [InventoryUsageEntryInline]
