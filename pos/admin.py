from django.contrib import admin
from .models import Order, OrderNumberSequence


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['order_number', 'customer_name', 'drink', 'price', 'status', 'created_at']
    list_filter = ['status', 'drink', 'created_at']
    search_fields = ['customer_name', 'order_number']
    readonly_fields = ['order_number', 'price', 'created_at', 'updated_at', 'started_at', 'completed_at']
    fieldsets = (
        ('Order', {
            'fields': ('order_number', 'customer_name', 'status', 'price')
        }),
        ('Drink', {
            'fields': ('drink', 'milk', 'syrup', 'foam', 'temperature', 'extra_shots', 'notes')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at', 'started_at', 'completed_at')
        }),
    )


admin.site.register(OrderNumberSequence)
